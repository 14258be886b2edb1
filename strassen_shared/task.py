"""Flat-buffer boundary of the engine.

Callers hand over two row-major buffers of ``n*n`` doubles with their
declared ``(rows, cols)`` and a pre-allocated output buffer. Everything is
validated before any multiplication happens; the product is then written
into ``out`` in place.
"""
import logging
import time

import numpy as np

from .errors import (
    BufferTooSmall, BufferTypeMismatch, DimensionMismatch, InvalidDimension, VerificationFailed,
)
from .strassen_module import naive_multiply, strassen

VERIFY_TOL = 1e-6


def _dims(dims, label):
    try:
        rows, cols = dims
        if int(rows) != rows or int(cols) != cols:
            raise ValueError(dims)
        rows, cols = int(rows), int(cols)
    except (TypeError, ValueError):
        raise InvalidDimension(f"{label} dims must be integer (rows, cols), got {dims!r}")
    if rows <= 0 or cols <= 0:
        raise InvalidDimension(f"{label} dims must be positive, got {rows}x{cols}")
    if rows != cols:
        raise DimensionMismatch(f"{label} must be square, got {rows}x{cols}")
    return rows


def validate_task(a, b, a_dims, b_dims, out) -> int:
    n_a = _dims(a_dims, "A")
    n_b = _dims(b_dims, "B")
    if n_a != n_b:
        raise DimensionMismatch(f"A is {n_a}x{n_a} but B is {n_b}x{n_b}")
    n = n_a
    if len(a) != n * n or len(b) != n * n:
        raise DimensionMismatch(f"Buffers hold {len(a)} and {len(b)} values; expected {n * n}")
    if len(out) < n * n:
        raise BufferTooSmall(f"Output buffer holds {len(out)} values; need {n * n}")
    if isinstance(out, np.ndarray) and out.dtype != np.float64:
        raise BufferTypeMismatch(f"Output buffer must hold float64, got {out.dtype}")
    return n


def multiply_into(a, b, a_dims, b_dims, out, threshold: int = None, scheme: str = None,
                  logger=None, verify: bool = False) -> int:
    """Write A @ B into ``out``; with ``verify`` the product is checked against the naive loop first."""
    logger = logger or logging.getLogger("strassen")
    n = validate_task(a, b, a_dims, b_dims, out)

    A = np.asarray(a, dtype=np.float64).reshape(n, n)
    B = np.asarray(b, dtype=np.float64).reshape(n, n)

    t0 = time.time()
    C = strassen(A, B, threshold=threshold, scheme=scheme, logger=logger)
    logger.debug(f"multiply_into: n={n} dur_ms={int((time.time() - t0) * 1000)}")

    if verify:
        expected = naive_multiply(A, B)
        if not np.allclose(C, expected, rtol=VERIFY_TOL, atol=VERIFY_TOL):
            worst = float(np.abs(C - expected).max())
            raise VerificationFailed(f"n={n}: max deviation {worst:g} from naive product exceeds {VERIFY_TOL:g}")
        logger.debug(f"multiply_into: n={n} verified against naive product")

    flat = C.ravel()
    if isinstance(out, np.ndarray):
        out[:n * n] = flat
    else:
        out[:n * n] = flat.tolist()
    return n
