import logging

import numpy as np

from .config import PADDING_SCHEMES
from .errors import DimensionMismatch, InvalidDimension


def next_pow2(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def next_even_target(n: int, threshold: int) -> int:
    """Smallest m * 2**k >= n with m <= threshold, so every split above the base case is even."""
    m, k = n, 0
    while m > threshold:
        m = (m + 1) // 2
        k += 1
    return m << k


def padded_size(n: int, threshold: int, scheme: str = "pow2") -> int:
    if n <= 0:
        raise InvalidDimension(f"Dimension must be positive, got {n}")
    if threshold < 1:
        raise InvalidDimension(f"Base-case threshold must be >= 1, got {threshold}")
    if scheme == "pow2":
        return next_pow2(n)
    if scheme == "even":
        return next_even_target(n, threshold)
    raise ValueError(f"Unknown padding scheme {scheme!r}; expected one of {PADDING_SCHEMES}")


def pad_matrix(M: np.ndarray, size: int) -> np.ndarray:
    n = M.shape[0]
    if size < n:
        raise InvalidDimension(f"Cannot pad {n}x{n} down to {size}x{size}")
    padded = np.zeros((size, size), dtype=M.dtype)
    padded[:n, :n] = M
    return padded


def check_square_pair(A: np.ndarray, B: np.ndarray) -> int:
    if A.ndim != 2 or B.ndim != 2:
        raise DimensionMismatch(f"A,B must be 2-D; got A{A.shape} B{B.shape}")
    if A.shape[0] != A.shape[1] or B.shape[0] != B.shape[1]:
        raise DimensionMismatch(f"A,B must be square; got A{A.shape} B{B.shape}")
    if A.shape != B.shape:
        raise DimensionMismatch(f"A,B must be the same size; got A{A.shape} B{B.shape}")
    n = A.shape[0]
    if n == 0:
        raise InvalidDimension("Input matrices cannot be empty.")
    return n


def pad_to_square(A: np.ndarray, B: np.ndarray, threshold: int, scheme: str = "pow2", logger=None):
    logger = logger or logging.getLogger("strassen")
    n = check_square_pair(A, B)
    P = padded_size(n, threshold, scheme)
    if P == n:
        logger.debug(f"No padding needed (n={n}, scheme={scheme})")
        return A, B, n
    logger.info(f"Padding from {n} to {P} ({scheme})")
    return pad_matrix(A, P), pad_matrix(B, P), n


def unpad(C: np.ndarray, n: int) -> np.ndarray:
    if n <= 0 or n > C.shape[0]:
        raise InvalidDimension(f"Cannot unpad {C.shape[0]}x{C.shape[0]} to {n}x{n}")
    return C[:n, :n].copy()
