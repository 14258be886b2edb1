import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from . import config
from .block_algebra import add, subtract, split, merge
from .errors import InvalidDimension
from .padding import check_square_pair, pad_to_square, unpad


def check_reducible(n: int, threshold: int):
    """Every level above the base case must halve evenly."""
    if n <= 0:
        raise InvalidDimension(f"Dimension must be positive, got {n}")
    if threshold < 1:
        raise InvalidDimension(f"Base-case threshold must be >= 1, got {threshold}")
    m = n
    while m > threshold:
        if m % 2:
            raise InvalidDimension(f"n={n} hits odd block {m} above threshold {threshold}")
        m //= 2


def naive_multiply(A, B) -> np.ndarray:
    a = np.asarray(A, dtype=np.float64).tolist()
    b = np.asarray(B, dtype=np.float64).tolist()
    n = len(a)
    C = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            s = 0.0
            for k in range(n):
                s += a[i][k] * b[k][j]
            C[i, j] = s
    return C


def _products(A, B, threshold, logger, depth, parallel_depth):
    A11, A12, A21, A22 = split(A)
    B11, B12, B21, B22 = split(B)

    operands = [
        (add(A11, A22),      add(B11, B22)),        # M1
        (add(A21, A22),      B11),                  # M2
        (A11,                subtract(B12, B22)),   # M3
        (A22,                subtract(B21, B11)),   # M4
        (add(A11, A12),      B22),                  # M5
        (subtract(A21, A11), add(B11, B12)),        # M6
        (subtract(A12, A22), add(B21, B22)),        # M7
    ]
    del A11, A12, A21, A22, B11, B12, B21, B22

    if parallel_depth > 0:
        # fork-join: one executor per level, joined before the combine
        with ThreadPoolExecutor(max_workers=7) as ex:
            futures = [ex.submit(strassen_square, X, Y, threshold, logger, depth+1, parallel_depth-1)
                       for X, Y in operands]
            del operands
            return [f.result() for f in futures]

    M = []
    while operands:
        X, Y = operands.pop(0)
        M.append(strassen_square(X, Y, threshold, logger, depth+1))
        del X, Y
    return M


def strassen_square(A: np.ndarray, B: np.ndarray, threshold: int, logger=None,
                    depth: int = 0, parallel_depth: int = 0) -> np.ndarray:
    logger = logger or logging.getLogger("strassen")
    if depth == 0:
        check_reducible(check_square_pair(A, B), threshold)
    n = A.shape[0]
    if n <= threshold:
        logger.debug(f"[depth={depth}] base n={n}")
        return A.dot(B)
    if n % 2:
        raise InvalidDimension(f"[depth={depth}] odd block n={n} above threshold {threshold}")

    logger.debug(f"[depth={depth}] split n={n} -> {n // 2}")
    M1, M2, M3, M4, M5, M6, M7 = _products(A, B, threshold, logger, depth, parallel_depth)

    C11 = M1 + M4 - M5 + M7
    C12 = M3 + M5
    C21 = M2 + M4
    C22 = M1 - M2 + M3 + M6
    del M1, M2, M3, M4, M5, M6, M7
    return merge(C11, C12, C21, C22)


def strassen(A, B, threshold: int = None, scheme: str = None, logger=None,
             parallel_depth: int = None) -> np.ndarray:
    """Multiply two square matrices of any size with Strassen's algorithm.

    Inputs are padded with zeros to a size that halves evenly down to
    ``threshold`` (next power of two, or the ``"even"`` scheme), multiplied,
    and the top-left ``n x n`` block of the product is returned as a new
    float64 array. Arguments left as ``None`` come from the app settings.
    """
    threshold = config.STRASSEN_THRESHOLD if threshold is None else int(threshold)
    scheme = config.PADDING_SCHEME if scheme is None else scheme
    parallel_depth = config.PARALLEL_DEPTH if parallel_depth is None else int(parallel_depth)
    logger = logger or logging.getLogger("strassen")

    A = np.asarray(A, dtype=np.float64)
    B = np.asarray(B, dtype=np.float64)
    Ap, Bp, n = pad_to_square(A, B, threshold, scheme, logger)
    check_reducible(Ap.shape[0], threshold)

    Cpad = strassen_square(Ap, Bp, threshold, logger, parallel_depth=parallel_depth)
    return unpad(Cpad, n)
