import numpy as np

from .errors import DimensionMismatch, InvalidDimension


def _same_shape(X, Y):
    if X.shape != Y.shape:
        raise DimensionMismatch(f"Block shapes differ: {X.shape} vs {Y.shape}")


def add(X: np.ndarray, Y: np.ndarray) -> np.ndarray:
    _same_shape(X, Y)
    return X + Y


def subtract(X: np.ndarray, Y: np.ndarray) -> np.ndarray:
    _same_shape(X, Y)
    return X - Y


def split(M: np.ndarray):
    """Return the four quadrants of M as independent copies (Q11, Q12, Q21, Q22)."""
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise DimensionMismatch(f"split needs a square block, got {M.shape}")
    n = M.shape[0]
    if n == 0 or n % 2:
        raise InvalidDimension(f"split needs an even, non-zero dimension, got {n}")
    mid = n // 2
    return (M[:mid, :mid].copy(), M[:mid, mid:].copy(),
            M[mid:, :mid].copy(), M[mid:, mid:].copy())


def merge(Q11, Q12, Q21, Q22) -> np.ndarray:
    for Q in (Q12, Q21, Q22):
        _same_shape(Q11, Q)
    if Q11.ndim != 2 or Q11.shape[0] != Q11.shape[1]:
        raise DimensionMismatch(f"merge needs square quadrants, got {Q11.shape}")
    n2 = Q11.shape[0]
    M = np.empty((n2*2, n2*2), dtype=np.result_type(Q11, Q12, Q21, Q22))
    M[:n2, :n2] = Q11;  M[:n2, n2:] = Q12
    M[n2:, :n2] = Q21;  M[n2:, n2:] = Q22
    return M
