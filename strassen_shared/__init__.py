from .errors import (
    StrassenError, InvalidDimension, DimensionMismatch, BufferTooSmall,
    BufferTypeMismatch, VerificationFailed,
)
from .strassen_module import strassen, strassen_square, naive_multiply
from .task import multiply_into, validate_task

__all__ = [
    "StrassenError", "InvalidDimension", "DimensionMismatch", "BufferTooSmall",
    "BufferTypeMismatch", "VerificationFailed",
    "strassen", "strassen_square", "naive_multiply",
    "multiply_into", "validate_task",
]
