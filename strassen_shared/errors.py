class StrassenError(ValueError):
    """Caller mistake detected by the engine; never retried."""


class InvalidDimension(StrassenError):
    pass


class DimensionMismatch(StrassenError):
    pass


class BufferTooSmall(StrassenError):
    pass


class BufferTypeMismatch(StrassenError):
    pass


class VerificationFailed(StrassenError):
    pass
