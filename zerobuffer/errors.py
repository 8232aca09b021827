# ==============================================
# Errors
# ==============================================
#
# CLASSES:
# --------
# - ZeroBufferError(Exception)
#     Base class for everything raised by this package.
#
# - AllocationError(ZeroBufferError, MemoryError)
#     The host could not provide a zero-initialized buffer.
#     Attributes: size
#
# - NonUniformBufferError(ZeroBufferError, AssertionError)
#     A byte differs from the reference byte.
#     Attributes: index, expected, actual
#
# Both errors are fatal: nothing in the package retries or
# recovers from them. Only cli.main turns them into an exit status.
#
# ==============================================


class ZeroBufferError(Exception):
    """Base class for zerobuffer errors."""


class AllocationError(ZeroBufferError, MemoryError):
    """Raised when a buffer of the requested size cannot be allocated."""

    def __init__(self, size: int, reason: str = ""):
        self.size = size
        message = f"Could not allocate {size} zero-initialized bytes"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NonUniformBufferError(ZeroBufferError, AssertionError):
    """
    Raised on the first byte that does not match the reference byte.

    Subclasses AssertionError so callers treating the check as an
    assertion (``except AssertionError``) still catch it.
    """

    def __init__(self, index: int, expected: int, actual: int):
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Byte at index {index} is {actual}, expected {expected}"
        )
