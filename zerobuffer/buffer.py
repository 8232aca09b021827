# ==============================================
# Buffer Allocation
# ==============================================
#
# PURPOSE:
#   Allocate a fixed-length, owned, contiguous run of bytes that is
#   guaranteed to be zero at the moment it is handed back.
#
# FUNCTION:
# ---------
# - allocate(size: int = 4096) -> bytearray
#     size must be a positive int.
#     Raises TypeError / ValueError for bad sizes and AllocationError
#     when the host runs out of memory.
#
# NOTES:
# ------
#   bytearray(n) is the zero-filling primitive. The buffer is never
#   created uninitialized and filled afterwards.
#
# ==============================================

import logging

from .errors import AllocationError

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 4096


def allocate(size: int = DEFAULT_BUFFER_SIZE) -> bytearray:
    """
    Allocate a zero-initialized buffer.

    Args:
        size: Number of bytes, must be > 0

    Returns:
        A bytearray of ``size`` bytes, all 0

    Raises:
        TypeError: size is not an int
        ValueError: size is not positive
        AllocationError: the host cannot satisfy the request
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"Buffer size must be an int, got {type(size).__name__}")
    if size <= 0:
        raise ValueError(f"Buffer size must be positive, got {size}")

    try:
        buffer = bytearray(size)
    except (MemoryError, OverflowError) as e:
        raise AllocationError(size, str(e)) from e

    logger.debug("Allocated %d zero-initialized bytes", size)
    return buffer
