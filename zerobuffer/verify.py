# ==============================================
# Buffer Verification
# ==============================================
#
# PURPOSE:
#   Check that every byte of a buffer holds the same value.
#
# FUNCTIONS:
# ----------
# - iter_divergences(buffer) -> Iterator[(index, value)]
#     Lazy, index-ascending scan yielding each byte that differs
#     from buffer[0]. A new call starts a new scan.
#
# - is_uniform(buffer) -> bool
#     True iff iter_divergences yields nothing. Never raises.
#
# - verify_uniform(buffer) -> bool
#     Returns True, or raises NonUniformBufferError on the first
#     divergence. Accepts any common value, not only zero.
#
# - verify_zeroed(buffer) -> bool
#     Same, but the reference value is 0 instead of buffer[0].
#
# All functions take bytes, bytearray or memoryview (strided views
# included) and never modify the buffer.
#
# ==============================================

import logging
from typing import Iterator, Optional, Tuple, Union

from .errors import NonUniformBufferError

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes_view(buffer: BytesLike) -> memoryview:
    view = memoryview(buffer)
    # cast() only works on C-contiguous memory; copy strided views
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    # Multi-byte formats (e.g. array('i')) would yield ints > 255
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def iter_divergences(
    buffer: BytesLike,
    reference: Optional[int] = None
) -> Iterator[Tuple[int, int]]:
    """
    Yield (index, value) for every byte that differs from the reference.

    Args:
        buffer: The bytes to scan
        reference: Value to compare against. Defaults to buffer[0].

    Yields:
        (index, value) pairs in ascending index order
    """
    view = _as_bytes_view(buffer)
    if len(view) == 0:
        return
    expected = view[0] if reference is None else reference
    for index, value in enumerate(view):
        if value != expected:
            yield index, value


def is_uniform(buffer: BytesLike) -> bool:
    """Return True if every byte equals the first byte."""
    return next(iter_divergences(buffer), None) is None


def _verify(buffer: BytesLike, reference: Optional[int]) -> bool:
    view = _as_bytes_view(buffer)
    expected = reference
    if expected is None:
        expected = view[0] if len(view) else 0

    for index, value in iter_divergences(view, expected):
        logger.debug("Divergence at index %d: %d != %d", index, value, expected)
        raise NonUniformBufferError(index, expected, value)

    logger.debug("Verified %d bytes equal to %d", len(view), expected)
    return True


def verify_uniform(buffer: BytesLike) -> bool:
    """
    Assert that every byte in the buffer equals the first byte.

    Args:
        buffer: The bytes to check

    Returns:
        True when the buffer is uniform

    Raises:
        NonUniformBufferError: on the lowest index that differs
    """
    return _verify(buffer, None)


def verify_zeroed(buffer: BytesLike) -> bool:
    """
    Assert that every byte in the buffer is zero.

    Raises:
        NonUniformBufferError: on the lowest index holding a non-zero byte
    """
    return _verify(buffer, 0)
