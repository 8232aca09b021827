# ==============================================
# ZeroBufferCheck (Orchestrator)
# ==============================================
#
# PURPOSE:
#   Run the whole check in order:
#     1. allocate()  → zero-filled buffer of config.buffer.size bytes
#     2. verify()    → every byte equals the first (or zero, if strict)
#     3. report()    → write "passed!" to the output stream
#
# FAILURE:
#   AllocationError and NonUniformBufferError propagate unchanged.
#   report() refuses to run unless verify() succeeded, so the
#   success line is never written after a failure.
#
# USAGE:
# ------
#   from zerobuffer.check import ZeroBufferCheck
#   ZeroBufferCheck().run()
#
# ==============================================

import sys
import logging
from typing import Optional, TextIO

from .config import AppConfig, get_config
from .buffer import allocate
from .verify import verify_uniform, verify_zeroed

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "passed!"


class ZeroBufferCheck:
    """
    Allocates a zero-initialized buffer and validates that it is uniform.
    """

    def __init__(self, config: Optional[AppConfig] = None, stream: Optional[TextIO] = None):
        """
        Args:
            config: Optional configuration. If None, loads from environment.
            stream: Output for the success message. Defaults to sys.stdout.
        """
        self._config = config or get_config()
        self._stream = stream
        self._buffer: Optional[bytearray] = None
        self._verified = False

    @property
    def buffer(self) -> Optional[bytearray]:
        """The owned buffer, or None before allocate()."""
        return self._buffer

    def allocate(self) -> bytearray:
        """Allocate the buffer and take ownership of it."""
        self._buffer = allocate(self._config.buffer.size)
        self._verified = False
        return self._buffer

    def verify(self) -> bool:
        """
        Verify the owned buffer.

        Returns:
            True when the buffer passes

        Raises:
            RuntimeError: allocate() has not been called
            NonUniformBufferError: a byte diverges
        """
        if self._buffer is None:
            raise RuntimeError("No buffer allocated; call allocate() first")

        self._verified = False
        if self._config.buffer.strict_zero:
            verify_zeroed(self._buffer)
        else:
            verify_uniform(self._buffer)
        self._verified = True
        return True

    def report(self) -> None:
        """Write the success message once verification has passed."""
        if not self._verified:
            raise RuntimeError("Buffer has not been verified")
        stream = self._stream if self._stream is not None else sys.stdout
        print(SUCCESS_MESSAGE, file=stream)

    def run(self) -> bool:
        """
        Allocate, verify and report.

        Returns:
            True on success. Failures raise.
        """
        self.allocate()
        logger.debug("Checking %d bytes", len(self._buffer))
        self.verify()
        self.report()
        return True
