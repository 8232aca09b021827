# ==============================================
# Zero Buffer Check
# ==============================================
#
# Package Structure:
#
# zerobuffer/
# ├── buffer.py          # Allocate a zero-initialized buffer
# ├── verify.py          # Uniformity / zero checks over a buffer
# ├── check.py           # ZeroBufferCheck orchestrator
# ├── errors.py          # Exception hierarchy
# ├── config.py          # Configuration management
# ├── logging_config.py  # Logger setup
# └── cli.py             # Command line entry point
#
# ==============================================

from .buffer import allocate, DEFAULT_BUFFER_SIZE
from .verify import iter_divergences, is_uniform, verify_uniform, verify_zeroed
from .check import ZeroBufferCheck
from .errors import ZeroBufferError, AllocationError, NonUniformBufferError

__version__ = "0.1.0"

__all__ = [
    "allocate",
    "DEFAULT_BUFFER_SIZE",
    "iter_divergences",
    "is_uniform",
    "verify_uniform",
    "verify_zeroed",
    "ZeroBufferCheck",
    "ZeroBufferError",
    "AllocationError",
    "NonUniformBufferError",
]
