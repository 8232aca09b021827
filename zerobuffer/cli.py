# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Run the zero buffer check as a process.
#
# USAGE:
# ------
#   python -m zerobuffer
#   zerobuffer
#
#   No arguments besides --help. Prints "passed!" and exits 0 on success.
#   On an allocation or verification failure the error is logged
#   to stderr and the process exits 1 without printing "passed!".
#
# ==============================================

import sys
import logging
import argparse
from typing import Optional

from .config import get_config
from .check import ZeroBufferCheck
from .errors import AllocationError, NonUniformBufferError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def run() -> int:
    """
    Run the check and map failures to an exit status.

    Returns:
        EXIT_OK or EXIT_FAILURE
    """
    config = get_config()
    setup_logging(config.logging.level)

    try:
        ZeroBufferCheck(config).run()
    except AllocationError as e:
        logger.error("Allocation failed: %s", e)
        return EXIT_FAILURE
    except NonUniformBufferError as e:
        logger.error("Verification failed: %s", e)
        return EXIT_FAILURE

    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Parser with no options; only --help is accepted."""
    return argparse.ArgumentParser(
        prog="zerobuffer",
        description="Allocate a zero-initialized buffer and verify every byte matches the first.",
    )


def main(argv: Optional[list] = None) -> None:
    """Console script entry point."""
    build_parser().parse_args(argv)
    sys.exit(run())


if __name__ == "__main__":
    main()
