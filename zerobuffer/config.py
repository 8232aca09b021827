# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file.
#   Every value has a default, so with nothing set the check
#   allocates 4096 bytes and logs only warnings and errors.
#
# CLASSES:
# --------
# - BufferConfig (dataclass)
#     size: int             (default 4096)
#     strict_zero: bool     (default False)
#
# - LoggingConfig (dataclass)
#     level: str            (default "WARNING")
#
# - AppConfig (dataclass)
#     buffer: BufferConfig
#     logging: LoggingConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the singleton (used by tests).
#
# ENVIRONMENT:
# ------------
#   ZEROBUFFER_SIZE, ZEROBUFFER_STRICT_ZERO, ZEROBUFFER_LOG_LEVEL
#
# ==============================================

import os
import logging
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

from .buffer import DEFAULT_BUFFER_SIZE

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class BufferConfig:
    """Buffer allocation and verification settings."""
    size: int = DEFAULT_BUFFER_SIZE
    strict_zero: bool = False  # Compare against 0 instead of the first byte


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "WARNING"


@dataclass
class AppConfig:
    """Main application configuration."""
    buffer: BufferConfig = field(default_factory=BufferConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _parse_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {raw!r}")
    return level


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ValueError: an environment variable holds an invalid value
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    size = _parse_int("ZEROBUFFER_SIZE", DEFAULT_BUFFER_SIZE)
    if size <= 0:
        raise ValueError(f"ZEROBUFFER_SIZE must be positive, got {size}")

    buffer_config = BufferConfig(
        size=size,
        strict_zero=_parse_bool("ZEROBUFFER_STRICT_ZERO", False)
    )

    logging_config = LoggingConfig(
        level=_parse_level("ZEROBUFFER_LOG_LEVEL", "WARNING")
    )

    _config_instance = AppConfig(
        buffer=buffer_config,
        logging=logging_config
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
