import logging
import os

from .exceptions import ConfigurationError

# ============================================================================
# CORE CONSTANTS
# ============================================================================

DEFAULT_ALPHABET: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_MIN_LENGTH: int = 0

# Smallest usable alphabet: one separator plus a base-2 digit set.
MIN_ALPHABET_LENGTH: int = 3

# Upper bound for the minimum identifier length.
MIN_LENGTH_LIMIT: int = 255

# ============================================================================
# CONFIGURATION CLASS
# ============================================================================

class Config:
    """Environment driven configuration for the process-wide codec"""
    ALPHABET: str = os.getenv("SQIDS_ALPHABET", DEFAULT_ALPHABET)
    MIN_LENGTH: str = os.getenv("SQIDS_MIN_LENGTH", str(DEFAULT_MIN_LENGTH))

    # Logging (CLI only, the library never configures handlers)
    LOG_LEVEL: str = os.getenv("SQIDS_LOG_LEVEL", "WARNING")
    LOG_MAX_BYTES: int = 10_485_760
    LOG_BACKUP_COUNT: int = 5

    @classmethod
    def min_length(cls) -> int:
        try:
            return int(cls.MIN_LENGTH)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"SQIDS_MIN_LENGTH must be an integer, got {cls.MIN_LENGTH!r}") from e

    @classmethod
    def log_level(cls) -> str:
        level = cls.LOG_LEVEL.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"SQIDS_LOG_LEVEL is not a logging level: {cls.LOG_LEVEL}")
        return level

    @classmethod
    def validate(cls):
        """Validate configuration before building the shared codec"""
        cls.min_length()
        cls.log_level()
