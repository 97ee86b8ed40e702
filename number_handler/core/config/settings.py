# File: number_handler/core/config/settings.py

import os

from number_handler.core.errors import ConfigurationError


def env_int(name: str, default: int) -> int:
    """Reads an integer environment variable, rejecting anything non-numeric."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


class Settings:
    # --- Output ---
    RESULT_FILE_NAME: str = os.getenv("NUMBER_HANDLER_RESULT_FILE", "result.txt")

    # --- Input Files ---
    # Only files with this suffix are treated as data files (case-insensitive)
    DATA_FILE_EXTENSION: str = os.getenv("NUMBER_HANDLER_EXTENSION", ".txt")
    FILE_ENCODING: str = os.getenv("NUMBER_HANDLER_ENCODING", "utf-8")

    # --- Generation ---
    FILES_COUNT: int = env_int("NUMBER_HANDLER_FILES_COUNT", 5)

    # Numbers per file: min inclusive, max exclusive
    MIN_NUMBERS_COUNT: int = env_int("NUMBER_HANDLER_MIN_NUMBERS", 100)
    MAX_NUMBERS_COUNT: int = env_int("NUMBER_HANDLER_MAX_NUMBERS", 1001)

    # Value range: min inclusive, max exclusive (32-bit signed by default)
    MIN_NUMBER_VALUE: int = env_int("NUMBER_HANDLER_MIN_VALUE", -2**31)
    MAX_NUMBER_VALUE: int = env_int("NUMBER_HANDLER_MAX_VALUE", 2**31 - 1)

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("NUMBER_HANDLER_LOG_LEVEL", "INFO").upper()


settings = Settings()
