"""
Runtime settings.

Values come from the environment, optionally seeded from a .env file in
the working directory.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Settings for logging and the self-test harness.

    Attributes:
        log_level: Name of the logging level for the command-line entry point
        selftest_tolerance: Absolute tolerance for matrix comparisons in the self-test
    """
    log_level: str = "WARNING"
    selftest_tolerance: float = 1e-9


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Build settings from the environment.

    Args:
        env_file: Optional .env path; defaults to ./.env when present.
            Variables already set in the environment take precedence.

    Returns:
        Settings: Resolved settings
    """
    load_dotenv(env_file or Path.cwd() / '.env')

    defaults = Settings()
    tolerance = os.getenv("CACHEMATRIX_SELFTEST_TOLERANCE")
    try:
        selftest_tolerance = float(tolerance) if tolerance else defaults.selftest_tolerance
    except ValueError:
        raise ValueError(f"CACHEMATRIX_SELFTEST_TOLERANCE must be a number, got {tolerance!r}") from None

    log_level = (os.getenv("CACHEMATRIX_LOG_LEVEL") or defaults.log_level).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"CACHEMATRIX_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Settings(
        log_level=log_level,
        selftest_tolerance=selftest_tolerance,
    )
