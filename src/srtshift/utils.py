"""
Utility functions for srtshift.

Includes logging setup, file validation helpers, and custom
exception classes.
"""

import logging
import os
import sys
from typing import Optional


# ============================================================================
# Custom Exception Classes
# ============================================================================


class SrtShiftError(Exception):
    """Base exception for all srtshift errors."""

    pass


class InputAccessError(SrtShiftError):
    """Raised when the input subtitle file cannot be read."""

    pass


class OutputAccessError(SrtShiftError):
    """Raised when the output subtitle file cannot be written."""

    pass


class MalformedTimecodeError(SrtShiftError):
    """Raised when a timecode matches neither clock nor frame notation."""

    pass


class NegativeTimestampError(SrtShiftError):
    """Raised when shifting would move a timestamp before 00:00:00,000."""

    pass


class ZeroOffsetError(SrtShiftError):
    """Raised when the new time equals the reference caption's start."""

    pass


class ReferenceCaptionError(SrtShiftError):
    """Raised when no caption exists at or after the reference index."""

    pass


# ============================================================================
# Formatting Helpers
# ============================================================================


def format_offset(millis: int) -> str:
    """
    Format a signed millisecond offset for display.

    Args:
        millis: Offset in milliseconds (may be negative)

    Returns:
        Human-readable offset string

    Example:
        >>> format_offset(-30000)
        '-30.000s'
        >>> format_offset(1568)
        '+1.568s'
    """
    sign = "-" if millis < 0 else "+"
    seconds, ms = divmod(abs(millis), 1000)
    return f"{sign}{seconds}.{ms:03d}s"


# ============================================================================
# Logging Configuration
# ============================================================================


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up logging configuration for srtshift.

    Args:
        verbose: Enable DEBUG level logging if True, otherwise INFO
        log_file: Optional file path to write logs to

    Returns:
        Configured logger instance
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)  # Always DEBUG for file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger = logging.getLogger("srtshift")
    logger.setLevel(log_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    if name.startswith("srtshift."):
        name = name[len("srtshift."):]
    return logging.getLogger(f"srtshift.{name}")


# ============================================================================
# Validation Utilities
# ============================================================================


def validate_file_exists(file_path: str) -> bool:
    """
    Check if a file exists.

    Args:
        file_path: Path to file

    Returns:
        True if file exists, False otherwise
    """
    return os.path.isfile(file_path)
