"""
Standardized Error Handling for Vinifera

Provides consistent error handling patterns across all modules.
"""

import csv
import logging
from typing import Any

import pandas as pd

logger = logging.getLogger(__name__)


class ViniferaError(Exception):
    """Base exception for Vinifera application."""
    pass


class DatasetError(ViniferaError):
    """Flavor dataset errors (missing file, bad format, missing columns)."""
    pass


def handle_dataset_error(error: Exception, operation: str, fallback_value: Any = None) -> Any:
    """
    Standardized flavor dataset error handling.

    The dataset only enriches the report, so every recognised loading
    failure degrades to the fallback value.

    Args:
        error: Exception that occurred
        operation: Description of operation
        fallback_value: Value to return on error

    Returns:
        fallback_value if error is recoverable, otherwise raises
    """
    error_type = type(error).__name__

    # Missing or unreadable file
    if isinstance(error, (FileNotFoundError, IsADirectoryError, PermissionError)):
        logger.error(f"Dataset file unavailable during {operation}: {error}")
        return fallback_value

    # Empty or malformed CSV
    if isinstance(error, (pd.errors.EmptyDataError, pd.errors.ParserError, csv.Error, UnicodeDecodeError)):
        logger.error(f"Dataset could not be parsed during {operation}: {error_type} - {error}")
        return fallback_value

    # Structural problems we raise ourselves
    if isinstance(error, DatasetError):
        logger.error(f"Invalid dataset during {operation}: {error}")
        return fallback_value

    # Unknown errors - log and raise
    logger.error(f"Unexpected error during {operation}: {error_type} - {error}")
    raise ViniferaError(f"Unexpected error during {operation}") from error


# Export key functions and classes
__all__ = [
    'ViniferaError',
    'DatasetError',
    'handle_dataset_error',
]
