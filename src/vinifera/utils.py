"""
Utility functions for Vinifera.

Includes logging setup, lenient form parsing, and safe arithmetic.
"""

import logging
import math
from typing import Any

from vinifera.config import LOG_FORMAT, LOG_LEVEL

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT
)
logger = logging.getLogger(__name__)


# =======================
# FORM PARSING
# =======================

def parse_float(raw_value: Any, field_name: str = "value", default: float = 0.0) -> float:
    """
    Parse a free-text form value as a float.

    Blank, unparsable and non-finite values fall back to the default
    instead of raising.

    Args:
        raw_value: Raw form value (usually a string)
        field_name: Field name for logging
        default: Value to return when parsing fails

    Returns:
        Parsed float or default
    """
    if raw_value is None:
        return default

    if isinstance(raw_value, bool):
        logger.debug(f"Ignoring boolean for {field_name}, using {default}")
        return default

    try:
        value = float(str(raw_value).strip())
    except ValueError:
        logger.debug(f"Could not parse {field_name}={raw_value!r}, using {default}")
        return default

    if not math.isfinite(value):
        logger.debug(f"Non-finite {field_name}={raw_value!r}, using {default}")
        return default

    return value


def parse_int(raw_value: Any, field_name: str = "value", default: int = 0) -> int:
    """
    Parse a free-text form value as a whole number.

    Only integer text is accepted ("14", " 7 "); "14.5" or "two weeks"
    fall back to the default.
    """
    if raw_value is None or isinstance(raw_value, bool):
        return default

    if isinstance(raw_value, int):
        return raw_value

    try:
        return int(str(raw_value).strip())
    except ValueError:
        logger.debug(f"Could not parse {field_name}={raw_value!r}, using {default}")
        return default


def clamp_non_negative(value: float, field_name: str = "value"):
    """Negative quantities make no sense for days or sugar; treat them as zero."""
    if value < 0:
        logger.debug(f"Negative {field_name}={value}, using 0")
        return type(value)(0)
    return value


# =======================
# ARITHMETIC
# =======================

def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Safely divide two numbers, handling zero division.

    Args:
        numerator: Number to divide
        denominator: Number to divide by
        default: Value to return if division by zero

    Returns:
        Result of division or default
    """
    if denominator == 0:
        logger.warning(f"Division by zero: {numerator}/{denominator}, returning {default}")
        return default
    return numerator / denominator
