# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# Calculator forms send whatever the user typed ("$1,200", "", "abc"), so
# every numeric field goes through the lenient parsers below.
# =============================================================================

import math
import re
from typing import Any


# Currency symbols and thousands separators; anything else ends the number
_FORMATTING = re.compile(r"[$€£¥,]")
_LEADING_FLOAT = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


# =============================================================================
# Number Parsing
# =============================================================================

def parse_number(value: Any) -> float:
    """
    Parse user-entered numeric input, defaulting to 0.0.

    Drops currency symbols and thousands separators, trims whitespace, then
    reads the leading number (optionally with an exponent). Whatever follows
    it is ignored, so "12abc3" is 12 and "5 000" is 5. Never raises.

    Args:
        value: Raw field value (str, int, float or None)

    Returns:
        Parsed float, or 0.0 when the input is empty, malformed or non-finite

    Example:
        parse_number("$1,200.50")  # 1200.5
        parse_number("1e5")        # 100000.0
        parse_number("12abc")      # 12.0
        parse_number("")           # 0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # Integers beyond the float range
            return 0.0
        return number if math.isfinite(number) else 0.0

    cleaned = _FORMATTING.sub("", str(value)).strip()
    match = _LEADING_FLOAT.match(cleaned)
    if not match:
        return 0.0

    try:
        number = float(match.group(0))
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def parse_int(value: Any) -> int:
    """
    Parse user-entered integer input, truncating toward zero.

    "12.9" -> 12, "" -> 0.
    """
    return int(parse_number(value))


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 instead of raising on a zero denominator."""
    if denominator == 0:
        return 0.0
    return numerator / denominator
