# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: Lenient numeric parsing for calculator form input
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import parse_int, parse_number, safe_divide

__all__ = [
    "parse_int",
    "parse_number",
    "safe_divide",
]
