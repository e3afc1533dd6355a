# =============================================================================
# core/models/common.py - Shared Field Types
# =============================================================================
# Calculator forms post raw text fields. These annotated types run every value
# through lib.utils before validation, so "", "abc" or "$1,200" never fail
# with a 422: malformed numbers become 0.
# =============================================================================

from typing import Annotated

from pydantic import BeforeValidator

from lib.utils import parse_int, parse_number

# Float field accepting str | int | float | None
LenientFloat = Annotated[float, BeforeValidator(parse_number)]

# Integer field accepting str | int | float | None, truncated toward zero
LenientInt = Annotated[int, BeforeValidator(parse_int)]
