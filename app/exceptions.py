# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error body carries an "error" message the chat widget and calculator
# pages can show directly, plus a machine-readable "code".
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class FinnaCalcException(Exception):
    """
    Base exception for the FinnaCalc API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "FINNACALC_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class MissingParameterError(FinnaCalcException):
    """Raised when a required request parameter is absent or blank."""

    def __init__(self, parameter: str, message: str | None = None):
        super().__init__(
            message=message or f"{parameter.capitalize()} is required",
            code="MISSING_PARAMETER",
            status_code=400,
            suggestion=f"Provide a non-empty '{parameter}' value",
            details={"parameter": parameter},
        )


class InvalidCalculatorInputError(FinnaCalcException):
    """Raised when calculator inputs cannot produce a meaningful result."""

    def __init__(self, calculator: str, message: str):
        super().__init__(
            message=message,
            code="INVALID_INPUT",
            status_code=400,
            details={"calculator": calculator},
        )


# =============================================================================
# Upstream Provider Exceptions
# =============================================================================

class ApiKeyNotConfiguredError(FinnaCalcException):
    """Raised when a provider API key is missing from the environment."""

    def __init__(self, setting_name: str):
        super().__init__(
            message="API key is not configured on the server.",
            code="API_KEY_NOT_CONFIGURED",
            status_code=500,
            suggestion=f"Set {setting_name} in the environment or .env file",
            details={"setting": setting_name},
        )


class UpstreamRateLimitError(FinnaCalcException):
    """Raised when a provider reports throttling or an exhausted quota."""

    def __init__(self, provider: str, message: str | None = None):
        super().__init__(
            message=message or "API limit may have been reached. Please try again later.",
            code="UPSTREAM_RATE_LIMIT",
            status_code=429,
            suggestion="Wait a minute before retrying",
            details={"provider": provider},
        )


class UpstreamDataNotFoundError(FinnaCalcException):
    """Raised when a provider answered but returned no usable data."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="DATA_NOT_FOUND",
            status_code=404,
            suggestion="Check that the symbol or search terms are correct",
            details=details,
        )


class UpstreamServiceError(FinnaCalcException):
    """Raised when a provider call fails (network, bad status, bad JSON)."""

    def __init__(self, provider: str, message: str, error: str | None = None):
        details = {"provider": provider}
        if error:
            details["error"] = error
        super().__init__(
            message=message,
            code="UPSTREAM_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details=details,
        )


class EmailDeliveryError(FinnaCalcException):
    """Raised when the email provider rejects a send request."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="EMAIL_DELIVERY_FAILED",
            status_code=500,
        )


class ChatServiceError(FinnaCalcException):
    """Raised when the language-model provider fails to produce a reply."""

    def __init__(self, message: str, error: str | None = None):
        super().__init__(
            message=message,
            code="CHAT_ERROR",
            status_code=500,
            details={"error": error} if error else None,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def finnacalc_exception_handler(
    request: Request,
    exc: FinnaCalcException
) -> JSONResponse:
    """
    Convert FinnaCalcException to JSON response.

    Returns structured error with:
    - error: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Numeric fields are lenient, so this only fires for a malformed body or
    an unknown enum value (filing status, payment frequency, ...).
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "error": "Invalid request",
            "code": "VALIDATION_ERROR",
            "details": {"errors": errors},
        }
    )
