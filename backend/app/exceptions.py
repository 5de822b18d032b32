"""
ScholarHub Backend — Application Errors
=========================================

What:  The errors services and dependencies raise on known failures.
How:   Every error has a client-safe `message` and a `context` dict for the
       logs. main.register_exception_handlers() turns each class into a
       JSON error body with its own status code.

Hierarchy:
    ScholarHubError (base)       → 500
    ├── ValidationError          → 400 Bad Request
    ├── UnauthorizedError        → 401 Unauthorized
    ├── ForbiddenError           → 403 Forbidden
    ├── PaymentServiceError      → 502 Bad Gateway
    └── DatabaseError            → 500 Internal Server Error

Anything outside this hierarchy falls through to the catch-all handler and
becomes a generic 500 with the stack trace logged server-side.
"""

from typing import Any, Dict, Optional


class ScholarHubError(Exception):
    """
    Base class for every ScholarHub error.

    Attributes:
        message:  Client-safe description; `default_message` when not given
        context:  Debug details for the server log
    """

    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ScholarHubError):
    """
    Client input rejected outside the pydantic models, e.g. a path id that
    is not 24 hex characters. Body schema errors stay FastAPI's 422.
    """

    default_message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        details = dict(context or {})
        if field:
            details["field"] = field
        super().__init__(message=message, context=details)
        self.field = field


class UnauthorizedError(ScholarHubError):
    """
    No usable access token: header missing or malformed, bad signature,
    expired. The reason goes in context, never in the response.
    """

    default_message = "Unauthorized access"


class ForbiddenError(ScholarHubError):
    """Valid token, but the stored role (or the path email) does not match."""

    default_message = "Forbidden access"


class PaymentServiceError(ScholarHubError):
    """
    Stripe rejected the request or could not be reached.

    The message is Stripe's user-facing message when it has one.
    """

    default_message = "Payment processor request failed"


class DatabaseError(ScholarHubError):
    """
    A statement failed in the driver.

    Clients only ever see a generic message; SQL and constraint names stay
    in the server log.
    """

    default_message = "A database error occurred. Please try again later."
