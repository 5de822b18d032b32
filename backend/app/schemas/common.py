"""
ScholarHub Backend — Shared Pydantic Schemas
==============================================

What:  Response shapes shared by every collection router, plus the small
       request/response models of the token, payment and health endpoints.
Why:   The web client reads write results by their document-store names
       (insertedId, modifiedCount, deletedCount), so every write endpoint
       returns one of the three result models below.

Field naming:
    Python attributes are snake_case. Where the client uses another name the
    field carries a serialization alias, and `client_field()` additionally
    accepts both spellings on input.
"""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


def client_field(client_name: str, attribute: str, default: Any = None, **kwargs: Any) -> Any:
    """
    Field that reads `client_name` or `attribute` and writes `client_name`.

    Example:
        user_email: str = client_field("userEmail", "user_email", ...)
    """
    return Field(
        default,
        validation_alias=AliasChoices(client_name, attribute),
        serialization_alias=client_name,
        **kwargs,
    )


class DocumentModel(BaseModel):
    """
    Base for every stored record returned to the client.

    The id is exposed as `_id`, the name the web client stores and echoes
    back in URLs.
    """
    id: str = client_field("_id", "id", ...)

    model_config = ConfigDict(from_attributes=True)


class WriteModel(BaseModel):
    """Base for request bodies: unknown fields are dropped, never stored."""

    model_config = ConfigDict(extra="ignore")


# ══════════════════════════════════════════════════════════════════════════
# Write Results
# ══════════════════════════════════════════════════════════════════════════


class InsertResult(BaseModel):
    """Returned by every create endpoint."""
    acknowledged: bool = True
    inserted_id: Optional[str] = client_field("insertedId", "inserted_id")


class UpdateResult(BaseModel):
    """
    Returned by every update endpoint.

    matched_count is 0 when no row has the id; modified_count is 0 when the
    row already held the written values.
    """
    acknowledged: bool = True
    matched_count: int = client_field("matchedCount", "matched_count", ...)
    modified_count: int = client_field("modifiedCount", "modified_count", ...)
    upserted_id: Optional[str] = client_field("upsertedId", "upserted_id")
    upserted_count: int = client_field("upsertedCount", "upserted_count", 0)


class DeleteResult(BaseModel):
    """Returned by every delete endpoint."""
    acknowledged: bool = True
    deleted_count: int = client_field("deletedCount", "deleted_count", ...)


# ══════════════════════════════════════════════════════════════════════════
# Tokens & Payments
# ══════════════════════════════════════════════════════════════════════════


class TokenRequest(BaseModel):
    """
    Identity claims to sign. `email` is required because the role checks
    look users up by it; any other claim is signed as given.
    """
    email: str = Field(min_length=1, description="Caller's email address")

    model_config = ConfigDict(extra="allow")


class TokenResponse(BaseModel):
    token: str


class PaymentIntentRequest(BaseModel):
    # Major currency units, e.g. 19.99
    price: float = Field(allow_inf_nan=False, description="Price in major currency units")


class PaymentIntentResponse(BaseModel):
    client_secret: Optional[str] = client_field("clientSecret", "client_secret")


# ══════════════════════════════════════════════════════════════════════════
# Errors & Health
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body returned by the global exception handlers.

    Example:
        {
            "error": "unauthorized",
            "message": "Unauthorized access",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
