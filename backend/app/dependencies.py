"""
ScholarHub Backend — Request Dependencies
===========================================

What:  FastAPI dependencies shared across routers: service accessors,
       authentication, role checks and path identifier parsing.
How:   Dependencies raise application exceptions; the global handlers in
       main.py turn them into 400/401/403 responses before any handler
       logic runs.

Ordering:
    Role checks list `current_claims` before the session dependency, so a
    request without a valid token is rejected before a database session is
    opened. Routes attach role checks through `dependencies=[...]`, which
    FastAPI resolves ahead of the handler's own parameters.
"""

import logging
import re
from typing import Annotated, Any, Callable, Dict, Optional

from fastapi import Depends, Header, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.exceptions import ForbiddenError, UnauthorizedError, ValidationError
from app.services.auth_service import TokenService
from app.services.payment_service import PaymentService
from app.services.user_service import ADMIN_ROLE, MODERATOR_ROLE, user_service

logger = logging.getLogger(__name__)

OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


# ── Service Accessors ─────────────────────────────────────────────────────

def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service


# ── Identifiers ───────────────────────────────────────────────────────────

def valid_object_id(
    item_id: str = Path(..., description="24-character hexadecimal document id"),
) -> str:
    """
    Parse an `{item_id}` path parameter into a normalized document id.

    Raises:
        ValidationError: anything other than 24 hex characters (→ 400).
    """
    if not OBJECT_ID_PATTERN.fullmatch(item_id):
        raise ValidationError(
            message="Invalid ObjectId format.",
            field="id",
            context={"value": item_id[:64]},
        )
    return item_id.lower()


DocumentId = Annotated[str, Depends(valid_object_id)]


# ── Authentication ────────────────────────────────────────────────────────

def extract_bearer_token(authorization: Optional[str]) -> str:
    """Return the token part of `Bearer <token>`; UnauthorizedError otherwise."""
    if not authorization:
        raise UnauthorizedError(context={"reason": "missing_header"})
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise UnauthorizedError(context={"reason": "malformed_header"})
    return parts[1]


async def current_claims(
    authorization: Optional[str] = Header(default=None),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, Any]:
    """Decoded claims of the caller's access token."""
    return tokens.verify(extract_bearer_token(authorization))


Claims = Annotated[Dict[str, Any], Depends(current_claims)]


def ensure_self(email: str, claims: Dict[str, Any]) -> None:
    """Callers may only ask about their own account."""
    if email != claims.get("email"):
        logger.warning(
            "Caller %s asked for the role of %s", claims.get("email"), email
        )
        raise ForbiddenError(context={"reason": "not_self"})


# ── Authorization ─────────────────────────────────────────────────────────

def _role_checker(role: str) -> Callable:
    async def require_role(
        claims: Dict[str, Any] = Depends(current_claims),
        db: AsyncSession = Depends(get_db_session),
    ) -> Dict[str, Any]:
        email = claims.get("email")
        if not email or not await user_service.has_role(db, email, role):
            logger.warning("Forbidden: %s lacks role %r", email, role)
            raise ForbiddenError(context={"required_role": role})
        return claims

    require_role.__name__ = f"require_{role}"
    return require_role


# Each check does its own lookup; nothing is cached between them
require_admin = _role_checker(ADMIN_ROLE)
require_moderator = _role_checker(MODERATOR_ROLE)
