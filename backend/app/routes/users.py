"""
ScholarHub Backend — User Route Handlers
==========================================

What:  Registration, role lookups, role assignment and admin user management.

Route Inventory:
    GET    /users                    token + admin   list all users
    GET    /users/admin/{email}      token, self     {admin: bool}
    GET    /users/moderator/{email}  token, self     {moderator: bool}
    POST   /users                    none            register if email is new
    PATCH  /users/admin/{id}?role=   none            set role verbatim
    DELETE /users/{id}               token + admin   delete user
"""

import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import Claims, DocumentId, ensure_self, require_admin
from app.schemas.common import DeleteResult, ErrorResponse, InsertResult, UpdateResult
from app.schemas.user import (
    AdminStatus,
    ExistingUserResult,
    ModeratorStatus,
    UserCreate,
    UserResponse,
)
from app.services.user_service import ADMIN_ROLE, MODERATOR_ROLE, user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])

_auth_errors = {
    401: {"description": "Missing or invalid token", "model": ErrorResponse},
    403: {"description": "Insufficient role", "model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[UserResponse],
    dependencies=[Depends(require_admin)],
    responses=_auth_errors,
    summary="List all users (admin only)",
)
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserResponse]:
    return await user_service.find_all(db)


@router.get(
    "/admin/{email}",
    response_model=AdminStatus,
    responses=_auth_errors,
    summary="Check whether the caller is an admin",
)
async def check_admin(
    email: str,
    claims: Claims,
    db: AsyncSession = Depends(get_db_session),
) -> AdminStatus:
    """False when no user with this email is stored."""
    ensure_self(email, claims)
    return AdminStatus(admin=await user_service.has_role(db, email, ADMIN_ROLE))


@router.get(
    "/moderator/{email}",
    response_model=ModeratorStatus,
    responses=_auth_errors,
    summary="Check whether the caller is a moderator",
)
async def check_moderator(
    email: str,
    claims: Claims,
    db: AsyncSession = Depends(get_db_session),
) -> ModeratorStatus:
    ensure_self(email, claims)
    return ModeratorStatus(moderator=await user_service.has_role(db, email, MODERATOR_ROLE))


@router.post(
    "",
    response_model=Union[ExistingUserResult, InsertResult],
    summary="Register a user unless the email is already stored",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> Union[ExistingUserResult, InsertResult]:
    """
    Called by the client after every sign-in, so an existing email is the
    normal case and answers 200 with a message instead of an insert result.
    """
    return await user_service.create_user(db, payload)


@router.patch(
    "/admin/{item_id}",
    response_model=UpdateResult,
    responses={400: {"description": "Malformed id", "model": ErrorResponse}},
    summary="Set a user's role",
)
async def set_user_role(
    user_id: DocumentId,
    role: Optional[str] = Query(default=None, description="New role, stored verbatim"),
    db: AsyncSession = Depends(get_db_session),
) -> UpdateResult:
    return await user_service.set_role(db, user_id, role)


@router.delete(
    "/{item_id}",
    response_model=DeleteResult,
    dependencies=[Depends(require_admin)],
    responses={400: {"description": "Malformed id", "model": ErrorResponse}, **_auth_errors},
    summary="Delete a user (admin only)",
)
async def delete_user(
    user_id: DocumentId,
    db: AsyncSession = Depends(get_db_session),
) -> DeleteResult:
    return await user_service.delete_one(db, user_id)
