"""
ScholarHub Backend — User Service
===================================

What:  User listing, registration, role lookup and role assignment.
Who:   /users routes and the role-check dependencies in app.dependencies.

Registration is check-then-insert with no unique constraint behind it: two
concurrent POST /users calls for the same email can both insert.
"""

import logging
from typing import Optional, Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import database_errors
from app.models.user import User
from app.schemas.common import InsertResult, UpdateResult
from app.schemas.user import ExistingUserResult, UserCreate, UserResponse
from app.services.base import DocumentService

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
MODERATOR_ROLE = "moderator"


class UserService(DocumentService[User, UserResponse]):
    model = User
    response_schema = UserResponse
    resource = "user"

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        """First user row with this email, or None."""
        with database_errors("get user by email"):
            result = await db.execute(select(User).where(User.email == email).limit(1))
            return result.scalars().first()

    async def has_role(self, db: AsyncSession, email: str, role: str) -> bool:
        """
        True when a user with this email exists and its stored role equals
        `role` exactly. Every call performs a fresh lookup.
        """
        user = await self.get_by_email(db, email)
        return user is not None and user.role == role

    async def create_user(
        self, db: AsyncSession, payload: UserCreate
    ) -> Union[InsertResult, ExistingUserResult]:
        """Insert the user unless one with the same email is already stored."""
        existing = await self.get_by_email(db, payload.email)
        if existing is not None:
            logger.info("User %s already exists (id=%s)", payload.email, existing.id)
            return ExistingUserResult()
        return await self.insert_one(db, payload.model_dump())

    async def set_role(self, db: AsyncSession, user_id: str, role: Optional[str]) -> UpdateResult:
        """Store `role` verbatim; any string is accepted."""
        logger.info("Setting role of user %s to %r", user_id, role)
        return await self.update_one(db, user_id, {"role": role})


user_service = UserService()
