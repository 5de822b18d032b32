"""
ScholarHub Backend — User Schemas
===================================

What:  Request/response models for the /users routes.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.common import DocumentModel, WriteModel, client_field


class UserCreate(WriteModel):
    """Body of POST /users. Sent by the client after every sign-in."""
    name: Optional[str] = None
    email: str = Field(min_length=1)
    photo: Optional[str] = None
    role: Optional[str] = None


class UserResponse(DocumentModel):
    name: Optional[str] = None
    email: str
    photo: Optional[str] = None
    role: Optional[str] = None
    created_at: Optional[datetime] = None


class ExistingUserResult(BaseModel):
    """Returned instead of an InsertResult when the email is already stored."""
    message: str = "User already exists"
    inserted_id: None = client_field("insertedId", "inserted_id")


class AdminStatus(BaseModel):
    admin: bool


class ModeratorStatus(BaseModel):
    moderator: bool
