"""
ScholarHub Backend — Review Schemas
=====================================

What:  Request/response models for the /reviews routes.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common import DocumentModel, WriteModel, client_field


class ReviewFields(WriteModel):
    scholarship_id: Optional[str] = client_field("scholarshipId", "scholarship_id")
    scholarship_name: Optional[str] = None
    university_name: Optional[str] = None

    user_name: Optional[str] = client_field("userName", "user_name")
    user_email: str = client_field("userEmail", "user_email", ..., min_length=1)
    user_image: Optional[str] = client_field("userImage", "user_image")

    rating: Optional[float] = Field(default=None, ge=0, le=5)
    comment: Optional[str] = None


class ReviewCreate(ReviewFields):
    """Body of POST /reviews."""


class ReviewResponse(ReviewFields, DocumentModel):
    review_date: Optional[datetime] = None
