"""
ScholarHub Backend — Scholarship Schemas
==========================================

What:  Request/response models for the /scholarships routes.

ScholarshipFields is the single list of writable fields. POST stores the
fields that were sent; PATCH overwrites all of them, so anything missing from
a PATCH body is written as null.
"""

from datetime import date
from typing import Optional

from pydantic import Field

from app.schemas.common import DocumentModel, WriteModel


class ScholarshipFields(WriteModel):
    scholarship_name: Optional[str] = None
    scholarship_category: Optional[str] = Field(
        default=None, description="Full fund, Partial or Self-fund"
    )
    subject_name: Optional[str] = None
    subject_category: Optional[str] = Field(
        default=None, description="Agriculture, Engineering or Doctor"
    )
    degree: Optional[str] = Field(default=None, description="Diploma, Bachelor or Masters")
    scholarship_description: Optional[str] = None

    university_name: Optional[str] = None
    university_logo: Optional[str] = Field(default=None, description="Logo image URL")
    university_country: Optional[str] = None
    university_city: Optional[str] = None
    university_location: Optional[str] = None
    university_world_rank: Optional[int] = None

    tuition_fees: Optional[float] = None
    application_fees: Optional[float] = None
    service_charge: Optional[float] = None

    application_deadline: Optional[date] = None
    post_date: Optional[date] = None

    posted_user_email: Optional[str] = None


class ScholarshipCreate(ScholarshipFields):
    """Body of POST /scholarships."""


class ScholarshipUpdate(ScholarshipFields):
    """Body of PATCH /scholarships/{id}."""


class ScholarshipResponse(ScholarshipFields, DocumentModel):
    pass
