"""
ScholarHub Backend — Application Schemas
==========================================

What:  Request/response models for the /applyScholarship(s) routes.

Applicant fields use the camelCase names the web client posts; the
scholarship snapshot fields keep the scholarship's snake_case names.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common import DocumentModel, WriteModel, client_field


class ApplicationFields(WriteModel):
    scholarship_id: Optional[str] = client_field("scholarshipId", "scholarship_id")

    user_name: Optional[str] = client_field("userName", "user_name")
    user_email: str = client_field("userEmail", "user_email", ..., min_length=1)
    user_id: Optional[str] = client_field("userId", "user_id")
    phone: Optional[str] = None
    photo: Optional[str] = None
    address: Optional[str] = None
    gender: Optional[str] = None
    applying_degree: Optional[str] = client_field("applyingDegree", "applying_degree")
    ssc_result: Optional[str] = client_field("sscResult", "ssc_result")
    hsc_result: Optional[str] = client_field("hscResult", "hsc_result")
    study_gap: Optional[str] = client_field("studyGap", "study_gap")

    university_name: Optional[str] = None
    scholarship_category: Optional[str] = None
    subject_category: Optional[str] = None
    application_fees: Optional[float] = None
    service_charge: Optional[float] = None


class ApplicationCreate(ApplicationFields):
    """Body of POST /applyScholarships. Status always starts as pending."""


class ApplicationFeedback(WriteModel):
    """Optional body of PATCH /applyScholarships/feedback/{id}."""
    feedback: Optional[str] = Field(default=None, description="Reviewer's note to the applicant")


class ApplicationResponse(ApplicationFields, DocumentModel):
    status: str = "pending"
    feedback: Optional[str] = None
    applied_date: Optional[datetime] = None
