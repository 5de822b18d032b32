"""
ScholarHub Backend — Application Service
==========================================

What:  Scholarship applications: submit, list (optionally per applicant),
       mark successful, withdraw.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.application import Application
from app.schemas.application import (
    ApplicationCreate,
    ApplicationFeedback,
    ApplicationResponse,
)
from app.schemas.common import InsertResult, UpdateResult
from app.services.base import DocumentService

logger = logging.getLogger(__name__)

STATUS_PENDING = "pending"
STATUS_SUCCESS = "success"


class ApplicationService(DocumentService[Application, ApplicationResponse]):
    model = Application
    response_schema = ApplicationResponse
    resource = "application"

    async def list_applications(
        self, db: AsyncSession, email: Optional[str] = None
    ) -> List[ApplicationResponse]:
        """All applications, or only those whose applicant email matches."""
        return await self.find_all(db, user_email=email)

    async def submit(self, db: AsyncSession, payload: ApplicationCreate) -> InsertResult:
        values = payload.model_dump()
        values["status"] = STATUS_PENDING
        return await self.insert_one(db, values)

    async def mark_success(
        self,
        db: AsyncSession,
        application_id: str,
        payload: Optional[ApplicationFeedback] = None,
    ) -> UpdateResult:
        """
        Set status to success on the application with this id.

        The feedback column is only written when the body carries one.
        """
        values = {"status": STATUS_SUCCESS}
        if payload is not None and payload.feedback is not None:
            values["feedback"] = payload.feedback
        return await self.update_one(db, application_id, values)


application_service = ApplicationService()
