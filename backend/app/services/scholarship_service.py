"""
ScholarHub Backend — Scholarship Service
==========================================

What:  CRUD for scholarship listings.

Update semantics:
    update_scholarship() writes every field of ScholarshipFields, each to its
    own column. Fields absent from the body are written as null; fields the
    model does not know are ignored at validation time.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.scholarship import Scholarship
from app.schemas.common import InsertResult, UpdateResult
from app.schemas.scholarship import (
    ScholarshipCreate,
    ScholarshipResponse,
    ScholarshipUpdate,
)
from app.services.base import DocumentService


class ScholarshipService(DocumentService[Scholarship, ScholarshipResponse]):
    model = Scholarship
    response_schema = ScholarshipResponse
    resource = "scholarship"

    async def create_scholarship(
        self, db: AsyncSession, payload: ScholarshipCreate
    ) -> InsertResult:
        return await self.insert_one(db, payload.model_dump(exclude_unset=True))

    async def update_scholarship(
        self, db: AsyncSession, scholarship_id: str, payload: ScholarshipUpdate
    ) -> UpdateResult:
        return await self.update_one(db, scholarship_id, payload.model_dump())


scholarship_service = ScholarshipService()
