"""
ScholarHub Backend — Application Route Handlers
=================================================

What:  Scholarship applications.

Route Inventory:
    GET    /applyScholarship?email=             list, optionally per applicant
    POST   /applyScholarships                   submit
    PATCH  /applyScholarships/feedback/{id}     mark status success
    DELETE /applyScholarships/{id}              withdraw

The singular/plural split in the paths is what the web client calls.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import DocumentId
from app.schemas.application import (
    ApplicationCreate,
    ApplicationFeedback,
    ApplicationResponse,
)
from app.schemas.common import DeleteResult, ErrorResponse, InsertResult, UpdateResult
from app.services.application_service import application_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Applications"])

_bad_id = {400: {"description": "Malformed id", "model": ErrorResponse}}


@router.get(
    "/applyScholarship",
    response_model=List[ApplicationResponse],
    summary="List applications",
)
async def list_applications(
    email: Optional[str] = Query(default=None, description="Only this applicant's applications"),
    db: AsyncSession = Depends(get_db_session),
) -> List[ApplicationResponse]:
    return await application_service.list_applications(db, email=email)


@router.post("/applyScholarships", response_model=InsertResult, summary="Submit an application")
async def submit_application(
    payload: ApplicationCreate,
    db: AsyncSession = Depends(get_db_session),
) -> InsertResult:
    return await application_service.submit(db, payload)


@router.patch(
    "/applyScholarships/feedback/{item_id}",
    response_model=UpdateResult,
    responses=_bad_id,
    summary="Mark an application successful",
)
async def mark_application_success(
    application_id: DocumentId,
    payload: Optional[ApplicationFeedback] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> UpdateResult:
    return await application_service.mark_success(db, application_id, payload)


@router.delete(
    "/applyScholarships/{item_id}",
    response_model=DeleteResult,
    responses=_bad_id,
    summary="Delete an application",
)
async def delete_application(
    application_id: DocumentId,
    db: AsyncSession = Depends(get_db_session),
) -> DeleteResult:
    return await application_service.delete_one(db, application_id)
