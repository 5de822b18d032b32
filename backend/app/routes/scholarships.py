"""
ScholarHub Backend — Scholarship Route Handlers
=================================================

What:  CRUD for scholarship listings under /scholarships.
How:   Every `{item_id}` passes valid_object_id first; a malformed id is a
       400 before any query runs.

GET /scholarships/{id} answers `null` (HTTP 200) when the id is well-formed
but unknown; the client treats an empty body as "not found".
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import DocumentId
from app.schemas.common import DeleteResult, ErrorResponse, InsertResult, UpdateResult
from app.schemas.scholarship import (
    ScholarshipCreate,
    ScholarshipResponse,
    ScholarshipUpdate,
)
from app.services.scholarship_service import scholarship_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scholarships", tags=["Scholarships"])

_bad_id = {400: {"description": "Malformed id", "model": ErrorResponse}}


@router.get("", response_model=List[ScholarshipResponse], summary="List scholarships")
async def list_scholarships(
    db: AsyncSession = Depends(get_db_session),
) -> List[ScholarshipResponse]:
    return await scholarship_service.find_all(db)


@router.get(
    "/{item_id}",
    response_model=Optional[ScholarshipResponse],
    responses=_bad_id,
    summary="Get one scholarship",
)
async def get_scholarship(
    scholarship_id: DocumentId,
    db: AsyncSession = Depends(get_db_session),
) -> Optional[ScholarshipResponse]:
    return await scholarship_service.find_one(db, scholarship_id)


@router.post("", response_model=InsertResult, summary="Post a scholarship")
async def create_scholarship(
    payload: ScholarshipCreate,
    db: AsyncSession = Depends(get_db_session),
) -> InsertResult:
    return await scholarship_service.create_scholarship(db, payload)


@router.patch(
    "/{item_id}",
    response_model=UpdateResult,
    responses=_bad_id,
    summary="Overwrite a scholarship's fields",
)
async def update_scholarship(
    scholarship_id: DocumentId,
    payload: ScholarshipUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> UpdateResult:
    """Fields missing from the body are written as null."""
    return await scholarship_service.update_scholarship(db, scholarship_id, payload)


@router.delete(
    "/{item_id}",
    response_model=DeleteResult,
    responses=_bad_id,
    summary="Delete a scholarship",
)
async def delete_scholarship(
    scholarship_id: DocumentId,
    db: AsyncSession = Depends(get_db_session),
) -> DeleteResult:
    return await scholarship_service.delete_one(db, scholarship_id)
