"""
ScholarHub Backend — Review Route Handlers
============================================

What:  Scholarship reviews: list all, list mine, post, delete.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import DocumentId
from app.schemas.common import DeleteResult, ErrorResponse, InsertResult
from app.schemas.review import ReviewCreate, ReviewResponse
from app.services.review_service import review_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("", response_model=List[ReviewResponse], summary="List reviews")
async def list_reviews(db: AsyncSession = Depends(get_db_session)) -> List[ReviewResponse]:
    return await review_service.list_reviews(db)


@router.get("/myReviews", response_model=List[ReviewResponse], summary="List a user's reviews")
async def list_my_reviews(
    email: str = Query(..., description="Reviewer's email"),
    db: AsyncSession = Depends(get_db_session),
) -> List[ReviewResponse]:
    return await review_service.list_reviews(db, email=email)


@router.post("", response_model=InsertResult, summary="Post a review")
async def create_review(
    payload: ReviewCreate,
    db: AsyncSession = Depends(get_db_session),
) -> InsertResult:
    return await review_service.create_review(db, payload)


@router.delete(
    "/{item_id}",
    response_model=DeleteResult,
    responses={400: {"description": "Malformed id", "model": ErrorResponse}},
    summary="Delete a review",
)
async def delete_review(
    review_id: DocumentId,
    db: AsyncSession = Depends(get_db_session),
) -> DeleteResult:
    return await review_service.delete_one(db, review_id)
