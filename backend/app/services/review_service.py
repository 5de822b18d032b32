"""ScholarHub Backend — Review Service."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.review import Review
from app.schemas.common import InsertResult
from app.schemas.review import ReviewCreate, ReviewResponse
from app.services.base import DocumentService


class ReviewService(DocumentService[Review, ReviewResponse]):
    model = Review
    response_schema = ReviewResponse
    resource = "review"

    async def list_reviews(
        self, db: AsyncSession, email: Optional[str] = None
    ) -> List[ReviewResponse]:
        return await self.find_all(db, user_email=email)

    async def create_review(self, db: AsyncSession, payload: ReviewCreate) -> InsertResult:
        return await self.insert_one(db, payload.model_dump())


review_service = ReviewService()
