"""
ScholarHub Backend — Review SQLAlchemy Model
==============================================

What:  ORM model for the `reviews` table.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Float, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TIMESTAMP

from app.database import Base, generate_object_id


class Review(Base):
    """A user's rating and comment on a scholarship."""

    __tablename__ = "reviews"

    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=generate_object_id,
    )
    scholarship_id: Mapped[Optional[str]] = mapped_column(String(24))
    scholarship_name: Mapped[Optional[str]] = mapped_column(String(255))
    university_name: Mapped[Optional[str]] = mapped_column(String(255))

    user_name: Mapped[Optional[str]] = mapped_column(String(255))
    user_email: Mapped[str] = mapped_column(String(255), nullable=False)
    user_image: Mapped[Optional[str]] = mapped_column(Text)

    rating: Mapped[Optional[float]] = mapped_column(Float)
    comment: Mapped[Optional[str]] = mapped_column(Text)

    review_date: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_reviews_user_email", "user_email"),
    )

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, user_email='{self.user_email}', rating={self.rating})>"
