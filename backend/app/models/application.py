"""
ScholarHub Backend — Application SQLAlchemy Model
===================================================

What:  ORM model for the `apply_scholarships` table: one row per
       student application to a scholarship.

Status lifecycle:
    pending (on insert) → success (after PATCH /applyScholarships/feedback/{id})

scholarship_id is a plain column, not a foreign key; deleting a scholarship
leaves its applications in place.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Float, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TIMESTAMP

from app.database import Base, generate_object_id


class Application(Base):
    """A student's application to one scholarship."""

    __tablename__ = "apply_scholarships"

    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=generate_object_id,
    )
    scholarship_id: Mapped[Optional[str]] = mapped_column(String(24))

    # Applicant
    user_name: Mapped[Optional[str]] = mapped_column(String(255))
    user_email: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[Optional[str]] = mapped_column(String(24))
    phone: Mapped[Optional[str]] = mapped_column(String(50))
    photo: Mapped[Optional[str]] = mapped_column(Text)
    address: Mapped[Optional[str]] = mapped_column(Text)
    gender: Mapped[Optional[str]] = mapped_column(String(50))
    applying_degree: Mapped[Optional[str]] = mapped_column(String(100))
    ssc_result: Mapped[Optional[str]] = mapped_column(String(50))
    hsc_result: Mapped[Optional[str]] = mapped_column(String(50))
    study_gap: Mapped[Optional[str]] = mapped_column(String(50))

    # Snapshot of the scholarship at application time
    university_name: Mapped[Optional[str]] = mapped_column(String(255))
    scholarship_category: Mapped[Optional[str]] = mapped_column(String(100))
    subject_category: Mapped[Optional[str]] = mapped_column(String(100))
    application_fees: Mapped[Optional[float]] = mapped_column(Float)
    service_charge: Mapped[Optional[float]] = mapped_column(Float)

    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="pending",
        server_default=text("'pending'"),
    )
    feedback: Mapped[Optional[str]] = mapped_column(Text)

    applied_date: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_apply_scholarships_user_email", "user_email"),
    )

    def __repr__(self) -> str:
        return (
            f"<Application(id={self.id}, user_email='{self.user_email}', "
            f"status='{self.status}')>"
        )
