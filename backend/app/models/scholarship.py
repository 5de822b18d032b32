"""
ScholarHub Backend — Scholarship SQLAlchemy Model
===================================================

What:  ORM model for the `scholarships` table.
Why:   Listings are the core content of the site: every card, detail page
       and application form reads from here.
Who:   Used by ScholarshipService for CRUD operations.

Column notes:
    - Fees are floats in the listing currency (the same unit the payment
      endpoint receives as `price`).
    - application_deadline / post_date are calendar dates, no time part.
    - Every descriptive column is nullable: PATCH overwrites the full field
      set, so a field omitted from an update becomes NULL.
"""

from datetime import date
from typing import Optional

from sqlalchemy import Date, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, generate_object_id


class Scholarship(Base):
    """A scholarship listing posted by an admin or moderator."""

    __tablename__ = "scholarships"

    # ── Primary Key ───────────────────────────────────────────────────────
    # 24-hex document id generated in Python at insert time
    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=generate_object_id,
    )

    # ── Listing ───────────────────────────────────────────────────────────
    scholarship_name: Mapped[Optional[str]] = mapped_column(String(255))
    scholarship_category: Mapped[Optional[str]] = mapped_column(String(100))
    subject_name: Mapped[Optional[str]] = mapped_column(String(255))
    subject_category: Mapped[Optional[str]] = mapped_column(String(100))
    degree: Mapped[Optional[str]] = mapped_column(String(100))
    scholarship_description: Mapped[Optional[str]] = mapped_column(Text)

    # ── University ────────────────────────────────────────────────────────
    university_name: Mapped[Optional[str]] = mapped_column(String(255))
    university_logo: Mapped[Optional[str]] = mapped_column(Text)
    university_country: Mapped[Optional[str]] = mapped_column(String(100))
    university_city: Mapped[Optional[str]] = mapped_column(String(100))
    university_location: Mapped[Optional[str]] = mapped_column(String(255))
    university_world_rank: Mapped[Optional[int]] = mapped_column(Integer)

    # ── Money ─────────────────────────────────────────────────────────────
    tuition_fees: Mapped[Optional[float]] = mapped_column(Float)
    application_fees: Mapped[Optional[float]] = mapped_column(Float)
    service_charge: Mapped[Optional[float]] = mapped_column(Float)

    # ── Dates ─────────────────────────────────────────────────────────────
    application_deadline: Mapped[Optional[date]] = mapped_column(Date)
    post_date: Mapped[Optional[date]] = mapped_column(Date)

    posted_user_email: Mapped[Optional[str]] = mapped_column(String(255))

    def __repr__(self) -> str:
        return (
            f"<Scholarship(id={self.id}, university='{self.university_name}', "
            f"subject='{self.subject_name}')>"
        )
