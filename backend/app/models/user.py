"""
ScholarHub Backend — User SQLAlchemy Model
============================================

What:  ORM model for the `users` table.
Who:   Used by UserService and by the role-check dependencies.

The email column is the lookup key but carries no unique constraint:
uniqueness is only an application-side check in UserService.create_user().
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TIMESTAMP

from app.database import Base, generate_object_id


class User(Base):
    """
    A registered user of the web application.

    Roles:
        role is a free-form string. "admin" and "moderator" unlock privileged
        routes; NULL (the default) means an ordinary student account.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=generate_object_id,
    )
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    photo: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Stored verbatim, no enumeration check
    role: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_users_email", "email"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role={self.role!r})>"
