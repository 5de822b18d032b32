"""
ScholarHub Backend — ORM Models
=================================

One table per document collection of the web client:

    users               → User
    scholarships        → Scholarship
    apply_scholarships  → Application
    reviews             → Review

Importing this package registers every table on Base.metadata.
"""

from app.models.application import Application
from app.models.review import Review
from app.models.scholarship import Scholarship
from app.models.user import User

__all__ = ["Application", "Review", "Scholarship", "User"]
