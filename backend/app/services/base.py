"""
ScholarHub Backend — Document Collection Service Base
=======================================================

What:  The five operations every collection supports: find_all, find_one,
       insert_one, update_one, delete_one.
How:   Each subclass names its ORM model and response schema; the base
       runs exactly one statement per call (update_one loads the row first
       to report matched/modified counts) and converts rows into responses.
Who:   UserService, ScholarshipService, ApplicationService, ReviewService.

Writes are flushed, not committed. The request's session dependency commits
when the handler returns, so each request is one unit of work.

Ordering:
    find_all() adds no ORDER BY; rows come back in the store's natural order.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base, database_errors
from app.schemas.common import DeleteResult, DocumentModel, InsertResult, UpdateResult

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
ResponseT = TypeVar("ResponseT", bound=DocumentModel)


class DocumentService(Generic[ModelT, ResponseT]):
    """Generic CRUD over one table keyed by a 24-hex document id."""

    model: Type[ModelT]
    response_schema: Type[ResponseT]
    resource: str = "document"

    def to_response(self, row: ModelT) -> ResponseT:
        return self.response_schema.model_validate(row)

    async def find_all(self, db: AsyncSession, **filters: Any) -> List[ResponseT]:
        """
        Return every row, optionally narrowed by column equality filters.

        Filters whose value is None are skipped, so an absent query parameter
        means "no filter".
        """
        query = select(self.model)
        for column, value in filters.items():
            if value is not None:
                query = query.where(getattr(self.model, column) == value)

        with database_errors(f"list {self.resource}"):
            result = await db.execute(query)
            rows = result.scalars().all()

        return [self.to_response(row) for row in rows]

    async def find_one(self, db: AsyncSession, document_id: str) -> Optional[ResponseT]:
        """Return the row with this id, or None when there is none."""
        with database_errors(f"get {self.resource}", document_id=document_id):
            row = await db.get(self.model, document_id)
        return self.to_response(row) if row is not None else None

    async def insert_one(self, db: AsyncSession, values: Dict[str, Any]) -> InsertResult:
        row = self.model(**values)
        with database_errors(f"insert {self.resource}"):
            db.add(row)
            await db.flush()
        logger.info("Inserted %s %s", self.resource, row.id)
        return InsertResult(inserted_id=row.id)

    async def update_one(
        self, db: AsyncSession, document_id: str, values: Dict[str, Any]
    ) -> UpdateResult:
        """
        Overwrite the given columns on one row.

        Every key in `values` is written, including None values. Reports
        matched_count=0 when the id is unknown and modified_count=0 when
        nothing changed.
        """
        with database_errors(f"update {self.resource}", document_id=document_id):
            row = await db.get(self.model, document_id)
            if row is None:
                return UpdateResult(matched_count=0, modified_count=0)

            changed = False
            for column, value in values.items():
                if getattr(row, column) != value:
                    setattr(row, column, value)
                    changed = True
            await db.flush()

        if changed:
            logger.info("Updated %s %s: %s", self.resource, document_id, sorted(values))
        return UpdateResult(matched_count=1, modified_count=int(changed))

    async def delete_one(self, db: AsyncSession, document_id: str) -> DeleteResult:
        with database_errors(f"delete {self.resource}", document_id=document_id):
            result = await db.execute(
                delete(self.model).where(self.model.id == document_id)
            )
        deleted = result.rowcount or 0
        logger.info("Deleted %s %s (count=%d)", self.resource, document_id, deleted)
        return DeleteResult(deleted_count=deleted)
