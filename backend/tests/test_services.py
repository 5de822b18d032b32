"""
ScholarHub Backend — Collection Service Unit Tests (mocked session)
=====================================================================

What:  Write-result bookkeeping and per-service write rules.
How:   Services are called with a mocked AsyncSession; no database.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from app.exceptions import DatabaseError
from app.schemas.application import ApplicationCreate, ApplicationFeedback
from app.schemas.scholarship import ScholarshipUpdate
from app.schemas.user import ExistingUserResult, UserCreate
from app.services.application_service import application_service
from app.services.scholarship_service import scholarship_service
from app.services.user_service import user_service

DOC_ID = "65f1a2b3c4d5e6f708192a3b"


class TestUpdateBookkeeping:

    @pytest.mark.asyncio
    async def test_unknown_row_matches_nothing(self, mock_db_session):
        mock_db_session.get.return_value = None

        result = await user_service.set_role(mock_db_session, DOC_ID, "admin")

        assert result.matched_count == 0
        assert result.modified_count == 0
        mock_db_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_changed_value_counts_as_modified(self, mock_db_session):
        row = SimpleNamespace(id=DOC_ID, role=None)
        mock_db_session.get.return_value = row

        result = await user_service.set_role(mock_db_session, DOC_ID, "admin")

        assert (result.matched_count, result.modified_count) == (1, 1)
        assert row.role == "admin"

    @pytest.mark.asyncio
    async def test_driver_failure_becomes_database_error(self, mock_db_session):
        mock_db_session.get.side_effect = OperationalError("SELECT", {}, Exception("gone"))

        with pytest.raises(DatabaseError):
            await user_service.set_role(mock_db_session, DOC_ID, "admin")


class TestUserRegistration:

    @pytest.mark.asyncio
    async def test_existing_email_skips_insert(self, mock_db_session):
        existing = SimpleNamespace(id=DOC_ID, email="a@x.com")
        scalars = MagicMock()
        scalars.first.return_value = existing
        mock_db_session.execute.return_value = MagicMock(scalars=MagicMock(return_value=scalars))

        result = await user_service.create_user(mock_db_session, UserCreate(email="a@x.com"))

        assert isinstance(result, ExistingUserResult)
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_has_role_false_without_user(self, mock_db_session):
        scalars = MagicMock()
        scalars.first.return_value = None
        mock_db_session.execute.return_value = MagicMock(scalars=MagicMock(return_value=scalars))

        assert await user_service.has_role(mock_db_session, "a@x.com", "admin") is False


class TestApplicationWrites:

    @pytest.mark.asyncio
    async def test_submit_forces_pending(self, mock_db_session):
        with patch.object(application_service, "insert_one", new_callable=AsyncMock) as mock_insert:
            await application_service.submit(
                mock_db_session, ApplicationCreate(userEmail="s@x.com", status="success")
            )

        values = mock_insert.await_args.args[1]

        assert values["status"] == "pending"
        assert values["user_email"] == "s@x.com"

    @pytest.mark.asyncio
    async def test_mark_success_without_feedback(self, mock_db_session):
        row = SimpleNamespace(id=DOC_ID, status="pending", feedback="earlier note")
        mock_db_session.get.return_value = row

        await application_service.mark_success(mock_db_session, DOC_ID)

        assert row.status == "success"
        assert row.feedback == "earlier note"

    @pytest.mark.asyncio
    async def test_mark_success_with_feedback(self, mock_db_session):
        row = SimpleNamespace(id=DOC_ID, status="pending", feedback=None)
        mock_db_session.get.return_value = row

        await application_service.mark_success(
            mock_db_session, DOC_ID, ApplicationFeedback(feedback="Well done")
        )

        assert row.feedback == "Well done"


class TestScholarshipWrites:

    @pytest.mark.asyncio
    async def test_update_writes_every_field(self, mock_db_session):
        row = SimpleNamespace(
            id=DOC_ID,
            **{name: "old" for name in ScholarshipUpdate.model_fields},
        )
        mock_db_session.get.return_value = row

        await scholarship_service.update_scholarship(
            mock_db_session, DOC_ID, ScholarshipUpdate(university_logo="https://x/logo.png")
        )

        assert row.university_logo == "https://x/logo.png"
        assert row.university_name is None
        assert row.scholarship_name is None
