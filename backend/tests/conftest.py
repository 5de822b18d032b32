"""
ScholarHub Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Each test gets its own SQLite database file, a fresh application
       built by create_app() around it, and an HTTPX AsyncClient talking to
       the app in-process. Stripe is never called for real.

Fixture Hierarchy:
    test_settings ─┬─ database ──┬─ test_app ── test_client
                   │             │
                   └─────────────┴─ token_service ── auth_headers
    mock_db_session (standalone, for service unit tests)
"""

import os
from typing import AsyncGenerator, Callable, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Test values BEFORE any app import: app.main builds a default app on import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./scholarhub_test.db"
os.environ["ACCESS_TOKEN_SECRET"] = "test-access-token-secret-not-for-production"
os.environ["STRIPE_SECRET_KEY"] = "sk_test_not_real"
os.environ["LOG_LEVEL"] = "WARNING"

from app.config import Settings  # noqa: E402
from app.database import Database  # noqa: E402
from app.main import create_app  # noqa: E402
from app.services.auth_service import TokenService  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Application Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        access_token_secret="test-access-token-secret-not-for-production",
        stripe_secret_key="sk_test_not_real",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(test_settings) -> AsyncGenerator[Database, None]:
    """A Database on a fresh SQLite file with all tables created."""
    db = Database.from_settings(test_settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def test_app(test_settings, database):
    return create_app(settings=test_settings, database=database)


@pytest_asyncio.fixture
async def test_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient routed straight into the app (no server, no lifespan).

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def token_service(test_app) -> TokenService:
    return test_app.state.token_service


@pytest.fixture
def auth_headers(token_service) -> Callable[[str], Dict[str, str]]:
    """Builds `Authorization: Bearer <token>` headers for an email."""
    def _headers(email: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token_service.issue({'email': email})}"}
    return _headers


# ══════════════════════════════════════════════════════════════════════════
# Unit Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession for service unit tests.

    Usage:
        mock_db_session.get.return_value = None
        result = await service.update_one(mock_db_session, oid, {...})
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def scholarship_payload() -> Dict:
    """A complete scholarship as the admin dashboard posts it."""
    return {
        "scholarship_name": "Global Excellence Scholarship",
        "scholarship_category": "Full fund",
        "subject_name": "Computer Science",
        "subject_category": "Engineering",
        "degree": "Masters",
        "scholarship_description": "Covers tuition and living costs for two years.",
        "university_name": "University of Toronto",
        "university_logo": "https://example.com/uoft.png",
        "university_country": "Canada",
        "university_city": "Toronto",
        "university_location": "Toronto, Canada",
        "university_world_rank": 21,
        "tuition_fees": 12000.0,
        "application_fees": 50.0,
        "service_charge": 19.99,
        "application_deadline": "2025-03-31",
        "post_date": "2024-11-01",
        "posted_user_email": "admin@x.com",
    }
