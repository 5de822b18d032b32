"""
ScholarHub Backend — Database Connection Management
=====================================================

What:  The Database resource (lazy async engine + session factory), the
       declarative Base, document id generation and the per-request
       session dependency.
How:   create_app() builds exactly one Database from Settings and stores it
       on app.state. The engine is created on first use and memoized for the
       process lifetime; every request borrows a session from it.
Who:   Route handlers receive sessions through FastAPI's Depends().
When:  Engine on the first query; sessions per request; disposal at shutdown.

Connection policy:
    There is no proactive health check and no reconnection logic. A broken
    connection surfaces as an error on the next statement (pool_pre_ping
    only revalidates pooled connections before checkout).
"""

import logging
import secrets
import time
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncGenerator, Iterator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings
from app.exceptions import DatabaseError

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers its table on this metadata, which Alembic and
    Database.create_all() both read.
    """
    pass


# ── Document Ids ──────────────────────────────────────────────────────────
def generate_object_id() -> str:
    """
    Generate a 24-character hexadecimal document id.

    Layout: 4-byte big-endian Unix timestamp + 8 random bytes, so ids sort
    roughly by creation time and look like the ids the web client already
    stores.
    """
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


# ── Database Resource ─────────────────────────────────────────────────────
class Database:
    """
    Owns the async engine and session factory for one application instance.

    Lifecycle:
        1. Constructed by create_app() (no I/O happens here)
        2. First access to `engine` creates the engine and session factory
        3. Later accesses return the memoized objects
        4. dispose() closes pooled connections at shutdown

    Tests construct their own instance pointing at a temporary SQLite file.
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        max_overflow: int = 10,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ):
        self.url = url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_pre_ping = pool_pre_ping
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            url=settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            echo=settings.log_level == "DEBUG",
        )

    def _engine_options(self) -> dict:
        options = {"echo": self.echo, "pool_pre_ping": self.pool_pre_ping}
        # SQLite pools reject sizing arguments
        if make_url(self.url).get_backend_name() != "sqlite":
            options.update(
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_recycle=3600,
            )
        return options

    def _connect(self) -> None:
        self._engine = create_async_engine(self.url, **self._engine_options())
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info(
            "Database engine created: %s",
            self._engine.url.render_as_string(hide_password=True),
        )

    @property
    def engine(self) -> AsyncEngine:
        """The memoized engine, created on first access."""
        if self._engine is None:
            self._connect()
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            self._connect()
        return self._session_factory

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yield a session that commits on success and rolls back on error.

        One request is one unit of work; nothing spans requests.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create every registered table that does not exist yet."""
        # Models must be imported so their tables are on the metadata
        import app.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Run SELECT 1; False when the database is unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close all pooled connections. Safe to call when never initialized."""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database engine disposed")


# ── Error Translation ─────────────────────────────────────────────────────
@contextmanager
def database_errors(action: str, **context) -> Iterator[None]:
    """
    Translate driver errors raised inside the block into DatabaseError.

    Example:
        with database_errors("insert scholarship"):
            db.add(row)
            await db.flush()
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Database error during %s: %s", action, str(e), exc_info=True)
        raise DatabaseError(
            context={"action": action, "error_type": type(e).__name__, **context},
        ) from e


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The session comes from the Database stored on the running application,
    never from module state.
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
