"""
ScholarHub Backend — FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the per-process resources (Database, TokenService,
       PaymentService) from Settings, stores them on app.state, registers
       middleware, exception handlers and routers, and returns the app.
Who:   uvicorn (`uvicorn app.main:app`) and the test suite, which passes its
       own Settings and Database.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                       FastAPI App                        │
    │                                                          │
    │  Middleware:  RequestID → RequestLogging → GZip → CORS   │
    │                                                          │
    │  Dependencies: current_claims → require_admin /          │
    │                require_moderator, valid_object_id        │
    │                                                          │
    │  Routers: /jwt  /users  /scholarships  /applyScholarship │
    │           /applyScholarships  /reviews                   │
    │           /create-payment-intent  /  /health             │
    │                                                          │
    │  Exception Handlers:                                     │
    │   Validation→400  Unauthorized→401  Forbidden→403        │
    │   Payment→502  Database→500  anything else→500           │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, report missing secrets, optionally create
              tables (DB_AUTO_CREATE)
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import Settings, settings as default_settings
from app.database import Database
from app.exceptions import (
    DatabaseError,
    ForbiddenError,
    PaymentServiceError,
    ScholarHubError,
    UnauthorizedError,
    ValidationError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import applications, auth, health, payments, reviews, scholarships, users
from app.services.auth_service import TokenService
from app.services.payment_service import PaymentService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure root logging once at startup.

    Format: 2024-01-15T12:00:00 [INFO] scholarhub.access: GET /users 200 ...
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("stripe").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup and shutdown around the serving period.

    Resources are created in create_app(), not here, so an app driven
    without lifespan events (httpx ASGITransport in tests) still works.
    """
    config: Settings = app.state.settings
    database: Database = app.state.database

    setup_logging(config.log_level)
    logger.info("=" * 60)
    logger.info("ScholarHub Backend %s starting up...", __version__)

    # Missing secrets are reported, not fatal: the affected endpoints fail
    # on first use and everything else keeps serving
    try:
        config.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    if config.db_auto_create:
        await database.create_all()
        logger.info("Database tables ensured")

    logger.info("CORS origins: %s", ", ".join(config.cors_origins_list))
    logger.info("Server is running on port: %d", config.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("ScholarHub Backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int,
    error: str,
    exc: ScholarHubError,
    include_details: bool = False,
    message: Optional[str] = None,
) -> JSONResponse:
    content = {
        "error": error,
        "message": message or exc.message,
        "request_id": request_id_var.get(""),
    }
    if include_details and exc.context:
        content["details"] = exc.context
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler hierarchy:
        ValidationError     → 400 Bad Request
        UnauthorizedError   → 401 Unauthorized
        ForbiddenError      → 403 Forbidden
        PaymentServiceError → 502 Bad Gateway
        DatabaseError       → 500 Internal Server Error (generic message)
        ScholarHubError     → 500 Internal Server Error
        Exception           → 500 Internal Server Error (stack trace logged)

    Auth failures never echo their context (reason codes stay in the logs).
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc, include_details=True)

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        logger.info(
            "[%s] Unauthorized %s %s: %s",
            request_id_var.get(""), request.method, request.url.path, exc.context,
        )
        return _error_response(401, "unauthorized", exc)

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(request: Request, exc: ForbiddenError):
        logger.info(
            "[%s] Forbidden %s %s: %s",
            request_id_var.get(""), request.method, request.url.path, exc.context,
        )
        return _error_response(403, "forbidden", exc)

    @app.exception_handler(PaymentServiceError)
    async def handle_payment_error(request: Request, exc: PaymentServiceError):
        logger.error(
            "[%s] Payment error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return _error_response(502, "payment_error", exc)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return _error_response(
            500, "server_error", exc,
            message="An internal error occurred. Please try again later.",
        )

    @app.exception_handler(ScholarHubError)
    async def handle_app_error(request: Request, exc: ScholarHubError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return _error_response(500, "server_error", exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic body, full stack trace in the server log only."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    token_service: Optional[TokenService] = None,
    payment_service: Optional[PaymentService] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Every argument defaults to an instance built from `settings` (itself
    defaulting to the environment). Building the Database performs no I/O;
    the engine is created on the first query.
    """
    config = settings or default_settings

    app = FastAPI(
        title="ScholarHub API",
        description=(
            "Backend for the scholarship-discovery site: users and roles, "
            "scholarship listings, applications, reviews and Stripe payments."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Per-process Resources ─────────────────────────────────────────────
    app.state.settings = config
    app.state.database = database or Database.from_settings(config)
    app.state.token_service = token_service or TokenService.from_settings(config)
    app.state.payment_service = payment_service or PaymentService.from_settings(config)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware, body_max_chars=config.log_body_max_chars)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(scholarships.router)
    app.include_router(applications.router)
    app.include_router(reviews.router)
    app.include_router(payments.router)
    app.include_router(health.router)

    return app


app = create_app()
