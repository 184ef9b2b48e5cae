"""
FoodHub Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers, routers and
       the /uploads static mount, and returns the app.
Who:   Served by uvicorn (uvicorn foodhub.main:app).

Application Layout:
    ┌───────────────────────────────────────────────────────────┐
    │                        FastAPI App                        │
    │                                                           │
    │  Middleware:  Rate Limit → Request ID → Access Log        │
    │               → GZip → CORS                               │
    │                                                           │
    │  Routers (/api):  users + login │ food │ category │ items │
    │                   upload                                  │
    │  Other:           GET /health   │ /uploads (static files) │
    │                                                           │
    │  Exception Handlers:                                      │
    │    Validation/Duplicate/Credentials → 400                 │
    │    Authentication → 401 │ NotFound → 404 │ others → 500   │
    └───────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging, configuration check, upload directory
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from foodhub import __version__
from foodhub.config import settings
from foodhub.database import dispose_engine
from foodhub.exceptions import (
    AuthenticationError,
    DatabaseError,
    DuplicateKeyError,
    FileStorageError,
    FoodHubError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from foodhub.middleware.logging import RequestLoggingMiddleware
from foodhub.middleware.rate_limit import RateLimitMiddleware
from foodhub.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from foodhub.routes import category, food, health, items, upload, users
from foodhub.services.file_service import UPLOADS_URL_PREFIX

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: 2024-01-15T12:00:00 [INFO] foodhub.services.food_service: message
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Quiet chatty libraries; our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("FoodHub Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving so /health can report; the operator sees this at startup
        logger.error("Configuration error: %s", str(e))

    upload_root = Path(settings.upload_dir)
    upload_root.mkdir(parents=True, exist_ok=True)
    logger.info("Upload directory: %s", upload_root.resolve())

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("FoodHub Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: dict | None = None,
    headers: dict | None = None,
) -> JSONResponse:
    content = {"error": error, "message": message, "request_id": request_id_var.get("") or None}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _describe_validation_errors(errors: list) -> str:
    """Turn the first pydantic error into a one-line message."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    return f"Invalid request: {first.get('msg', 'invalid value')}"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to JSON error bodies.

    Every body has the shape {error, message, request_id[, details]}.
    Internal details (SQL errors, paths, stack traces) are logged, never
    returned.

        ValidationError, RequestValidationError → 400 validation_error
        DuplicateKeyError                       → 400 duplicate_key
        InvalidCredentialsError                 → 400 invalid_credentials
        AuthenticationError                     → 401 unauthorized
        NotFoundError                           → 404 not_found
        FileStorageError, DatabaseError         → 500 server_error
        FoodHubError, Exception                 → 500 internal_server_error
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc.message, details=exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.warning("[%s] Request validation failed: %d error(s)", request_id_var.get(""), len(errors))
        return _error_response(
            400,
            "validation_error",
            _describe_validation_errors(errors),
            details={"errors": errors},
        )

    @app.exception_handler(DuplicateKeyError)
    async def handle_duplicate_key(request: Request, exc: DuplicateKeyError):
        logger.warning("[%s] Duplicate key: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "duplicate_key", exc.message, details=exc.context)

    @app.exception_handler(InvalidCredentialsError)
    async def handle_invalid_credentials(request: Request, exc: InvalidCredentialsError):
        return _error_response(400, "invalid_credentials", exc.message)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return _error_response(
            401,
            "unauthorized",
            exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("[%s] Database error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(500, "server_error", "An internal error occurred. Please try again later.")

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        logger.error("[%s] File storage error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(FoodHubError)
    async def handle_foodhub_error(request: Request, exc: FoodHubError):
        logger.error("[%s] Unhandled application error: %s", request_id_var.get(""), exc.message)
        return _error_response(500, "internal_server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True)
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="FoodHub API",
        description=(
            "Food ordering backend: user accounts with bearer-token login, a "
            "filterable food catalog, inventory categories and items, and image upload."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware runs in reverse order of addition: RateLimit runs first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.cors_origins_list != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RateLimitMiddleware)

    register_exception_handlers(app)

    app.include_router(users.router)
    app.include_router(food.router)
    app.include_router(category.router)
    app.include_router(items.router)
    app.include_router(upload.router)
    app.include_router(health.router)

    # Directory may not exist until the first upload or lifespan startup
    app.mount(
        UPLOADS_URL_PREFIX,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    return app


app = create_app()
