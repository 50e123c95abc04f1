"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app, tests import `app` from here

2. Exception Handlers
   - Every error response has the body {"status": <int>, "error": <str>}
   - CatalogError subclasses carry their own status (400/404/409)
   - Malformed request bodies are 400, not FastAPI's default 422
   - Database and unexpected errors are 500 without internal detail
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookcatalog.config import get_settings
from bookcatalog.exceptions import CatalogError
from bookcatalog.routers import authors_router, books_router

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the uniform error body."""
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "error": message},
    )


def describe_validation_error(exc: RequestValidationError) -> str:
    """
    Flatten pydantic errors into one line.

    Example: "birthDate: Input should be a valid date"
    """
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "invalid request"


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.
    """
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Reference timezone: {settings.reference_timezone}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Book Catalog API

Manage authors and books.

### Features
- **Authors**: create, partially update, list an author's books
- **Books**: create with an ordered author list, partially update
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(CatalogError)
    async def catalog_exception_handler(
        request: Request,
        exc: CatalogError,
    ) -> JSONResponse:
        """Map domain errors to their 4xx status."""
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed bodies and path parameters are bad requests."""
        return error_response(status.HTTP_400_BAD_REQUEST, describe_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Unknown routes, wrong methods and the like, in the uniform body."""
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle database errors that services did not translate.

        Logs the actual error while hiding details from users.
        """
        logger.error(f"Database error: {exc}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "A database error occurred. Please try again later.",
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In debug mode the exception message is returned; otherwise a generic one.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)
        message = str(exc) if settings.debug else "internal error"
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    # prefix="/api/v1" creates versioned URLs: /api/v1/books, /api/v1/authors
    app.include_router(authors_router, prefix=settings.api_prefix)
    app.include_router(books_router, prefix=settings.api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running.",
    )
    async def health_check() -> dict:
        """Used by load balancers and container probes."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.api_version,
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookcatalog.main:app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookcatalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
