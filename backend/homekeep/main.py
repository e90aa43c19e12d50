"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from homekeep.config import Settings, get_settings
from homekeep.application.services import CategoryService
from homekeep.domain.exceptions import FileStorageError
from homekeep.infrastructure.database.session import create_tables, dispose_engine, session_scope
from homekeep.infrastructure.dependencies import Repositories, get_memory_store
from homekeep.infrastructure.logging.log_config import setup_logging
from homekeep.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _seed_default_categories(settings: Settings) -> None:
    """Create the built-in categories when the category table is empty."""
    if settings.uses_database:
        async with session_scope(settings.database_url) as session:
            repos = Repositories.sqlalchemy(session)
            await CategoryService(repos.categories).seed_defaults()
    else:
        repos = Repositories.in_memory(get_memory_store())
        await CategoryService(repos.categories).seed_defaults()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: logging, upload dir, tables, default data."""
    settings = get_settings()
    setup_logging(settings)

    # 1. Ensure upload directory exists
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)

    # 2. Create database tables when a database is configured
    if settings.uses_database:
        await create_tables(settings.database_url)
        logger.info("Using database storage")
    else:
        logger.info("Using in-memory storage; records are lost on restart")

    # 3. Seed default categories
    if settings.seed_default_categories:
        await _seed_default_categories(settings)

    yield

    # Shutdown
    if settings.uses_database:
        await dispose_engine(settings.database_url)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=exc.headers,
    )


async def file_storage_exception_handler(
    request: Request, exc: FileStorageError
) -> JSONResponse:
    logger.error("File storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Failed to store file"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    # Error bodies are always {"message": ...}
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(FileStorageError, file_storage_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "homekeep.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
