"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fitit.config import get_settings
from fitit.domain.exceptions import AppError
from fitit.infrastructure.dynamodb import DynamoDBDocumentStore, build_table_configs
from fitit.infrastructure.logging.log_config import setup_logging
from fitit.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — open the shared DynamoDB store, create local tables."""
    settings = get_settings()
    setup_logging()

    # Tests may install a substitute store before startup.
    if getattr(app.state, "document_store", None) is not None:
        yield
        return

    store = DynamoDBDocumentStore.from_settings(settings)
    await store.open()
    app.state.document_store = store

    if settings.dynamodb_auto_create_tables:
        try:
            created = await store.create_missing_tables(build_table_configs(settings).values())
            if created:
                logger.info("Created tables: %s", ", ".join(created))
        except Exception:
            logger.exception("Failed to create DynamoDB tables — continuing without them")

    yield

    await store.close()
    app.state.document_store = None


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Map application errors to their HTTP status and JSON error body."""
    if exc.is_operational:
        logger.info("%s %s → %d %s", request.method, request.url.path, exc.status_code, exc.code)
    else:
        logger.error(
            "%s %s → %d %s: %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.code,
            exc.message,
            exc_info=exc,
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.document_store = None

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fitit.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
