"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from form_records.api.errors import install_error_handlers
from form_records.api.pages import router as pages_router
from form_records.api.records import router as records_router
from form_records.app_logging import configure_logging
from form_records.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting form records app",
            extra={"record_store": container.settings.record_store},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Form Records", lifespan=lifespan)
    app.state.container = container

    install_error_handlers(app)
    app.include_router(pages_router)
    app.include_router(records_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
