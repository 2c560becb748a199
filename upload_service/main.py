"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from upload_service.core.config import settings
from upload_service.core.logging import setup_logging
from upload_service.exception_handlers import register_exception_handlers
from upload_service.routes import health_router, upload_router
from upload_service.storage.contracts import ObjectStorage
from upload_service.storage.factory import build_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared storage client on startup unless one was injected."""
    setup_logging()

    if getattr(app.state, "storage", None) is None:
        try:
            app.state.storage = build_storage(settings)
            logger.info("Storage client configured for %s", settings.S3_ENDPOINT)
        except ValueError as e:
            logger.warning("Invalid storage configuration: %s", e)
            app.state.storage = None

    yield


def create_app(storage: Optional[ObjectStorage] = None) -> FastAPI:
    """Create the application, optionally with a pre-built storage client."""
    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.storage = storage

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(upload_router)
    return app


app = create_app()
