"""API routes package."""

from upload_service.routes.health import router as health_router
from upload_service.routes.upload import router as upload_router

__all__ = ["health_router", "upload_router"]
