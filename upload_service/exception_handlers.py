"""FastAPI exception handlers for upload errors."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from upload_service.errors import InvalidArgumentError, UploadError

logger = logging.getLogger(__name__)


async def upload_exception_handler(request: Request, exc: UploadError) -> JSONResponse:
    """Map upload errors to a status code and an ``ErrorResponse`` body."""
    if isinstance(exc, InvalidArgumentError):
        status_code = status.HTTP_400_BAD_REQUEST
        logger.info("Invalid argument on %s: %s", request.url.path, exc)
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        logger.error("Storage failure on %s: %s", request.url.path, exc)

    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UploadError, upload_exception_handler)
