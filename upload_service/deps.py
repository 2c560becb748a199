"""Shared dependencies for FastAPI routes.

The storage client is built once per process (see ``main.lifespan``) and
kept on ``app.state``; everything downstream receives it by injection.
"""

from __future__ import annotations

from fastapi import Depends, Request

from upload_service.errors import StorageBackendError
from upload_service.handlers.upload import UploadHandler
from upload_service.services.uploader import StorageUploader
from upload_service.storage.contracts import ObjectStorage


def get_storage(request: Request) -> ObjectStorage:
    """Return the process-wide storage client."""
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise StorageBackendError(op="connect", bucket=None, key=None, message="storage not configured")
    return storage


def get_uploader(storage: ObjectStorage = Depends(get_storage)) -> StorageUploader:
    return StorageUploader(storage)


def get_upload_handler(uploader: StorageUploader = Depends(get_uploader)) -> UploadHandler:
    return UploadHandler(uploader)


__all__ = ["get_storage", "get_uploader", "get_upload_handler"]
