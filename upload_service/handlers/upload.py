"""RPC-facing adapter for the uploader."""

from __future__ import annotations

import logging
from typing import Any

from upload_service.schemas.api import UploadMediaRequest, UploadMediaResponse
from upload_service.services.uploader import StorageUploader

logger = logging.getLogger(__name__)


class UploadHandler:
    """Maps UploadMedia requests onto StorageUploader.upload_file."""

    def __init__(self, uploader: StorageUploader):
        self.uploader = uploader

    def upload_media(self, request: UploadMediaRequest, context: Any = None) -> UploadMediaResponse:
        """Store ``request.file`` and return its locator.

        ``context`` is the transport context of the call. It is not polled for
        cancellation. Errors from the uploader propagate unchanged.
        """
        # Wire strings are never absent; "" is passed through and rejected downstream.
        key: str | None = request.key
        bucket: str | None = request.bucket
        payload = request.file if request.file is not None else b""

        path = getattr(getattr(context, "url", None), "path", None)
        logger.debug("UploadMedia via %s bucket=%r key=%r size=%d", path or "direct call", bucket, key, len(payload))
        output = self.uploader.upload_file(payload, request.metadata, key, bucket)
        return UploadMediaResponse(output=output)


__all__ = ["UploadHandler"]
