"""Transport-facing handlers."""

from upload_service.handlers.upload import UploadHandler

__all__ = ["UploadHandler"]
