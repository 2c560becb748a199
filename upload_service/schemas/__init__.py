"""Request and response schemas."""

from upload_service.schemas.api import ErrorResponse, UploadMediaRequest, UploadMediaResponse

__all__ = ["ErrorResponse", "UploadMediaRequest", "UploadMediaResponse"]
