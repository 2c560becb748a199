"""Business logic services."""

from upload_service.services.uploader import Payload, StorageUploader

__all__ = ["Payload", "StorageUploader"]
