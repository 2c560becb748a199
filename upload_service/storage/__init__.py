"""Storage package: object storage abstraction."""

from upload_service.storage.contracts import ObjectStorage, StorageBackendError
from upload_service.storage.minio_impl import MinioStorage

__all__ = ["ObjectStorage", "StorageBackendError", "MinioStorage"]
