"""Error types shared by the upload pipeline and its transports."""

from __future__ import annotations


class UploadError(Exception):
    """Base class for upload failures."""

    code = "internal"


class InvalidArgumentError(UploadError):
    """Request rejected before any storage interaction - final, no retry.

    Raised for: missing or empty key, missing or empty bucket.
    """

    code = "invalid_argument"

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class StorageBackendError(UploadError):
    """Wraps underlying storage exceptions with operation context."""

    code = "internal"

    def __init__(self, op: str, bucket: str | None, key: str | None, message: str):
        self.op = op
        self.bucket = bucket
        self.key = key
        self.message = message
        super().__init__(self.__str__())

    def __str__(self) -> str:
        bucket_repr = self.bucket or "<unknown>"
        key_repr = self.key or "<unknown>"
        return f"{self.op} failed for bucket={bucket_repr} key={key_repr}: {self.message}"


def wrap_storage_error(op: str, bucket: str | None, key: str | None, exc: Exception) -> StorageBackendError:
    return StorageBackendError(op=op, bucket=bucket, key=key, message=str(exc))


__all__ = ["UploadError", "InvalidArgumentError", "StorageBackendError", "wrap_storage_error"]
