"""Validate-and-store pipeline for a single object upload."""

from __future__ import annotations

import logging
from typing import BinaryIO, Mapping, Union

from upload_service.errors import InvalidArgumentError, StorageBackendError, wrap_storage_error
from upload_service.storage.contracts import ObjectStorage

logger = logging.getLogger(__name__)

Payload = Union[bytes, bytearray, BinaryIO, None]


def _read_payload(payload: Payload) -> bytes:
    if payload is None:
        return b""
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    return payload.read()


def _require(field: str, value: str | None) -> str:
    if value is None:
        raise InvalidArgumentError(field, f"{field} is required")
    if value == "":
        raise InvalidArgumentError(field, f"{field} must not be empty")
    return value


class StorageUploader:
    """Stores payloads through an ObjectStorage and returns their locator."""

    def __init__(self, storage: ObjectStorage):
        self._storage = storage

    def locator(self, bucket: str, key: str) -> str:
        return f"{self._storage.endpoint}/{bucket}/{key}"

    def upload_file(
        self,
        payload: Payload,
        metadata: Mapping[str, str] | None,
        key: str | None,
        bucket: str | None,
    ) -> str:
        """Upload ``payload`` to ``bucket``/``key`` and return its locator.

        Args:
            payload: Bytes or a readable binary file object. ``None`` is an
                empty object, not an error.
            metadata: User metadata attached to the object, if any.
            key: Object key within the bucket.
            bucket: Target bucket.

        Returns:
            ``<endpoint>/<bucket>/<key>`` where endpoint comes from the storage
            configuration.

        Raises:
            InvalidArgumentError: key or bucket is missing or empty. Nothing is
                sent to the backend.
            StorageBackendError: The put failed.
        """
        try:
            key = _require("key", key)
            bucket = _require("bucket", bucket)
        except InvalidArgumentError as e:
            logger.warning("Rejected upload: %s", e.message)
            raise

        data = _read_payload(payload)

        try:
            self._storage.put_bytes(bucket, key, data, metadata=dict(metadata) if metadata else None)
        except StorageBackendError:
            raise
        except Exception as exc:
            raise wrap_storage_error("put", bucket, key, exc) from exc

        logger.info("Uploaded %s/%s (%d bytes)", bucket, key, len(data))
        return self.locator(bucket, key)


__all__ = ["Payload", "StorageUploader"]
