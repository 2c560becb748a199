"""MinIO-backed implementation of the storage interface."""

from __future__ import annotations

import io
import logging
from typing import Mapping

from minio import Minio
from minio.error import S3Error

from upload_service.errors import wrap_storage_error
from upload_service.storage.contracts import ObjectStorage

logger = logging.getLogger(__name__)


class MinioStorage(ObjectStorage):
    """Object storage abstraction backed by MinIO SDK."""

    def __init__(self, client: Minio, endpoint: str):
        self._client = client
        self.endpoint = endpoint.rstrip("/")

    def put_bytes(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        metadata: Mapping[str, str] | None = None,
    ) -> None:
        try:
            # MinIO requires a file-like object with read() method
            self._client.put_object(
                bucket_name=bucket,
                object_name=key,
                data=io.BytesIO(data),
                length=len(data),
                metadata=dict(metadata) if metadata else None,
            )
        except S3Error as exc:
            logger.warning("put %s/%s rejected by backend: %s", bucket, key, exc.code)
            raise wrap_storage_error("put", bucket, key, exc) from exc
        except Exception as exc:
            raise wrap_storage_error("put", bucket, key, exc) from exc

    def ping(self) -> None:
        """Round-trip to the backend; raises if it cannot be reached."""
        try:
            self._client.list_buckets()
        except Exception as exc:
            raise wrap_storage_error("ping", None, None, exc) from exc


__all__ = ["MinioStorage"]
