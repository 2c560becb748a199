"""Storage interface consumed by the uploader."""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from upload_service.errors import StorageBackendError


@runtime_checkable
class ObjectStorage(Protocol):
    """Contract for object storage implementations.

    ``endpoint`` is the base address objects are served from; it is fixed at
    construction and used to build locators.
    """

    endpoint: str

    def put_bytes(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        metadata: Mapping[str, str] | None = None,
    ) -> None:
        ...

    def ping(self) -> None:
        ...


__all__ = ["StorageBackendError", "ObjectStorage"]
