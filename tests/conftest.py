"""Pytest configuration and fixtures."""

from typing import Mapping

import pytest
from fastapi.testclient import TestClient

from upload_service.main import create_app
from upload_service.services.uploader import StorageUploader

ENDPOINT = "http://localhost:9000"


class FakeStorage:
    """In-memory ObjectStorage recording every put."""

    def __init__(self, endpoint: str = ENDPOINT):
        self.endpoint = endpoint
        self.puts: list[dict] = []
        self.error: Exception | None = None

    def put_bytes(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        metadata: Mapping[str, str] | None = None,
    ) -> None:
        if self.error is not None:
            raise self.error
        self.puts.append({"bucket": bucket, "key": key, "data": data, "metadata": metadata})

    def ping(self) -> None:
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def uploader(fake_storage: FakeStorage) -> StorageUploader:
    return StorageUploader(fake_storage)


@pytest.fixture
def client(fake_storage: FakeStorage):
    """TestClient for an app wired to the fake storage."""
    app = create_app(storage=fake_storage)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
