"""Factory for building storage instances from configuration."""

from __future__ import annotations

from urllib.parse import urlparse

from minio import Minio

from upload_service.core.config import Settings, settings as default_settings
from upload_service.storage.minio_impl import MinioStorage


def _normalize_endpoint(endpoint: str) -> tuple[str, bool]:
    """Extract host:port from endpoint URL and determine if secure (https).

    A bare ``host:port`` without a scheme is treated as plain http.

    Returns:
        Tuple of (host:port, secure_flag)
    """
    if "//" not in endpoint:
        endpoint = f"http://{endpoint}"
    parsed = urlparse(endpoint)
    secure = parsed.scheme == "https"
    host = parsed.netloc or parsed.path.rstrip("/")
    return host, secure


def build_storage(settings: Settings | None = None) -> MinioStorage:
    """Build MinioStorage from settings.

    Settings used:
        S3_ENDPOINT: Full URL to MinIO/S3 endpoint (e.g., http://localhost:9000).
            A bare host:port defaults to http. The normalized URL is the
            prefix of every returned locator.
        S3_ACCESS_KEY / S3_SECRET_KEY / S3_SESSION_TOKEN: Credentials
        S3_REGION: Region reported to the server
    """
    settings = settings or default_settings
    host, secure = _normalize_endpoint(settings.S3_ENDPOINT)
    client = Minio(
        host,
        access_key=settings.S3_ACCESS_KEY,
        secret_key=settings.S3_SECRET_KEY,
        session_token=settings.S3_SESSION_TOKEN or None,
        secure=secure,
        region=settings.S3_REGION or None,
    )
    scheme = "https" if secure else "http"
    return MinioStorage(client, endpoint=f"{scheme}://{host}")


__all__ = ["build_storage"]
