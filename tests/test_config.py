"""Tests for settings loading."""

from upload_service.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("S3_ENDPOINT", "S3_REGION", "S3_SESSION_TOKEN", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.S3_ENDPOINT == "http://localhost:9000"
    assert settings.S3_REGION == "eu-east-1"
    assert settings.S3_SESSION_TOKEN == ""
    assert settings.LOG_LEVEL == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("S3_ENDPOINT", "http://minio:9000")
    monkeypatch.setenv("s3_access_key", "ak")

    settings = Settings(_env_file=None)

    assert settings.S3_ENDPOINT == "http://minio:9000"
    assert settings.S3_ACCESS_KEY == "ak"
