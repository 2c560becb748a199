"""Tests for health endpoints."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from upload_service.main import create_app


class TestLivenessEndpoint:
    """Tests for /health liveness endpoint."""

    def test_health_check_returns_ok(self, client):
        """Liveness endpoint returns 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestReadinessEndpoint:
    """Tests for /health/ready readiness endpoint."""

    def test_readiness_ok(self, client):
        """Readiness returns 200 when storage answers."""
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "checks": {"storage": "ok"}}

    def test_readiness_storage_failure(self, client, fake_storage):
        """Readiness returns 503 when storage is unreachable."""
        fake_storage.error = ConnectionError("Connection refused")

        response = client.get("/health/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "degraded"
        assert "error" in data["checks"]["storage"]

    def test_readiness_storage_not_configured(self, fake_storage):
        """Readiness returns 503 when storage is not configured."""
        app = create_app(storage=fake_storage)
        with TestClient(app, raise_server_exceptions=False) as client:
            app.state.storage = None

            response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["checks"]["storage"] == "not configured"


class TestStartupStorage:
    """Storage is built once by the lifespan when none is injected."""

    def test_lifespan_builds_storage(self, fake_storage):
        with patch("upload_service.main.build_storage", return_value=fake_storage) as build:
            app = create_app()
            with TestClient(app, raise_server_exceptions=False) as client:
                assert app.state.storage is fake_storage

                response = client.get("/health/ready")
                client.post("/rpc/UploadMedia", json={"key": "k", "bucket": "b"})
                client.post("/rpc/UploadMedia", json={"key": "k2", "bucket": "b"})

        build.assert_called_once()
        assert response.status_code == 200
        assert [p["key"] for p in fake_storage.puts] == ["k", "k2"]

    def test_lifespan_invalid_configuration_leaves_storage_unset(self):
        with patch("upload_service.main.build_storage", side_effect=ValueError("bad endpoint")):
            app = create_app()
            with TestClient(app, raise_server_exceptions=False) as client:
                assert app.state.storage is None

                ready = client.get("/health/ready")
                upload = client.post("/rpc/UploadMedia", json={"key": "k", "bucket": "b"})

        assert ready.status_code == 503
        assert ready.json()["checks"]["storage"] == "not configured"
        assert upload.status_code == 500
        assert upload.json()["error"] == "internal"
