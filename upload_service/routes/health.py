"""Health check endpoints."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/health/ready")
def readiness_check(request: Request):
    """Readiness probe - checks the storage backend."""
    checks = {}
    all_ok = True

    storage = getattr(request.app.state, "storage", None)
    if storage is not None:
        try:
            storage.ping()
            checks["storage"] = "ok"
        except Exception as e:
            logger.warning("Storage readiness check failed: %s", e)
            checks["storage"] = f"error: {e}"
            all_ok = False
    else:
        checks["storage"] = "not configured"
        all_ok = False

    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={"status": "ok" if all_ok else "degraded", "checks": checks},
    )
