"""Logging configuration."""

import logging

from upload_service.core.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure application logging."""
    level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
