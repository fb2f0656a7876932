"""Logging setup. Modules just use `logging.getLogger(__name__)`; drivers call `configure_logging()` once."""

import logging
from typing import Optional

from src.core.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=settings.log_format,
    )
