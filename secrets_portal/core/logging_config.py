# File: secrets_portal/core/logging_config.py

import logging

from secrets_portal.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Set up root logging once for the process."""
    logging.basicConfig(level=level or settings.log_level, format=LOG_FORMAT)
