"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

import logging

from sqlalchemy.engine import Engine

from secrets_portal.db.session import engine as default_engine
from secrets_portal.models.base import Base
from secrets_portal.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(bind: Engine | None = None) -> None:
    """
    Create the users table if it does not exist yet.
    """
    bind = bind or default_engine
    Base.metadata.create_all(bind=bind)
    logger.info("Credential store ready (%s)", bind.url.render_as_string(hide_password=True))
