"""Database initialization script."""

import logging
from pathlib import Path

from sqlalchemy.engine import Engine

from portfolio_backend.config import settings
from portfolio_backend.database import Base, engine
from portfolio_backend.logging_config import setup_logging
from portfolio_backend.models import Skill  # noqa: F401  (registers the table)

logger = logging.getLogger(__name__)


def init_database(bind: Engine = engine) -> None:
    """
    Initialize the database by creating all tables.

    Tables and indexes that already exist are left untouched, so it is safe
    to run multiple times.

    Args:
        bind: Engine to create the tables on
    """
    if bind.url.get_backend_name() == "sqlite" and bind.url.database:
        Path(bind.url.database).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ready: %s", ", ".join(Base.metadata.tables.keys()))


if __name__ == "__main__":
    setup_logging(settings.log_level, settings.log_file)
    init_database()
