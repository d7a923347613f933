"""Create the users schema (run as a module or called on app startup)."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers UserRecord on the metadata

logger = logging.getLogger(__name__)


def create_all() -> None:
    """Create missing tables; existing ones are left untouched."""
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    logger.debug("Schema checked on %s", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    try:
        create_all()
        print("Users table ready.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
