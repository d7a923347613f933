"""Database helpers (engine/session export, schema creation)."""

from .session import Base, get_engine, get_session, reset_engine
from .create_tables import create_all

__all__ = ["Base", "get_engine", "get_session", "reset_engine", "create_all"]
