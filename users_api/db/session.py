"""
SQLAlchemy engine and session lifecycle for the users store.

The engine is built lazily from Settings.database_url and cached; call
reset_engine() after changing DATABASE_URL (tests, scripts) to rebuild it.
"""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from users_api.core.config import get_settings

Base = declarative_base()


def _engine_options(url: str) -> dict:
    options: dict = {"future": True, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        # request handlers run in a threadpool
        options["connect_args"] = {"check_same_thread": False}
    return options


@lru_cache
def get_engine() -> Engine:
    url = (get_settings().database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return create_engine(url, **_engine_options(url))


@lru_cache
def _session_factory() -> sessionmaker:
    # repositories return plain domain objects, so loaded rows must stay readable after commit
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False, future=True)


@contextmanager
def get_session() -> Iterator[Session]:
    """One short-lived session per repository call; always closed."""
    session = _session_factory()()
    try:
        yield session
    finally:
        session.close()


def reset_engine() -> None:
    """Dispose the cached engine and forget cached settings so the environment is re-read."""
    if get_engine.cache_info().currsize:
        get_engine().dispose()
    get_engine.cache_clear()
    _session_factory.cache_clear()
    get_settings.cache_clear()
