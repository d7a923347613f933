"""Shared fixtures: in-memory test doubles for the storage and notification ports."""
from __future__ import annotations

import copy
import sys
from pathlib import Path
from typing import Optional

import pytest

# Make the users_api package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from users_api.db import models  # noqa: E402
from users_api.db import session as db_session  # noqa: E402
from users_api.domain.users import User  # noqa: E402
from users_api.repositories.base import EmailConflictError, UserRepository  # noqa: E402
from users_api.services.notification_service import Notifier  # noqa: E402
from users_api.services.user_service import UserService  # noqa: E402


class InMemoryUserRepository(UserRepository):
    """Dict-backed store that keeps insertion order and counts calls."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self.saved: list[User] = []
        self.exists_calls: list[Optional[str]] = []

    def add(self, *users: User) -> None:
        for user in users:
            self._users[user.id] = copy.deepcopy(user)

    def exists_by_email(self, email):
        self.exists_calls.append(email)
        return any(user.email == email for user in self._users.values())

    def find_by_id(self, user_id):
        user = self._users.get(user_id)
        return copy.deepcopy(user) if user else None

    def save(self, user):
        for other in self._users.values():
            if other.email == user.email and other.id != user.id:
                raise EmailConflictError(user.email)
        stored = copy.deepcopy(user)
        self._users[user.id] = stored
        self.saved.append(copy.deepcopy(user))
        return copy.deepcopy(stored)

    def find_all(self):
        return [copy.deepcopy(user) for user in self._users.values()]


class RecordingNotifier(Notifier):
    def __init__(self) -> None:
        self.welcomed: list[User] = []
        self.deactivated: list[User] = []

    def send_welcome(self, user):
        self.welcomed.append(user)

    def send_deactivation(self, user):
        self.deactivated.append(user)


@pytest.fixture()
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def service(repo, notifier) -> UserService:
    return UserService(repo, notifier)


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and tear everything down afterwards."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    db_session.reset_engine()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=db_session.get_engine())
    db_session.reset_engine()
