"""User lifecycle use cases (create, lookup, rename, deactivate, list active)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from users_api.domain.users import User, is_valid_email, new_user_id, utcnow
from users_api.repositories.base import EmailConflictError, UserRepository
from users_api.services.notification_service import Notifier

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_EMAIL = "invalid_email"
    NOT_FOUND = "not_found"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class UserFailure:
    """Business rule rejection returned to the caller instead of a User."""

    kind: ErrorKind
    message: str


class UserService:
    """
    Enforces the user business rules and orchestrates storage + notifications.

    Every operation either returns its value or a ``UserFailure``; nothing is
    retried and a notification never undoes the write that preceded it.
    """

    def __init__(self, repository: UserRepository, notifier: Notifier) -> None:
        self.repository = repository
        self.notifier = notifier

    def create_user(self, email: str | None, name: str) -> User | UserFailure:
        # uniqueness is checked before format
        if self.repository.exists_by_email(email):
            logger.info("Rejected duplicate registration for %s", email)
            return UserFailure(ErrorKind.DUPLICATE_EMAIL, f"User with email {email} already exists")
        if not is_valid_email(email):
            logger.info("Rejected invalid e-mail %r", email)
            return UserFailure(ErrorKind.INVALID_EMAIL, f"Invalid email format: {email}")

        user = User(id=new_user_id(), email=email, name=name, created_at=utcnow(), active=True)
        try:
            saved = self.repository.save(user)
        except EmailConflictError as exc:
            logger.warning("Concurrent registration lost for %s", email)
            return UserFailure(ErrorKind.DUPLICATE_EMAIL, str(exc))
        self.notifier.send_welcome(saved)
        logger.info("User created: %s", saved.id)
        return saved

    def get_user_by_id(self, user_id: str) -> User | UserFailure:
        user = self.repository.find_by_id(user_id)
        if user is None:
            return UserFailure(ErrorKind.NOT_FOUND, f"User not found with id: {user_id}")
        return user

    def update_user_name(self, user_id: str, new_name: str) -> User | UserFailure:
        found = self.get_user_by_id(user_id)
        if isinstance(found, UserFailure):
            return found
        if not found.active:
            logger.info("Rejected rename of inactive user %s", user_id)
            return UserFailure(ErrorKind.INACTIVE, "Cannot update inactive user")
        found.name = new_name
        saved = self.repository.save(found)
        logger.info("User renamed: %s", user_id)
        return saved

    def deactivate_user(self, user_id: str) -> UserFailure | None:
        """
        Soft-delete a user.

        An already inactive user is written and notified again rather than
        rejected.
        """
        found = self.get_user_by_id(user_id)
        if isinstance(found, UserFailure):
            return found
        found.active = False
        self.repository.save(found)
        self.notifier.send_deactivation(found)
        logger.info("User deactivated: %s", user_id)
        return None

    def get_all_active_users(self) -> list[User]:
        return [user for user in self.repository.find_all() if user.active]
