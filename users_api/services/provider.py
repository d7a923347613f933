"""Production wiring of UserService, shared by the app factory and the CLI scripts."""
from __future__ import annotations

from users_api.repositories.sql_repository import SQLUserRepository
from users_api.services.notification_service import EmailNotifier
from users_api.services.user_service import UserService


def build_user_service() -> UserService:
    """SQL store + e-mail notifier; no FastAPI objects are created."""
    return UserService(SQLUserRepository(), EmailNotifier())
