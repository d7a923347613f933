"""Outbound user-lifecycle notifications (welcome / deactivation)."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from users_api.core.mailer import send_email
from users_api.domain.users import User

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Notification port used by UserService. Fire-and-forget: results are ignored."""

    @abstractmethod
    def send_welcome(self, user: User) -> None:
        ...

    @abstractmethod
    def send_deactivation(self, user: User) -> None:
        ...


class EmailNotifier(Notifier):
    """Logs every message and delivers it over SMTP when the mailer is configured."""

    WELCOME_SUBJECT = "Welcome to our platform!"
    DEACTIVATION_SUBJECT = "Account Deactivated"

    def send_welcome(self, user: User) -> None:
        body = f"Hi {user.name}, welcome aboard! Your account has been created."
        self._deliver(user, self.WELCOME_SUBJECT, body)

    def send_deactivation(self, user: User) -> None:
        body = f"Hi {user.name}, your account has been deactivated. Contact support to reactivate."
        self._deliver(user, self.DEACTIVATION_SUBJECT, body)

    def _deliver(self, user: User, subject: str, body: str) -> None:
        logger.info("Sending e-mail to: %s (%s)", user.name, user.email)
        logger.info("Subject: %s", subject)
        logger.info("Body: %s", body)
        if not send_email(subject, user.email, body):
            logger.debug("[email] '%s' for %s was logged only", subject, user.id)
