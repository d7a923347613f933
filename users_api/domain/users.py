"""Domain record for a registered user plus the e-mail format rule."""
from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@(.+)$")


def is_valid_email(value: str | None) -> bool:
    """Return True when value has the local-part@domain shape accepted at creation."""
    if value is None:
        return False
    # fullmatch: "$" alone would accept a trailing newline
    return bool(EMAIL_PATTERN.fullmatch(value))


def new_user_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """
    One registered account.

    ``id`` and ``created_at`` are assigned by the service and never change;
    ``active`` only ever moves from True to False.
    """

    id: str
    email: str
    name: str
    created_at: datetime = field(default_factory=utcnow)
    active: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "active": self.active,
        }
