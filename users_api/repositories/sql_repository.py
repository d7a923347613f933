"""User persistence backed by SQLAlchemy."""
from __future__ import annotations

from datetime import timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from users_api.db.models import UserRecord
from users_api.db.session import get_session
from users_api.domain.users import User
from users_api.repositories.base import EmailConflictError, UserRepository


def _record_to_user(record: UserRecord) -> User:
    created_at = record.created_at
    # SQLite hands back naive datetimes even for timezone=True columns
    if created_at is not None and created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return User(
        id=record.id,
        email=record.email,
        name=record.name,
        created_at=created_at,
        active=bool(record.active),
    )


class SQLUserRepository(UserRepository):
    """CRUD helpers wrapping the SQLAlchemy session."""

    def exists_by_email(self, email: str | None) -> bool:
        if email is None:
            return False
        with get_session() as session:
            stmt = select(UserRecord.id).where(UserRecord.email == email).limit(1)
            return session.execute(stmt).first() is not None

    def find_by_id(self, user_id: str) -> Optional[User]:
        with get_session() as session:
            record = session.get(UserRecord, user_id)
            return _record_to_user(record) if record else None

    def save(self, user: User) -> User:
        with get_session() as session:
            record = session.get(UserRecord, user.id)
            if not record:
                record = UserRecord(id=user.id, created_at=user.created_at)
                session.add(record)
            record.email = user.email
            record.name = user.name
            record.active = user.active
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise EmailConflictError(user.email) from exc
            session.refresh(record)
            return _record_to_user(record)

    def find_all(self) -> list[User]:
        with get_session() as session:
            stmt = select(UserRecord).order_by(UserRecord.created_at, UserRecord.id)
            return [_record_to_user(record) for record in session.execute(stmt).scalars().all()]
