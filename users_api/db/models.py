"""SQLAlchemy models for the users store."""
from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, String

from .session import Base


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(255), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False)
    active = Column(Boolean, nullable=False, default=True)
