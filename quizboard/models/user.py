"""Database model for quiz participants."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class User(SQLModel, table=True):
    """Participant identified by display name; the admin is a flagged user."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: str = ORMField(index=True, unique=True)
    name: str = ORMField(index=True, unique=True)
    password_hash: Optional[str] = None
    is_admin: bool = ORMField(default=False, index=True)
    score: int = 0
    latest_quiz_date: Optional[datetime] = None
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["User"]
