"""User registration, admin authentication and leaderboard queries."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..core import (
    ADMIN_NAME,
    ADMIN_PASSWORD,
    ADMIN_USER_ID,
    NAME_MAX_LENGTH,
    get_password_hash,
    isoformat_z,
    verify_password,
)
from ..models import User
from .errors import AuthError, ValidationError

logger = logging.getLogger(__name__)


def user_to_dict(user: User) -> Dict[str, Any]:
    """Serialise a user for the API; the password hash never leaves."""

    return {
        "id": user.id,
        "userId": user.user_id,
        "name": user.name,
        "isAdmin": user.is_admin,
        "score": user.score,
        "latestQuizDate": isoformat_z(user.latest_quiz_date),
        "createdAt": isoformat_z(user.created_at),
    }


def _normalize_name(name: Any) -> str:
    normalized = name.strip() if isinstance(name, str) else ""
    if not normalized:
        raise ValidationError("Name is required")
    if len(normalized) > NAME_MAX_LENGTH:
        raise ValidationError(f"Name must be {NAME_MAX_LENGTH} characters or less")
    return normalized


def _find_by_name(session: Session, name: str) -> Optional[User]:
    return session.exec(select(User).where(User.name == name)).first()


def _new_user(name: str, admin_init: bool) -> User:
    if name == ADMIN_NAME and admin_init:
        logger.info("Seeding admin account %s", ADMIN_USER_ID)
        return User(
            name=name,
            user_id=ADMIN_USER_ID,
            password_hash=get_password_hash(ADMIN_PASSWORD),
            is_admin=True,
        )
    return User(name=name, user_id=f"{name}{int(time.time() * 1000)}")


def login_or_register(session: Session, name: Any, admin_init: bool = False) -> User:
    """Return the user called ``name``, creating it on first login."""

    name = _normalize_name(name)
    user = _find_by_name(session, name)
    if user:
        return user

    user = _new_user(name, bool(admin_init))
    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        # Another request registered the same name first.
        session.rollback()
        user = _find_by_name(session, name)
        if user is None:
            raise
        return user

    session.refresh(user)
    logger.info("Registered user %s (id=%s)", user.name, user.id)
    return user


def authenticate_admin(session: Session, user_id: Any, password: Any) -> User:
    """Check the admin credential pair and return the admin user."""

    if not isinstance(user_id, str) or not isinstance(password, str):
        raise AuthError("Authentication failed")

    user = session.exec(
        select(User).where(User.user_id == user_id, User.is_admin == True)  # noqa: E712
    ).first()
    if not user or not verify_password(password, user.password_hash):
        logger.warning("Admin authentication failed for %s", user_id)
        raise AuthError("Authentication failed")
    return user


def get_user(session: Session, user_id: Any) -> Optional[User]:
    """Fetch a user by primary key; malformed ids simply match nothing."""

    if isinstance(user_id, bool):
        return None
    try:
        pk = int(user_id)
    except (TypeError, ValueError):
        return None
    if not 0 < pk < 2**63:
        return None
    return session.get(User, pk)


def list_leaderboard(session: Session) -> List[User]:
    """Non-admin users, best score first; earlier last solve wins ties."""

    return list(
        session.exec(
            select(User)
            .where(User.is_admin == False)  # noqa: E712
            .order_by(
                User.score.desc(),
                User.latest_quiz_date.asc().nulls_first(),
                User.id.asc(),
            )
        ).all()
    )


__all__ = [
    "authenticate_admin",
    "get_user",
    "list_leaderboard",
    "login_or_register",
    "user_to_dict",
]
