"""Shared request dependencies."""

from __future__ import annotations

from fastapi import Depends, Request
from sqlmodel import Session

from ..core import get_session
from ..models import User
from ..services import AuthError, get_user

ADMIN_ROLE = "admin"


def require_admin(request: Request, session: Session = Depends(get_session)) -> User:
    """Resolve the admin from the signed session cookie or refuse."""

    if request.session.get("role") != ADMIN_ROLE:
        raise AuthError("Admin authentication required")

    user = get_user(session, request.session.get("uid"))
    if not user or not user.is_admin:
        request.session.clear()
        raise AuthError("Admin authentication required")
    return user


__all__ = ["ADMIN_ROLE", "require_admin"]
