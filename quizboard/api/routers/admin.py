"""Admin authentication endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request
from sqlmodel import Session

from ...core import get_session
from ...models import User
from ...services import authenticate_admin, user_to_dict
from ..deps import ADMIN_ROLE, require_admin

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/auth")
def admin_auth(
    request: Request,
    body: Dict[str, Any] = Body(default_factory=dict),
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """Verify the admin credential pair and open an admin session."""

    user = authenticate_admin(session, body.get("id"), body.get("password"))
    request.session["uid"] = user.id
    request.session["role"] = ADMIN_ROLE
    return user_to_dict(user)


@router.get("/me")
def admin_me(admin: User = Depends(require_admin)) -> Dict[str, Any]:
    return user_to_dict(admin)


@router.post("/logout")
def admin_logout(request: Request) -> Dict[str, bool]:
    request.session.clear()
    return {"ok": True}


__all__ = ["router"]
