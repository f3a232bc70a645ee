"""User login and leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import list_leaderboard, login_or_register, user_to_dict

router = APIRouter(tags=["users"])


@router.post("/users/login")
def login_user(
    body: Dict[str, Any] = Body(default_factory=dict),
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """Login or register a user by name."""

    user = login_or_register(session, body.get("name"), bool(body.get("isAdminInit")))
    return user_to_dict(user)


@router.get("/users")
def get_leaderboard(session: Session = Depends(get_session)) -> List[Dict[str, Any]]:
    """Leaderboard of every non-admin user."""

    return [user_to_dict(user) for user in list_leaderboard(session)]


__all__ = ["router"]
