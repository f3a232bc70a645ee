"""Daily quiz endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from sqlmodel import Session

from ...core import get_session
from ...models import User
from ...services import create_quiz, get_quiz, list_quizzes, solve
from ...services.quizzes import quiz_to_dict
from ..deps import require_admin

router = APIRouter(prefix="/problems", tags=["problems"])


@router.get("")
def get_problems(session: Session = Depends(get_session)) -> List[Dict[str, Any]]:
    """List all quizzes, newest date first."""

    return list_quizzes(session)


@router.post("", status_code=status.HTTP_201_CREATED)
def add_problem(
    body: Dict[str, Any] = Body(default_factory=dict),
    session: Session = Depends(get_session),
    admin: User = Depends(require_admin),
) -> Dict[str, Any]:
    """Create the quiz for a date (admin only)."""

    quiz = create_quiz(session, body.get("date"), body.get("question"), body.get("answer"))
    return quiz_to_dict(quiz)


@router.get("/{date}")
def get_problem(date: str, session: Session = Depends(get_session)) -> Dict[str, Any]:
    return get_quiz(session, date)


@router.post("/{date}/solve")
def solve_problem(
    date: str,
    body: Dict[str, Any] = Body(default_factory=dict),
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """Submit an answer for the quiz and update the user's score."""

    return solve(session, date, body.get("userId"), body.get("answer"))


__all__ = ["router"]
