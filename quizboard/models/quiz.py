"""Database models for daily quizzes and their solve attempts."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Quiz(SQLModel, table=True):
    """One quiz per calendar day, keyed by its ``YYYY-MM-DD`` date."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    date: str = ORMField(index=True, unique=True)
    question: str
    answer: int
    created_at: datetime = ORMField(default_factory=utcnow)


class QuizSolver(SQLModel, table=True):
    """Append-only record of a user's single attempt at a quiz."""

    __tablename__ = "quiz_solver"
    __table_args__ = (UniqueConstraint("quiz_id", "user_id", name="uq_solver_quiz_user"),)

    id: Optional[int] = ORMField(default=None, primary_key=True)
    quiz_id: int = ORMField(foreign_key="quiz.id", index=True)
    user_id: int = ORMField(foreign_key="user.id", index=True)
    name: str
    is_correct: bool
    solved_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Quiz", "QuizSolver"]
