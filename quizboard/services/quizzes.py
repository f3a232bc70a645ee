"""Quiz creation, listing and the solve/scoring workflow."""

from __future__ import annotations

import logging
import math
import re
from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..core import isoformat_z, utcnow
from ..models import Quiz, QuizSolver, User
from .errors import AlreadyDoneError, ConflictError, NotFoundError, ValidationError
from .users import get_user

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_STRICT_INT = re.compile(r"[+-]?\d+")
_DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}")

# Answers are stored in a signed 64-bit column.
ANSWER_MIN = -(2**63)
ANSWER_MAX = 2**63 - 1


def solver_to_dict(solver: QuizSolver) -> Dict[str, Any]:
    return {
        "userId": solver.user_id,
        "name": solver.name,
        "isCorrect": solver.is_correct,
        "solvedAt": isoformat_z(solver.solved_at),
    }


def quiz_to_dict(quiz: Quiz, solvers: Sequence[QuizSolver] = ()) -> Dict[str, Any]:
    """Serialise a quiz together with its solvers in attempt order."""

    return {
        "id": quiz.id,
        "date": quiz.date,
        "question": quiz.question,
        "answer": quiz.answer,
        "solvers": [solver_to_dict(solver) for solver in solvers],
        "createdAt": isoformat_z(quiz.created_at),
    }


def parse_answer(value: Any) -> Optional[int]:
    """Read a submitted answer the lenient way browsers send it.

    Strings contribute their leading integer (``" 7x"`` is 7), floats are
    truncated. Anything without a number yields ``None``, which never equals
    a stored answer.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _validate_date(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError("Date must use the YYYY-MM-DD format")
    value = value.strip()
    if not _DATE_SHAPE.fullmatch(value):
        raise ValidationError("Date must use the YYYY-MM-DD format")
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError as exc:
        raise ValidationError("Date must use the YYYY-MM-DD format") from exc
    return value


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError("Answer must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _STRICT_INT.fullmatch(value.strip()):
        return int(value.strip())
    raise ValidationError("Answer must be an integer")


def _validate_answer(value: Any) -> int:
    answer = _to_int(value)
    if not ANSWER_MIN <= answer <= ANSWER_MAX:
        raise ValidationError("Answer is out of range")
    return answer


def _solvers_by_quiz(session: Session, quiz_ids: List[int]) -> Dict[int, List[QuizSolver]]:
    grouped: Dict[int, List[QuizSolver]] = defaultdict(list)
    if not quiz_ids:
        return grouped
    solvers = session.exec(
        select(QuizSolver)
        .where(QuizSolver.quiz_id.in_(quiz_ids))
        .order_by(QuizSolver.id.asc())
    ).all()
    for solver in solvers:
        grouped[solver.quiz_id].append(solver)
    return grouped


def create_quiz(session: Session, date: Any, question: Any, answer: Any) -> Quiz:
    """Insert the quiz for ``date``; an existing quiz is never overwritten."""

    if _is_missing(date) or _is_missing(question) or _is_missing(answer):
        raise ValidationError("Date, question and answer are all required")
    if not isinstance(question, str):
        raise ValidationError("Question must be text")

    date = _validate_date(date)
    quiz = Quiz(
        date=date,
        question=question.strip(),
        answer=_validate_answer(answer),
    )
    session.add(quiz)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise ConflictError(f"A quiz for {date} already exists") from exc

    session.refresh(quiz)
    logger.info("Created quiz for %s", quiz.date)
    return quiz


def list_quizzes(session: Session) -> List[Dict[str, Any]]:
    """All quizzes, most recent date first, with their solvers."""

    quizzes = session.exec(select(Quiz).order_by(Quiz.date.desc())).all()
    solvers = _solvers_by_quiz(session, [quiz.id for quiz in quizzes])
    return [quiz_to_dict(quiz, solvers.get(quiz.id, [])) for quiz in quizzes]


def get_quiz(session: Session, date: str) -> Dict[str, Any]:
    quiz = session.exec(select(Quiz).where(Quiz.date == date)).first()
    if not quiz:
        raise NotFoundError("Quiz not found")
    return quiz_to_dict(quiz, _solvers_by_quiz(session, [quiz.id]).get(quiz.id, []))


def solve(session: Session, date: str, user_id: Any, answer: Any) -> Dict[str, Any]:
    """Record a user's one attempt at the quiz for ``date`` and score it.

    The solver row and the score increment commit together. The
    ``(quiz_id, user_id)`` unique constraint rejects a concurrent duplicate
    attempt, rolling back its score change with it.
    """

    quiz = session.exec(select(Quiz).where(Quiz.date == date)).first()
    user = get_user(session, user_id)
    if not quiz or not user:
        raise NotFoundError("Quiz or user not found")

    existing = session.exec(
        select(QuizSolver.id).where(
            QuizSolver.quiz_id == quiz.id,
            QuizSolver.user_id == user.id,
        )
    ).first()
    if existing is not None:
        raise AlreadyDoneError("This quiz has already been solved")

    submitted = parse_answer(answer)
    is_correct = submitted is not None and submitted == quiz.answer
    now = utcnow()

    try:
        session.add(
            QuizSolver(
                quiz_id=quiz.id,
                user_id=user.id,
                name=user.name,
                is_correct=is_correct,
                solved_at=now,
            )
        )
        if is_correct:
            # Autoflushes the solver row first, so a duplicate fails here.
            session.exec(
                update(User)
                .where(User.id == user.id)
                .values(score=User.score + 1, latest_quiz_date=now)
            )
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise AlreadyDoneError("This quiz has already been solved") from exc

    session.refresh(user)
    logger.info(
        "User %s solved %s: correct=%s score=%s", user.id, quiz.date, is_correct, user.score
    )
    return {"success": True, "isCorrect": is_correct, "newScore": user.score}


__all__ = [
    "create_quiz",
    "get_quiz",
    "list_quizzes",
    "parse_answer",
    "quiz_to_dict",
    "solve",
    "solver_to_dict",
]
