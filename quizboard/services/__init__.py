"""Service layer helpers."""

from .errors import (
    AlreadyDoneError,
    AuthError,
    ConflictError,
    NotFoundError,
    QuizboardError,
    ValidationError,
)
from .quizzes import create_quiz, get_quiz, list_quizzes, parse_answer, solve
from .users import (
    authenticate_admin,
    get_user,
    list_leaderboard,
    login_or_register,
    user_to_dict,
)

__all__ = [
    "AlreadyDoneError",
    "AuthError",
    "ConflictError",
    "NotFoundError",
    "QuizboardError",
    "ValidationError",
    "authenticate_admin",
    "create_quiz",
    "get_quiz",
    "get_user",
    "list_leaderboard",
    "list_quizzes",
    "login_or_register",
    "parse_answer",
    "solve",
    "user_to_dict",
]
