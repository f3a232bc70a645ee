"""Database model exports."""

from .quiz import Quiz, QuizSolver
from .user import User

__all__ = [
    "Quiz",
    "QuizSolver",
    "User",
]
