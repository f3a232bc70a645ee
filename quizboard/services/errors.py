"""Domain errors raised by the service layer.

Each error carries the HTTP status the API boundary answers with, so the
routers never translate them by hand.
"""

from __future__ import annotations


class QuizboardError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(QuizboardError):
    """Missing or malformed input."""

    status_code = 400


class AuthError(QuizboardError):
    """Admin credentials or session rejected."""

    status_code = 401


class NotFoundError(QuizboardError):
    status_code = 404


class ConflictError(QuizboardError):
    """A unique key (the quiz date) is already taken."""

    status_code = 409


class AlreadyDoneError(QuizboardError):
    """The user already has a recorded attempt for this quiz."""

    status_code = 400


__all__ = [
    "AlreadyDoneError",
    "AuthError",
    "ConflictError",
    "NotFoundError",
    "QuizboardError",
    "ValidationError",
]
