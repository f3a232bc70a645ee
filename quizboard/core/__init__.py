"""Core configuration and infrastructure helpers."""

from .config import (
    ADMIN_NAME,
    ADMIN_PASSWORD,
    ADMIN_USER_ID,
    ALLOWED_CORS_ORIGINS,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DATABASE_URL,
    DB_RESET,
    LOG_LEVEL,
    NAME_MAX_LENGTH,
    PORT,
    SECRET_KEY,
    STATIC_DIR,
)
from .database import engine, get_session
from .logging import configure_logging
from .security import get_password_hash, verify_password
from .time import isoformat_z, utcnow

__all__ = [
    "ADMIN_NAME",
    "ADMIN_PASSWORD",
    "ADMIN_USER_ID",
    "ALLOWED_CORS_ORIGINS",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DATABASE_URL",
    "DB_RESET",
    "LOG_LEVEL",
    "NAME_MAX_LENGTH",
    "PORT",
    "SECRET_KEY",
    "STATIC_DIR",
    "configure_logging",
    "engine",
    "get_password_hash",
    "get_session",
    "isoformat_z",
    "utcnow",
    "verify_password",
]
