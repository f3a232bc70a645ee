"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)

_PACKAGE_ROOT = Path(__file__).resolve().parents[1]
_PROJECT_ROOT = _PACKAGE_ROOT.parent


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _env_choice(name: str, default: str, choices: Iterable[str]) -> str:
    value = (os.getenv(name) or default).strip().upper()
    allowed = set(choices)
    if value not in allowed:
        raise RuntimeError(f"{name} must be one of: {', '.join(sorted(allowed))}")
    return value


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Application security -------------------------------------------------------
SECRET_KEY = _require_env("SECRET_KEY")

COOKIE_SECURE = _env_bool("COOKIE_SECURE", False)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")

# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_local_dev_origins = [
    "http://localhost:5000",
    "http://127.0.0.1:5000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_split_csv(os.getenv("FRONTEND_ORIGIN")),
        *_local_dev_origins,
    ]
)


# Admin account --------------------------------------------------------------
ADMIN_NAME = os.getenv("ADMIN_NAME", "관리자")
ADMIN_USER_ID = os.getenv("ADMIN_USER_ID", "1234aa")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "wj211@")


# Runtime behaviour ----------------------------------------------------------
DATABASE_URL = os.getenv(
    "DATABASE_URL", f"sqlite:///{_PROJECT_ROOT / 'data' / 'app.db'}"
)
DB_RESET = _env_bool("DB_RESET", False)

STATIC_DIR = Path(os.getenv("STATIC_DIR") or _PACKAGE_ROOT / "static")
LOG_LEVEL = _env_choice(
    "LOG_LEVEL", "INFO", ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")
)
PORT = _env_int("PORT", 5000)

NAME_MAX_LENGTH = 40


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
]
