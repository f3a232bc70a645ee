"""Shared fixtures: a throwaway SQLite database per test run."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

_TMP_DIR = Path(tempfile.mkdtemp(prefix="quizboard-tests-"))

os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["ADMIN_NAME"] = "admin"
os.environ["ADMIN_USER_ID"] = "1234aa"
os.environ["ADMIN_PASSWORD"] = "wj211@"
os.environ["DB_RESET"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from quizboard.app import app  # noqa: E402
from quizboard.core import engine as app_engine  # noqa: E402

ADMIN_ID = "1234aa"
ADMIN_PASSWORD = "wj211@"


@pytest.fixture
def engine():
    SQLModel.metadata.drop_all(app_engine)
    SQLModel.metadata.create_all(app_engine)
    yield app_engine


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def admin_client(client):
    """Client holding an authenticated admin session."""

    client.post("/api/users/login", json={"name": "admin", "isAdminInit": True})
    res = client.post("/api/admin/auth", json={"id": ADMIN_ID, "password": ADMIN_PASSWORD})
    assert res.status_code == 200
    return client
