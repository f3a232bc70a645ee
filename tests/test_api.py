from fastapi.testclient import TestClient

from quizboard.api.routers import problems
from quizboard.app import app
from tests.conftest import ADMIN_ID, ADMIN_PASSWORD


def _login(client, name):
    res = client.post("/api/users/login", json={"name": name})
    assert res.status_code == 200
    return res.json()


def test_health(client):
    assert client.get("/api/health").json() == {"ok": True}


def test_login_is_idempotent(client):
    first = _login(client, "alice")
    second = _login(client, "alice")
    assert first["id"] == second["id"]
    assert second["score"] == 0
    assert "password" not in first


def test_login_without_name_is_400(client):
    res = client.post("/api/users/login", json={})
    assert res.status_code == 400
    assert res.text == "Name is required"


def test_login_with_non_object_body_is_400(client):
    res = client.post("/api/users/login", json=["alice"])
    assert res.status_code == 400


def test_admin_auth(client):
    client.post("/api/users/login", json={"name": "admin", "isAdminInit": True})

    bad = client.post("/api/admin/auth", json={"id": ADMIN_ID, "password": "nope"})
    assert bad.status_code == 401

    res = client.post("/api/admin/auth", json={"id": ADMIN_ID, "password": ADMIN_PASSWORD})
    assert res.status_code == 200
    assert res.json()["isAdmin"] is True
    assert "password" not in res.json()

    assert client.get("/api/admin/me").json()["userId"] == ADMIN_ID
    assert client.post("/api/admin/logout").json() == {"ok": True}
    assert client.get("/api/admin/me").status_code == 401


def test_create_problem_requires_admin_session(client):
    res = client.post(
        "/api/problems", json={"date": "2025-01-01", "question": "q", "answer": 7}
    )
    assert res.status_code == 401
    assert client.get("/api/problems").json() == []


def test_create_problem_and_conflict(admin_client):
    body = {"date": "2025-01-01", "question": "1 + 6?", "answer": 7}
    res = admin_client.post("/api/problems", json=body)
    assert res.status_code == 201
    assert res.json()["date"] == "2025-01-01"
    assert res.json()["solvers"] == []

    dup = admin_client.post("/api/problems", json={**body, "question": "other"})
    assert dup.status_code == 409

    problems = admin_client.get("/api/problems").json()
    assert len(problems) == 1
    assert problems[0]["question"] == "1 + 6?"


def test_create_problem_missing_field(admin_client):
    res = admin_client.post("/api/problems", json={"date": "2025-01-01", "question": "q"})
    assert res.status_code == 400


def test_problems_sorted_by_date_desc(admin_client):
    for date in ("2025-01-02", "2025-01-03", "2025-01-01"):
        admin_client.post("/api/problems", json={"date": date, "question": "q", "answer": 1})
    dates = [p["date"] for p in admin_client.get("/api/problems").json()]
    assert dates == ["2025-01-03", "2025-01-02", "2025-01-01"]


def test_solve_flow_and_leaderboard(admin_client):
    admin_client.post(
        "/api/problems", json={"date": "2025-01-01", "question": "1 + 6?", "answer": 7}
    )
    alice = _login(admin_client, "alice")
    bob = _login(admin_client, "bob")

    res = admin_client.post("/api/problems/2025-01-01/solve", json={"userId": alice["id"], "answer": "7"})
    assert res.status_code == 200
    assert res.json() == {"success": True, "isCorrect": True, "newScore": 1}

    again = admin_client.post("/api/problems/2025-01-01/solve", json={"userId": alice["id"], "answer": 7})
    assert again.status_code == 400

    wrong = admin_client.post("/api/problems/2025-01-01/solve", json={"userId": bob["id"], "answer": 3})
    assert wrong.json() == {"success": True, "isCorrect": False, "newScore": 0}

    board = admin_client.get("/api/users").json()
    assert [u["name"] for u in board] == ["alice", "bob"]
    assert board[0]["score"] == 1
    assert board[0]["latestQuizDate"] is not None
    assert all(not u["isAdmin"] for u in board)

    solvers = admin_client.get("/api/problems/2025-01-01").json()["solvers"]
    assert [(s["name"], s["isCorrect"]) for s in solvers] == [("alice", True), ("bob", False)]


def test_solve_not_found(client):
    alice = _login(client, "alice")
    res = client.post("/api/problems/2030-01-01/solve", json={"userId": alice["id"], "answer": 1})
    assert res.status_code == 404
    assert _login(client, "alice")["score"] == 0


def test_unknown_api_path_is_plaintext_404(client):
    res = client.get("/api/nope")
    assert res.status_code == 404
    assert res.text == "API Endpoint Not Found"
    assert client.post("/api/nope/deeper").status_code == 404


def test_frontend_fallback(client):
    index = client.get("/")
    assert index.status_code == 200
    assert "text/html" in index.headers["content-type"]

    deep = client.get("/leaderboard/today")
    assert deep.status_code == 200
    assert deep.text == index.text

    script = client.get("/script.js")
    assert script.status_code == 200
    assert "javascript" in script.headers["content-type"]


def test_frontend_does_not_escape_static_dir(client):
    res = client.get("/..%2Fapp.py")
    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]


def test_oversized_answer_is_400(admin_client):
    res = admin_client.post(
        "/api/problems", json={"date": "2025-01-01", "question": "q", "answer": 10**20}
    )
    assert res.status_code == 400
    assert admin_client.get("/api/problems").json() == []


def test_oversized_user_id_is_404(admin_client):
    admin_client.post("/api/problems", json={"date": "2025-01-01", "question": "q", "answer": 1})
    res = admin_client.post("/api/problems/2025-01-01/solve", json={"userId": 10**20, "answer": 1})
    assert res.status_code == 404


def test_unexpected_error_returns_message(engine, monkeypatch):
    def broken(session):
        raise RuntimeError("quiz store unavailable")

    monkeypatch.setattr(problems, "list_quizzes", broken)
    with TestClient(app, raise_server_exceptions=False) as client:
        res = client.get("/api/problems")
    assert res.status_code == 500
    assert res.text == "quiz store unavailable"
