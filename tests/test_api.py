from __future__ import annotations

import pytest

from src.roll_call.roll_call.core.exceptions import StoreUnavailableError
from src.roll_call.roll_call.main import create_app


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def teacher_client(client):
    resp = client.post("/login", json={"email": "t1@example.com", "password": "teach-pw"})
    assert resp.status_code == 200
    return client


def test_health(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "Server is running"


@pytest.mark.parametrize(
    "method,path",
    [("get", "/students"), ("post", "/attendance"), ("get", "/messages"), ("post", "/messages")],
)
def test_endpoints_require_login(client, method, path):
    resp = getattr(client, method)(path, json={})
    assert resp.status_code == 401


def test_signup_then_login(client):
    resp = client.post(
        "/signup",
        json={"name": "Kid", "email": "kid@example.com", "password": "secret1", "role": "student", "rollNumber": "R7"},
    )
    assert resp.status_code == 201
    assert resp.get_json()["userId"]

    resp = client.post("/login", json={"email": "kid@example.com", "password": "secret1"})
    assert resp.status_code == 200
    assert resp.get_json()["user"]["rollNumber"] == "R7"


def test_signup_validation_error(client):
    resp = client.post("/signup", json={"name": "Kid", "email": "kid@example.com", "password": "x", "role": "student"})
    assert resp.status_code == 400


def test_login_errors(client):
    assert client.post("/login", json={"email": "t1@example.com"}).status_code == 400
    assert client.post("/login", json={"email": "t1@example.com", "password": "nope"}).status_code == 401


def test_logout_clears_session(teacher_client):
    assert teacher_client.post("/logout").status_code == 200
    assert teacher_client.get("/students").status_code == 401


def test_mark_then_remark_scenario(teacher_client):
    resp = teacher_client.post("/attendance", json={"attendanceData": [{"rollNumber": "R1", "status": "present"}]})
    assert resp.status_code == 201
    records = resp.get_json()["attendanceRecords"]
    assert [(r["rollNumber"], r["status"]) for r in records] == [("R1", "present")]

    resp = teacher_client.post("/attendance", json={"attendanceData": [{"rollNumber": "R1", "status": "absent"}]})
    assert resp.status_code == 400
    assert resp.get_json()["alreadyMarkedRollNumbers"] == ["R1"]

    roster = teacher_client.get("/students").get_json()
    assert {e["rollNumber"]: e["attendanceStatus"] for e in roster} == {
        "R1": "present",
        "R2": "Not Marked",
        "R3": "Not Marked",
    }


def test_mark_attendance_unknown_roll_number(teacher_client, attendance_repo):
    resp = teacher_client.post("/attendance", json={"attendanceData": [{"rollNumber": "ZZZ", "status": "present"}]})
    assert resp.status_code == 404
    assert "ZZZ" in resp.get_json()["message"]
    assert attendance_repo.records == []


@pytest.mark.parametrize(
    "body",
    [{}, {"attendanceData": []}, {"attendanceData": [{"rollNumber": "R1", "status": "late"}]}],
)
def test_mark_attendance_invalid_input(teacher_client, body):
    assert teacher_client.post("/attendance", json=body).status_code == 400


def test_store_failure_is_opaque_500(teacher_client, users_repo):
    def boom():
        raise StoreUnavailableError("mysql: connection refused on 10.0.0.5")

    users_repo.list_students = boom
    resp = teacher_client.get("/students")

    assert resp.status_code == 500
    assert "10.0.0.5" not in resp.get_data(as_text=True)


def test_messages_flow(teacher_client, teacher, clock):
    resp = teacher_client.get("/messages")
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "No active messages"}

    resp = teacher_client.post("/messages", json={"teacherId": teacher.user_id, "message": "Fire drill", "duration": 5})
    assert resp.status_code == 201
    created = resp.get_json()["newMessage"]
    assert created["message"] == "Fire drill"
    assert created["duration"] == 5

    clock.advance(minutes=4)
    resp = teacher_client.get("/messages")
    assert [m["id"] for m in resp.get_json()] == [created["id"]]

    clock.advance(minutes=2)
    assert teacher_client.get("/messages").get_json() == {"message": "No active messages"}


def test_create_message_missing_fields(teacher_client):
    resp = teacher_client.post("/messages", json={"message": "hi"})
    assert resp.status_code == 400


def test_cors_allows_browser_client_with_credentials(client):
    resp = client.get("/", headers={"Origin": "http://localhost:5173"})

    assert resp.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"
    assert resp.headers["Access-Control-Allow-Credentials"] == "true"


def test_cors_ignores_unknown_origin(client):
    resp = client.get("/", headers={"Origin": "http://evil.example"})
    assert "Access-Control-Allow-Origin" not in resp.headers


def test_message_duration_over_limit_is_400(teacher_client, teacher):
    resp = teacher_client.post("/messages", json={"teacherId": teacher.user_id, "message": "x", "duration": 10**13})
    assert resp.status_code == 400
