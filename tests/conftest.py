from datetime import date

import pytest
from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.clock import get_today
from exercise_tracker_api.app.core.config import settings
from exercise_tracker_api.app.main import app

FIXED_TODAY = date(2024, 3, 10)


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "exercise_tracker_test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    monkeypatch.setattr(settings, "admin_token", "")
    return path


@pytest.fixture
def client(db_path):
    app.dependency_overrides[get_today] = lambda: FIXED_TODAY
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    def _make_user(username="fcc_test"):
        response = client.post("/api/users", json={"username": username})
        assert response.status_code == 200
        return response.json()["_id"]

    return _make_user


@pytest.fixture
def add_exercise(client):
    def _add_exercise(user_id, description="run", duration=30, date=None):
        payload = {"description": description, "duration": duration}
        if date is not None:
            payload["date"] = date
        response = client.post(f"/api/users/{user_id}/exercises", json=payload)
        assert response.status_code == 200, response.text
        return response.json()

    return _add_exercise
