import sqlite3

from exercise_tracker_api.app.core.config import settings
from exercise_tracker_api.app.services.exercise_service import ExerciseService

NO_SUCH_USER = "0" * 24


def test_add_exercise_echoes_long_form_date(client, make_user):
    user_id = make_user("fcc_test")

    response = client.post(
        f"/api/users/{user_id}/exercises",
        json={"description": "test run", "duration": 30, "date": "2023-01-15"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "username": "fcc_test",
        "description": "test run",
        "duration": 30,
        "date": "Sun Jan 15 2023",
        "_id": user_id,
    }


def test_add_exercise_defaults_date_to_today(client, make_user, add_exercise):
    user_id = make_user()
    assert add_exercise(user_id)["date"] == "Sun Mar 10 2024"
    assert add_exercise(user_id, date="")["date"] == "Sun Mar 10 2024"


def test_add_exercise_accepts_form_fields(client, make_user):
    user_id = make_user()
    response = client.post(
        f"/api/users/{user_id}/exercises",
        data={"description": "swim", "duration": "45", "date": "2023-06-01"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["duration"] == 45
    assert body["date"] == "Thu Jun 01 2023"


def test_add_exercise_for_unknown_user_is_404_and_stores_nothing(client):
    response = client.post(
        f"/api/users/{NO_SUCH_USER}/exercises",
        json={"description": "run", "duration": 10},
    )
    assert response.status_code == 404
    assert response.json() == {"message": "User not found!"}

    deleted = client.delete("/api/exercises").json()
    assert deleted["result"]["deletedCount"] == 0


def test_add_exercise_with_malformed_user_id_is_400(client):
    response = client.post("/api/users/not-an-id/exercises", json={"description": "run", "duration": 10})
    assert response.status_code == 400


def test_non_numeric_duration_is_rejected(client, make_user):
    user_id = make_user()
    response = client.post(
        f"/api/users/{user_id}/exercises",
        json={"description": "run", "duration": "abc"},
    )
    assert response.status_code == 400
    assert response.json() == {"message": "duration must be an integer"}
    assert client.get(f"/api/users/{user_id}/logs").json()["count"] == 0


def test_missing_fields_are_rejected(client, make_user):
    user_id = make_user()
    no_description = client.post(f"/api/users/{user_id}/exercises", json={"duration": 10})
    assert no_description.status_code == 400
    assert no_description.json() == {"message": "description is required"}

    no_duration = client.post(f"/api/users/{user_id}/exercises", json={"description": "run"})
    assert no_duration.status_code == 400
    assert no_duration.json() == {"message": "duration is required"}


def test_invalid_dates_are_rejected(client, make_user):
    user_id = make_user()
    for bad in ("15/01/2023", "2023-02-30", "2023-1-5"):
        response = client.post(
            f"/api/users/{user_id}/exercises",
            json={"description": "run", "duration": 10, "date": bad},
        )
        assert response.status_code == 400, bad


def test_deleting_users_keeps_their_exercises(client, make_user, add_exercise):
    user_id = make_user()
    add_exercise(user_id, date="2023-01-01")

    assert client.delete("/api/users").json()["result"]["deletedCount"] == 1
    response = client.delete("/api/exercises")
    assert response.status_code == 200
    assert response.json() == {
        "message": "All exercises have been deleted!",
        "result": {"acknowledged": True, "deletedCount": 1},
    }


def test_oversized_duration_is_rejected(client, make_user):
    user_id = make_user()
    for duration in ("9" * 25, 2**63, "9" * 5000):
        response = client.post(
            f"/api/users/{user_id}/exercises",
            json={"description": "run", "duration": duration},
        )
        assert response.status_code == 400
        assert response.json() == {"message": "duration is out of range"}
    assert client.get(f"/api/users/{user_id}/logs").json()["count"] == 0


def test_malformed_user_id_is_named_in_message(client):
    response = client.post("/api/users/abc/exercises", json={"description": "run", "duration": 10})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid id: 'abc'"}


def _broken(*args, **kwargs):
    raise sqlite3.OperationalError("database is locked")


def test_exercise_insert_failure_maps_to_500(client, make_user, monkeypatch):
    user_id = make_user()
    monkeypatch.setattr(ExerciseService, "_insert", staticmethod(_broken))
    response = client.post(
        f"/api/users/{user_id}/exercises",
        json={"description": "run", "duration": 10},
    )
    assert response.status_code == 500
    assert response.json() == {"message": "Exercise creation failed!"}


def test_delete_exercises_failure_maps_to_500(client, monkeypatch):
    monkeypatch.setattr(ExerciseService, "_delete_all", staticmethod(_broken))
    response = client.delete("/api/exercises")
    assert response.status_code == 500
    assert response.json() == {"message": "Deleting all exercises failed!"}


def test_delete_exercises_requires_admin_token_when_configured(client, make_user, add_exercise, monkeypatch):
    monkeypatch.setattr(settings, "admin_token", "s3cret")
    add_exercise(make_user(), date="2023-01-01")

    assert client.delete("/api/exercises").status_code == 401
    wrong = client.delete("/api/exercises", headers={"Authorization": "Bearer nope"})
    assert wrong.status_code == 401

    ok = client.delete("/api/exercises", headers={"Authorization": "Bearer s3cret"})
    assert ok.status_code == 200
    assert ok.json()["result"]["deletedCount"] == 1
