import asyncio

from exercise_tracker_api.app.core.config import settings
from exercise_tracker_api.app.services.user_service import UserService


def test_index_serves_landing_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Exercise tracker" in response.text


def test_static_assets_are_served(client):
    response = client.get("/public/style.css")
    assert response.status_code == 200


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_cors_headers(client):
    response = client.get("/api/users", headers={"Origin": "https://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_unknown_route_returns_json_message(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_slow_request_times_out(client, monkeypatch):
    async def slow_list_users():
        await asyncio.sleep(0.5)
        return []

    monkeypatch.setattr(settings, "request_timeout_seconds", 0.05)
    monkeypatch.setattr(UserService, "list_users", slow_list_users)

    response = client.get("/api/users")
    assert response.status_code == 504
    assert response.json() == {"message": "Request timed out!"}
