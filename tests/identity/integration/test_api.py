"""Integration tests for the Identity API endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from identity.api import user_router
from protean.integrations.fastapi import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(user_router)
    register_exception_handlers(app)
    return TestClient(app)


def _register(client, username="alice", **overrides):
    payload = {
        "username": username,
        "email": f"{username}@example.com",
        "password": "secret123",
    }
    payload.update(overrides)
    response = client.post("/users/register", json=payload)
    assert response.status_code == 201
    return response.json()["user_id"]


class TestRegisterEndpoint:
    def test_register(self, client):
        response = client.post(
            "/users/register",
            json={"username": "alice", "email": "alice@example.com", "password": "secret123"},
        )
        assert response.status_code == 201
        assert "user_id" in response.json()

    def test_duplicate_username(self, client):
        _register(client)
        response = client.post(
            "/users/register",
            json={"username": "alice", "email": "other@example.com", "password": "secret123"},
        )
        assert response.status_code == 400

    def test_short_password_rejected_by_schema(self, client):
        response = client.post(
            "/users/register",
            json={"username": "alice", "email": "alice@example.com", "password": "123"},
        )
        assert response.status_code == 422


class TestLoginEndpoint:
    def test_login(self, client):
        user_id = _register(client)
        response = client.post("/users/login", json={"email": "alice@example.com", "password": "secret123"})
        assert response.status_code == 200
        assert response.json()["user"]["user_id"] == user_id

    def test_bad_credentials(self, client):
        _register(client)
        response = client.post("/users/login", json={"email": "alice@example.com", "password": "wrongpass"})
        assert response.status_code == 401


class TestProfileEndpoints:
    def test_get_profile(self, client):
        user_id = _register(client, bio="Movie fan")
        response = client.get(f"/users/{user_id}")
        assert response.status_code == 200
        assert response.json()["bio"] == "Movie fan"

    def test_unknown_user(self, client):
        assert client.get("/users/does-not-exist").status_code == 404

    def test_update_profile(self, client):
        user_id = _register(client)
        response = client.put(f"/users/{user_id}/profile", json={"location": "Oslo"})
        assert response.status_code == 200
        assert client.get(f"/users/{user_id}").json()["location"] == "Oslo"

    def test_list_and_search(self, client):
        _register(client, "alice")
        _register(client, "bob")

        assert client.get("/users").json()["count"] == 2
        found = client.get("/users/search", params={"q": "ALI"}).json()
        assert [u["username"] for u in found["users"]] == ["alice"]


class TestFollowEndpoints:
    def test_follow_flow(self, client):
        alice = _register(client, "alice")
        bob = _register(client, "bob")

        response = client.post(f"/users/{bob}/follow", json={"follower_id": alice})
        assert response.status_code == 201

        assert client.get(f"/users/{bob}/follow-status/{alice}").json()["is_following"] is True
        followers = client.get(f"/users/{bob}/followers").json()
        assert followers["count"] == 1
        assert followers["users"][0]["username"] == "alice"
        assert client.get(f"/users/{alice}/following").json()["count"] == 1

        response = client.delete(f"/users/{bob}/follow/{alice}")
        assert response.status_code == 200
        assert client.get(f"/users/{bob}/follow-status/{alice}").json()["is_following"] is False

    def test_follow_self(self, client):
        alice = _register(client)
        response = client.post(f"/users/{alice}/follow", json={"follower_id": alice})
        assert response.status_code == 400

    def test_unfollow_when_not_following(self, client):
        alice = _register(client, "alice")
        bob = _register(client, "bob")
        assert client.delete(f"/users/{bob}/follow/{alice}").status_code == 404
