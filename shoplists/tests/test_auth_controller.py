from __future__ import annotations

from datetime import timedelta

from flask.testing import FlaskClient

from shoplists.container import Container


def test_login_returns_fresh_token(client: FlaskClient, container: Container, clock) -> None:
    first = client.post("/login", json={"username": "admin", "password": "password"})
    second = client.post("/login", json={"username": "admin", "password": "password"})

    assert first.status_code == 200
    assert second.status_code == 200
    tokens = {first.get_json()["token"], second.get_json()["token"]}
    assert len(tokens) == 2

    registry = container.session_registry
    for token in tokens:
        assert token.isdigit()
        assert registry.is_valid(token)

    clock.advance(timedelta(days=7))
    assert not any(registry.is_valid(token) for token in tokens)


def test_login_success_body_has_only_token(client: FlaskClient) -> None:
    response = client.post("/login", json={"username": "user", "password": "password"})

    assert response.status_code == 200
    assert set(response.get_json()) == {"token"}


def test_wrong_password_is_unauthorized(client: FlaskClient, container: Container) -> None:
    response = client.post("/login", json={"username": "admin", "password": "nope"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid_credentials"}
    assert container.session_registry.count() == 0


def test_unknown_user_is_unauthorized(client: FlaskClient, container: Container) -> None:
    response = client.post("/login", json={"username": "mallory", "password": "password"})

    assert response.status_code == 401
    assert container.session_registry.count() == 0


def test_undecodable_login_body_is_unauthorized(client: FlaskClient, container: Container) -> None:
    garbage = client.post("/login", data="{not json", content_type="application/json")
    wrong_type = client.post("/login", json={"username": 1, "password": "password"})
    empty = client.post("/login")

    assert [r.status_code for r in (garbage, wrong_type, empty)] == [401, 401, 401]
    assert container.session_registry.count() == 0


def test_login_token_authorizes_requests(client: FlaskClient) -> None:
    token = client.post(
        "/login", json={"username": "user", "password": "password"}
    ).get_json()["token"]

    response = client.get("/v1/lists", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200


def test_expired_token_is_rejected(client: FlaskClient, clock) -> None:
    token = client.post(
        "/login", json={"username": "user", "password": "password"}
    ).get_json()["token"]
    clock.advance(timedelta(days=7, seconds=1))

    response = client.get("/v1/lists", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
