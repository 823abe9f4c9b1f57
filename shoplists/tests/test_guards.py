from __future__ import annotations

import pytest
from flask import Flask, jsonify

from shoplists.infrastructure.auth import AccessGuard, extract_bearer_token
from shoplists.infrastructure.repositories import InMemoryCredentialStore, InMemorySessionRegistry
from shoplists.shared.config import CredentialsConfig
from shoplists.shared.middleware.error_handler import configure_error_handling


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer 123", "123"),
        ("Bearer:123", "123"),
        ("Bearer  123", " 123"),
        ("Bearer", None),
        ("Bearer ", None),
        ("bearer 123", None),
        ("Token 123", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_bearer_token(header: str | None, expected: str | None) -> None:
    assert extract_bearer_token(header) == expected


@pytest.fixture()
def guarded(clock):
    credentials = InMemoryCredentialStore.seeded(CredentialsConfig())
    sessions = InMemorySessionRegistry(credentials, clock=clock)
    guard = AccessGuard(sessions=sessions, credentials=credentials)
    calls: list[str] = []

    app = Flask(__name__)
    configure_error_handling(app)

    @guard.auth_required
    def read(current_user):
        calls.append(f"read:{current_user.username}")
        return jsonify({"user": current_user.username})

    @guard.admin_required
    def write(current_user):
        calls.append(f"write:{current_user.username}")
        return jsonify({"user": current_user.username})

    app.add_url_rule("/read", view_func=read)
    app.add_url_rule("/write", view_func=write, methods=["POST"])
    return app, sessions, calls


def test_missing_header_is_rejected_before_view(guarded) -> None:
    app, _, calls = guarded
    with app.test_client() as client:
        assert client.get("/read").status_code == 401
        assert client.post("/write").status_code == 401
    assert calls == []


def test_unknown_token_is_rejected(guarded) -> None:
    app, _, calls = guarded
    with app.test_client() as client:
        response = client.get("/read", headers={"Authorization": "Bearer 999"})
    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthorized"}
    assert calls == []


def test_user_reads_but_cannot_write(guarded) -> None:
    app, sessions, calls = guarded
    token = sessions.create("user").token
    headers = {"Authorization": f"Bearer {token}"}
    with app.test_client() as client:
        assert client.get("/read", headers=headers).get_json() == {"user": "user"}
        forbidden = client.post("/write", headers=headers)
    assert forbidden.status_code == 403
    assert forbidden.get_json() == {"error": "forbidden"}
    assert calls == ["read:user"]


def test_admin_passes_both_guards(guarded) -> None:
    app, sessions, calls = guarded
    token = sessions.create("admin").token
    headers = {"Authorization": f"Bearer {token}"}
    with app.test_client() as client:
        assert client.get("/read", headers=headers).status_code == 200
        assert client.post("/write", headers=headers).status_code == 200
    assert calls == ["read:admin", "write:admin"]


def test_invalid_token_fails_before_role_check(guarded) -> None:
    app, _, calls = guarded
    with app.test_client() as client:
        response = client.post("/write", headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401
    assert calls == []
