from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask
from flask.testing import FlaskClient

from shoplists.app import create_app
from shoplists.container import Container
from shoplists.shared.config import AppConfig, SessionConfig


class FrozenClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(session=SessionConfig(sweep_interval=0))


@pytest.fixture()
def container(config: AppConfig, clock: FrozenClock) -> Container:
    return Container(config, clock=clock)


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as c:
        yield c


def login(client: FlaskClient, username: str, password: str = "password") -> str:
    response = client.post("/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.get_json()
    return response.get_json()["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers(client: FlaskClient) -> dict[str, str]:
    return bearer(login(client, "admin"))


@pytest.fixture()
def user_headers(client: FlaskClient) -> dict[str, str]:
    return bearer(login(client, "user"))


@pytest.fixture()
def login_as(client: FlaskClient):
    def _login(username: str, password: str = "password") -> dict[str, str]:
        return bearer(login(client, username, password))

    return _login
