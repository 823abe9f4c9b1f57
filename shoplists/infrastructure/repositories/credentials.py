# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from shoplists.domain.users import Role, User
from shoplists.shared.config import CredentialsConfig


class InMemoryCredentialStore:
    """Read-only username -> User lookup fixed at construction time."""

    def __init__(self, users: Iterable[User]) -> None:
        self._users = MappingProxyType({user.username: user for user in users})

    @classmethod
    def seeded(cls, config: CredentialsConfig) -> InMemoryCredentialStore:
        return cls(
            [
                User(username="admin", role=Role.ADMIN, password=config.admin_password),
                User(username="user", role=Role.USER, password=config.user_password),
            ]
        )

    def find(self, username: str) -> User | None:
        return self._users.get(username)

    def __len__(self) -> int:
        return len(self._users)


__all__ = ["InMemoryCredentialStore"]
