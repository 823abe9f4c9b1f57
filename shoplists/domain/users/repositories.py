# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Session, User


class CredentialStore(Protocol):
    def find(self, username: str) -> User | None: ...


class SessionRegistry(Protocol):
    def create(self, username: str) -> Session: ...
    def is_valid(self, token: str) -> bool: ...
    def resolve_user(self, token: str) -> User: ...
    def purge_expired(self) -> int: ...
    def count(self) -> int: ...
