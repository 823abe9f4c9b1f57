# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from shoplists.domain.users import CredentialStore, Session, User
from shoplists.shared.errors import UnauthenticatedError
from shoplists.shared.logging import logger

# tokens are decimal renderings of integers in [0, TOKEN_SPACE)
TOKEN_SPACE = 100_000_000_000
DEFAULT_TTL = timedelta(days=7)


def utcnow() -> datetime:
    return datetime.now(UTC)


class InMemorySessionRegistry:
    def __init__(
        self,
        credentials: CredentialStore,
        *,
        lock: threading.RLock | None = None,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = utcnow,
        token_factory: Callable[[], str] | None = None,
    ) -> None:
        self._credentials = credentials
        self._lock = lock or threading.RLock()
        self._ttl = ttl
        self._clock = clock
        self._token_factory = token_factory or (lambda: str(secrets.randbelow(TOKEN_SPACE)))
        self._sessions: dict[str, Session] = {}

    def create(self, username: str) -> Session:
        with self._lock:
            token = self._token_factory()
            while token in self._sessions:
                logger.warning("sessions.create: token collision, drawing a new one")
                token = self._token_factory()

            session = Session(
                token=token,
                username=username,
                expires_at=self._clock() + self._ttl,
            )
            self._sessions[token] = session

        logger.info(
            f"Issued session for user={username} exp={session.expires_at.isoformat()}"
        )
        return session

    def _lookup(self, token: str) -> tuple[Session, User] | None:
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.is_expired(self._clock()):
            return None
        user = self._credentials.find(session.username)
        if user is None:
            return None
        return session, user

    def is_valid(self, token: str) -> bool:
        with self._lock:
            return self._lookup(token) is not None

    def resolve_user(self, token: str) -> User:
        with self._lock:
            found = self._lookup(token)
        if found is None:
            raise UnauthenticatedError()
        return found[1]

    def purge_expired(self) -> int:
        with self._lock:
            now = self._clock()
            expired = [t for t, s in self._sessions.items() if s.is_expired(now)]
            for token in expired:
                del self._sessions[token]
        return len(expired)

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)


__all__ = ["DEFAULT_TTL", "InMemorySessionRegistry", "TOKEN_SPACE", "utcnow"]
