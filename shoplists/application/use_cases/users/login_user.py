# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hmac

from shoplists.domain.users import (
    CredentialStore,
    InvalidCredentialsError,
    Session,
    SessionRegistry,
)


class LoginUserUseCase:
    def __init__(self, *, credentials: CredentialStore, sessions: SessionRegistry) -> None:
        self._credentials = credentials
        self._sessions = sessions

    def execute(self, username: str, password: str) -> Session:
        user = self._credentials.find(username)
        password_valid = user is not None and hmac.compare_digest(
            user.password.encode(), password.encode()
        )

        if not password_valid:
            raise InvalidCredentialsError()

        return self._sessions.create(user.username)
