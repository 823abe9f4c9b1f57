# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from shoplists.domain.users import CredentialStore, SessionRegistry, User
from shoplists.infrastructure.audit import AuditAction, audit_log
from shoplists.shared.errors import ForbiddenError, UnauthenticatedError
from shoplists.shared.logging import logger

BEARER_SCHEME = "Bearer"
# scheme marker plus exactly one separator character
_TOKEN_OFFSET = len(BEARER_SCHEME) + 1


def extract_bearer_token(header_value: str | None) -> str | None:
    if not header_value or not header_value.startswith(BEARER_SCHEME):
        return None
    return header_value[_TOKEN_OFFSET:] or None


class AccessGuard:
    """Decorators protecting views with session and role checks.

    ``auth_required`` admits any caller holding a valid session and passes the
    resolved user to the view as ``current_user``. ``admin_required`` runs the
    same check first, then re-reads the caller from the credential store and
    rejects non-admins. A rejection ends the request before the view runs.
    """

    def __init__(self, *, sessions: SessionRegistry, credentials: CredentialStore) -> None:
        self._sessions = sessions
        self._credentials = credentials

    def _authenticate(self) -> User:
        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is None:
            logger.warning(
                f"No bearer credential on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise UnauthenticatedError()

        if not self._sessions.is_valid(token):
            logger.warning(
                f"Auth failed (session not found/expired) on {request.method} {request.path}"
            )
            raise UnauthenticatedError()

        return self._sessions.resolve_user(token)

    def auth_required(self, f: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(f)
        def inner(*args: Any, **kwargs: Any) -> Any:
            user = self._authenticate()
            g.username = user.username
            kwargs["current_user"] = user
            logger.debug(f"Auth OK: user={user.username} {request.method} {request.path}")
            return f(*args, **kwargs)

        return inner

    def admin_required(self, f: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(f)
        def inner(*args: Any, current_user: User, **kwargs: Any) -> Any:
            user = self._credentials.find(current_user.username)
            if user is None:
                raise UnauthenticatedError()

            if not user.is_admin:
                logger.warning(
                    f"Admin access denied: user {user.username} is not admin "
                    f"on {request.method} {request.path}"
                )
                audit_log(
                    AuditAction.ACCESS_DENIED,
                    username=user.username,
                    ip_address=request.remote_addr,
                    details={"method": request.method, "path": request.path},
                    success=False,
                )
                raise ForbiddenError()

            return f(*args, current_user=user, **kwargs)

        return self.auth_required(inner)


__all__ = ["AccessGuard", "BEARER_SCHEME", "extract_bearer_token"]
