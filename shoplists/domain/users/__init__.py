# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Role, Session, User
from .exceptions import InvalidCredentialsError
from .repositories import CredentialStore, SessionRegistry

__all__ = [
    "CredentialStore",
    "InvalidCredentialsError",
    "Role",
    "Session",
    "SessionRegistry",
    "User",
]
