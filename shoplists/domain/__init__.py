# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .lists import ListNotFoundError, ListRepository, ShoppingList, ShoppingListPatch
from .users import (
    CredentialStore,
    InvalidCredentialsError,
    Role,
    Session,
    SessionRegistry,
    User,
)

__all__ = [
    "CredentialStore",
    "InvalidCredentialsError",
    "ListNotFoundError",
    "ListRepository",
    "Role",
    "Session",
    "SessionRegistry",
    "ShoppingList",
    "ShoppingListPatch",
    "User",
]
