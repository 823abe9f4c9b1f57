# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import ShoppingList, ShoppingListPatch
from .exceptions import ListNotFoundError
from .repositories import ListRepository

__all__ = ["ListNotFoundError", "ListRepository", "ShoppingList", "ShoppingListPatch"]
