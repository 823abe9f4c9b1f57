# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import ShoppingList, ShoppingListPatch


class ListRepository(Protocol):
    def create(self, shopping_list: ShoppingList) -> ShoppingList: ...
    def list_all(self) -> list[ShoppingList]: ...
    def get(self, list_id: int) -> ShoppingList: ...
    def exists(self, list_id: int) -> bool: ...
    def replace(self, list_id: int, shopping_list: ShoppingList) -> ShoppingList: ...
    def patch(self, list_id: int, patch: ShoppingListPatch) -> ShoppingList: ...
    def push(self, list_id: int, item: str) -> ShoppingList: ...
    def delete(self, list_id: int) -> None: ...
    def count(self) -> int: ...
