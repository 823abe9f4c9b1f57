# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading

from shoplists.domain.lists import ListNotFoundError, ShoppingList, ShoppingListPatch


class InMemoryListRepository:
    """Ordered list store with first-match-by-id lookups.

    Every read-then-write runs under ``lock`` so the index found by the scan
    is still the one written back. Values handed out are copies.
    """

    def __init__(self, *, lock: threading.RLock | None = None) -> None:
        self._lock = lock or threading.RLock()
        self._lists: list[ShoppingList] = []

    def _index_of(self, list_id: int) -> int:
        for index, shopping_list in enumerate(self._lists):
            if shopping_list.id == list_id:
                return index
        raise ListNotFoundError(list_id)

    def create(self, shopping_list: ShoppingList) -> ShoppingList:
        with self._lock:
            self._lists.append(shopping_list.copy())
        return shopping_list.copy()

    def list_all(self) -> list[ShoppingList]:
        with self._lock:
            return [shopping_list.copy() for shopping_list in self._lists]

    def get(self, list_id: int) -> ShoppingList:
        with self._lock:
            return self._lists[self._index_of(list_id)].copy()

    def exists(self, list_id: int) -> bool:
        with self._lock:
            return any(shopping_list.id == list_id for shopping_list in self._lists)

    def replace(self, list_id: int, shopping_list: ShoppingList) -> ShoppingList:
        with self._lock:
            index = self._index_of(list_id)
            self._lists[index] = shopping_list.copy()
            return self._lists[index].copy()

    def patch(self, list_id: int, patch: ShoppingListPatch) -> ShoppingList:
        with self._lock:
            target = self._lists[self._index_of(list_id)]
            target.apply(patch)
            return target.copy()

    def push(self, list_id: int, item: str) -> ShoppingList:
        with self._lock:
            target = self._lists[self._index_of(list_id)]
            target.push(item)
            return target.copy()

    def delete(self, list_id: int) -> None:
        with self._lock:
            del self._lists[self._index_of(list_id)]

    def count(self) -> int:
        with self._lock:
            return len(self._lists)


__all__ = ["InMemoryListRepository"]
