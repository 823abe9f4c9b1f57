# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shoplists.domain.lists import ListRepository, ShoppingList, ShoppingListPatch


class PatchListUseCase:
    def __init__(self, *, lists: ListRepository) -> None:
        self._lists = lists

    def execute(self, list_id: int, patch: ShoppingListPatch) -> ShoppingList:
        if patch.is_empty():
            return self._lists.get(list_id)
        return self._lists.patch(list_id, patch)
