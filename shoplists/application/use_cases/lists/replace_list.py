# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shoplists.domain.lists import ListRepository, ShoppingList


class ReplaceListUseCase:
    """Overwrite the first list with ``list_id`` by ``shopping_list``.

    The stored id becomes ``shopping_list.id``; a body carrying a different id
    moves the list to that id.
    """

    def __init__(self, *, lists: ListRepository) -> None:
        self._lists = lists

    def execute(self, list_id: int, shopping_list: ShoppingList) -> ShoppingList:
        return self._lists.replace(list_id, shopping_list)
