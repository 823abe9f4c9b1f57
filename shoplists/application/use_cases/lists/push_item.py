# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shoplists.domain.lists import ListRepository, ShoppingList


class PushItemUseCase:
    def __init__(self, *, lists: ListRepository) -> None:
        self._lists = lists

    def execute(self, list_id: int, item: str) -> ShoppingList:
        return self._lists.push(list_id, item)
