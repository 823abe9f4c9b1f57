# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shoplists.domain.lists import ListRepository, ShoppingList


class GetListUseCase:
    def __init__(self, *, lists: ListRepository) -> None:
        self._lists = lists

    def execute(self, list_id: int) -> ShoppingList:
        return self._lists.get(list_id)

    def exists(self, list_id: int) -> bool:
        return self._lists.exists(list_id)
