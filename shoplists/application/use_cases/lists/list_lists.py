# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shoplists.domain.lists import ListRepository, ShoppingList


class ListListsUseCase:
    def __init__(self, *, lists: ListRepository) -> None:
        self._lists = lists

    def execute(self) -> list[ShoppingList]:
        return self._lists.list_all()
