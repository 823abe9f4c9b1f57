# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shoplists.domain.lists import ListRepository, ShoppingList


class CreateListUseCase:
    def __init__(self, *, lists: ListRepository) -> None:
        self._lists = lists

    def execute(self, shopping_list: ShoppingList) -> ShoppingList:
        # ids are taken as supplied; duplicates are allowed
        return self._lists.create(shopping_list)
