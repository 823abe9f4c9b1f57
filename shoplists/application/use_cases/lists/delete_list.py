# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shoplists.domain.lists import ListRepository


class DeleteListUseCase:
    def __init__(self, *, lists: ListRepository) -> None:
        self._lists = lists

    def execute(self, list_id: int) -> None:
        self._lists.delete(list_id)
