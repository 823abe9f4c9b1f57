# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(slots=True)
class ShoppingList:
    """A named, ordered list of items.

    ``id`` is supplied by the caller and is not required to be unique; stores
    resolve an id to the first list carrying it.
    """

    id: int
    name: str
    items: list[str] = field(default_factory=list)

    def copy(self) -> ShoppingList:
        return replace(self, items=list(self.items))

    def apply(self, patch: ShoppingListPatch) -> None:
        if patch.name is not None:
            self.name = patch.name
        if patch.items is not None:
            self.items = list(patch.items)

    def push(self, item: str) -> None:
        self.items.append(item)


@dataclass(slots=True, frozen=True)
class ShoppingListPatch:
    name: str | None = None
    items: tuple[str, ...] | None = None

    def is_empty(self) -> bool:
        return self.name is None and self.items is None
