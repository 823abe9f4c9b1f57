from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from shoplists.domain.lists import ShoppingList, ShoppingListPatch


class ShoppingListDTO(BaseModel):
    # JSON null leaves a field at its zero value
    id: int | None = 0
    name: str | None = ""
    items: list[str] | None = Field(default_factory=list)

    model_config = ConfigDict(strict=True)

    def to_entity(self) -> ShoppingList:
        return ShoppingList(
            id=self.id or 0,
            name=self.name or "",
            items=list(self.items or []),
        )

    @classmethod
    def from_entity(cls, shopping_list: ShoppingList) -> ShoppingListDTO:
        return cls(id=shopping_list.id, name=shopping_list.name, items=list(shopping_list.items))


class ShoppingListPatchDTO(BaseModel):
    name: str | None = None
    items: list[str] | None = None

    model_config = ConfigDict(strict=True)

    def to_entity(self) -> ShoppingListPatch:
        items = tuple(self.items) if self.items is not None else None
        return ShoppingListPatch(name=self.name, items=items)


class ListPushDTO(BaseModel):
    item: str | None = ""

    model_config = ConfigDict(strict=True)

    @property
    def value(self) -> str:
        return self.item or ""
