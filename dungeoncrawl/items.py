"""Items that characters carry and that levels hand out as treasure."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["ItemType", "Item", "to_item_type"]


class ItemType(Enum):
    """Kind of item, which decides the attack it boosts."""

    WEAPON = "weapon"
    SPELL = "spell"

    def __str__(self) -> str:
        return self.value.capitalize()


def to_item_type(text: str) -> ItemType:
    """Turn a level-file type name ("weapon" or "spell") into an ItemType."""
    for item_type in ItemType:
        if text == item_type.value:
            return item_type
    raise ValueError(f"Cannot convert string to ItemType enum: {text}")


@dataclass
class Item:
    """A named item whose bonus is a percentage added to an attack."""

    name: str
    bonus: int
    item_type: ItemType

    def __str__(self) -> str:
        return f"{self.name}, Multiplier: {self.bonus}, Type: {self.item_type}"