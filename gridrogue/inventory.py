"""Items, inventories, equipment slots and items lying on the ground."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class ItemType(IntEnum):
    WEAPON = 0
    ARMOR = 1
    CONSUMABLE = 2
    MISC = 3


@dataclass
class Item:
    """A game item."""

    name: str = ""
    description: str = ""
    item_type: ItemType = ItemType.WEAPON
    glyph: str = ""
    color: int = 0
    value: int = 0
    stackable: bool = False
    max_stack: int = 0


@dataclass
class ItemStack:
    """A quantity of one item held in an inventory."""

    item: Item
    quantity: int


@dataclass
class Inventory:
    """A bounded list of item stacks."""

    capacity: int = 0
    items: list[ItemStack] = field(default_factory=list)

    def add_item(self, item: Item, quantity: int) -> bool:
        """Add items, topping up matching stacks first; False if no room."""
        if item.stackable:
            for stack in self.items:
                if stack.item.name != item.name:
                    continue
                space_left = item.max_stack - stack.quantity
                if space_left >= quantity:
                    stack.quantity += quantity
                    return True
                if space_left > 0:
                    stack.quantity = item.max_stack
                    quantity -= space_left

        if len(self.items) < self.capacity:
            self.items.append(ItemStack(item=item, quantity=quantity))
            return True
        return False

    def remove_item(self, item_name: str, quantity: int) -> bool:
        """Take items from the first stack holding enough of them."""
        for index, stack in enumerate(self.items):
            if stack.item.name == item_name and stack.quantity >= quantity:
                stack.quantity -= quantity
                if stack.quantity == 0:
                    del self.items[index]
                return True
        return False

    def has_item(self, item_name: str, quantity: int) -> bool:
        """True if a single stack holds at least ``quantity`` of the item."""
        return any(
            stack.item.name == item_name and stack.quantity >= quantity
            for stack in self.items
        )

    def item_count(self, item_name: str) -> int:
        return sum(s.quantity for s in self.items if s.item.name == item_name)

    def is_full(self) -> bool:
        return len(self.items) >= self.capacity


@dataclass
class Equipment:
    """Equipped weapon, armour and accessory."""

    weapon: Optional[Item] = None
    armor: Optional[Item] = None
    accessory: Optional[Item] = None

    def equip_item(self, item: Item) -> Optional[Item]:
        """Equip a weapon or armour, returning what was in the slot before.

        Items of other kinds are not equipped and None is returned.
        """
        if item.item_type == ItemType.WEAPON:
            old, self.weapon = self.weapon, item
        elif item.item_type == ItemType.ARMOR:
            old, self.armor = self.armor, item
        else:
            return None
        return old

    def unequip_item(self, item_type: ItemType) -> Optional[Item]:
        if item_type == ItemType.WEAPON:
            item, self.weapon = self.weapon, None
            return item
        if item_type == ItemType.ARMOR:
            item, self.armor = self.armor, None
            return item
        return None

    def equipped_item(self, item_type: ItemType) -> Optional[Item]:
        if item_type == ItemType.WEAPON:
            return self.weapon
        if item_type == ItemType.ARMOR:
            return self.armor
        return None


@dataclass
class ItemPickup:
    """An item lying on the ground, ready to be picked up."""

    item: Item = field(default_factory=Item)
    quantity: int = 0