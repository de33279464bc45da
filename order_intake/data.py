"""Static menu catalog."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from order_intake.constant import MENU_ITEMS
from order_intake.models import MenuItem


class MenuCatalog:
    """Read-only mapping from item name to price and prep time."""

    def __init__(self, items: Iterable[MenuItem]) -> None:
        by_name: dict[str, MenuItem] = {}
        for item in items:
            if item.name in by_name:
                raise ValueError(f"Duplicate menu item: {item.name}")
            if item.price < 0 or item.prep_time_minutes < 0:
                raise ValueError(f"Menu item {item.name} has a negative price or prep time")
            by_name[item.name] = item
        self._items: Mapping[str, MenuItem] = MappingProxyType(by_name)

    @classmethod
    def from_raw(cls, raw: Mapping[str, tuple[int, int]]) -> MenuCatalog:
        """Build a catalog from a name -> (price, prep minutes) mapping."""
        return cls(MenuItem(name, int(price), int(prep)) for name, (price, prep) in raw.items())

    def lookup(self, name: str) -> MenuItem | None:
        """Return the menu item with this exact name, or None."""
        return self._items.get(name)

    def list_all(self) -> tuple[MenuItem, ...]:
        """Return every menu item in catalog order."""
        return tuple(self._items.values())

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)


DEFAULT_MENU = MenuCatalog.from_raw(MENU_ITEMS)
