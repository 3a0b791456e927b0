"""A keyed registry of objects, kept in key order."""

from __future__ import annotations

from typing import Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class ObjectRegistry(Generic[K, T]):
    """Holds registered items of one kind, each under a unique key."""

    def __init__(self) -> None:
        self._items: dict[K, T] = {}

    def get(self, key: K) -> T | None:
        """Return the item registered under ``key``, or None."""
        return self._items.get(key)

    def insert(self, obj: T, key: K, replace: bool = False) -> bool:
        """Register ``obj`` under ``key``.

        An existing entry is kept and False returned unless ``replace`` is set.
        """
        if key in self._items and not replace:
            return False
        self._items[key] = obj
        return True

    def remove(self, key: K) -> T | None:
        """Drop the entry for ``key`` and return the item it held, if any."""
        return self._items.pop(key, None)

    def has(self, key: K) -> bool:
        """Tell whether an item is registered under ``key``."""
        return key in self._items

    def keys(self) -> list[K]:
        """Return the registered keys in ascending order."""
        return sorted(self._items)

    def items(self) -> list[tuple[K, T]]:
        """Return the ``(key, item)`` pairs in ascending key order."""
        return [(key, self._items[key]) for key in sorted(self._items)]

    def clear(self) -> None:
        """Drop every entry."""
        self._items.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())