"""Intrusive, doubly linked references from objects to the grid lists that hold them."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class GridRefManager(Generic[T]):
    """The head of a list of grid references, counting its members.

    New references are put at the front of the list.
    """

    def __init__(self, kind: type | None = None) -> None:
        self.kind = kind
        self._head: GridReference[T] | None = None
        self._tail: GridReference[T] | None = None
        self._size = 0

    def first(self) -> GridReference[T] | None:
        """Return the reference at the front of the list, or None."""
        return self._head

    def last(self) -> GridReference[T] | None:
        """Return the reference at the back of the list, or None."""
        return self._tail

    @property
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._head is None

    def sources(self) -> Iterator[T]:
        """Yield the objects linked into this list, front to back."""
        for ref in self:
            yield ref.source

    def clear(self) -> None:
        """Invalidate every reference in the list."""
        while self._head is not None:
            self._head.invalidate()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[GridReference[T]]:
        ref = self._head
        while ref is not None:
            following = ref._next
            yield ref
            ref = following

    def __reversed__(self) -> Iterator[GridReference[T]]:
        ref = self._tail
        while ref is not None:
            preceding = ref._prev
            yield ref
            ref = preceding

    def _insert_first(self, ref: GridReference[T]) -> None:
        ref._prev = None
        ref._next = self._head
        if self._head is not None:
            self._head._prev = ref
        else:
            self._tail = ref
        self._head = ref

    def _remove(self, ref: GridReference[T]) -> None:
        if ref._prev is not None:
            ref._prev._next = ref._next
        else:
            self._head = ref._next
        if ref._next is not None:
            ref._next._prev = ref._prev
        else:
            self._tail = ref._prev
        ref._prev = None
        ref._next = None


class GridReference(Generic[T]):
    """Links one object into one GridRefManager at a time."""

    def __init__(self) -> None:
        self._manager: GridRefManager[T] | None = None
        self._source: Any = None
        self._prev: GridReference[T] | None = None
        self._next: GridReference[T] | None = None

    @property
    def manager(self) -> GridRefManager[T] | None:
        return self._manager

    @property
    def source(self) -> Any:
        return self._source

    def link(self, manager: GridRefManager[T] | None, source: Any) -> None:
        """Link ``source`` into ``manager``, leaving any previous list first."""
        if self.is_valid():
            self.unlink()
        if manager is None:
            return
        self._manager = manager
        self._source = source
        manager._insert_first(self)
        manager._size += 1

    def unlink(self) -> None:
        """Leave the current list, if any."""
        manager = self._manager
        if manager is None:
            return
        manager._size -= 1
        manager._remove(self)
        self._manager = None
        self._source = None

    def invalidate(self) -> None:
        """Detach because the list itself is going away."""
        manager = self._manager
        if manager is None:
            return
        manager._size -= 1
        manager._remove(self)
        self._manager = None
        self._source = None

    def is_valid(self) -> bool:
        """Tell whether this reference is linked into a list."""
        return self._manager is not None

    def next(self) -> GridReference[T] | None:
        """Return the following reference in the same list, or None."""
        return self._next