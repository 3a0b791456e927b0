"""Containers that hold objects of several kinds side by side, and a visitor over them."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Protocol

from gridkit.refs import GridRefManager


class ContainerVisitor(Protocol):
    def visit(self, manager: GridRefManager) -> None: ...


def _kind_of(kinds: tuple[type, ...], obj: Any) -> type:
    exact = type(obj)
    if exact in kinds:
        return exact
    for kind in kinds:
        if isinstance(obj, kind):
            return kind
    raise TypeError(f"{exact.__name__} is not held by this container")


class TypeUnorderedMapContainer:
    """Holds one handle-keyed map per object kind."""

    def __init__(self, kinds: Iterable[type]) -> None:
        self._kinds = tuple(kinds)
        self._maps: dict[type, dict[Hashable, Any]] = {kind: {} for kind in self._kinds}

    @property
    def kinds(self) -> tuple[type, ...]:
        return self._kinds

    def _map(self, kind: type) -> dict[Hashable, Any]:
        try:
            return self._maps[kind]
        except KeyError:
            raise TypeError(f"{kind.__name__} is not held by this container") from None

    def insert(self, handle: Hashable, obj: Any) -> bool:
        """Store ``obj`` under ``handle``; False if it is already stored there.

        Raises ValueError if a different object already has that handle.
        """
        entries = self._maps[_kind_of(self._kinds, obj)]
        if handle not in entries:
            entries[handle] = obj
            return True
        if entries[handle] is not obj:
            raise ValueError(f"another object is already stored under {handle!r}")
        return False

    def erase(self, handle: Hashable, kind: type) -> bool:
        """Drop the object of ``kind`` stored under ``handle``, if any."""
        self._map(kind).pop(handle, None)
        return True

    def find(self, handle: Hashable, kind: type) -> Any | None:
        """Return the object of ``kind`` stored under ``handle``, or None."""
        return self._map(kind).get(handle)


class TypeMapContainer:
    """Holds one linked reference list per object kind.

    Stored objects carry a ``grid_ref`` attribute holding a GridReference.
    """

    def __init__(self, kinds: Iterable[type]) -> None:
        self._kinds = tuple(kinds)
        self._managers: dict[type, GridRefManager] = {
            kind: GridRefManager(kind) for kind in self._kinds
        }

    @property
    def kinds(self) -> tuple[type, ...]:
        return self._kinds

    def manager(self, kind: type) -> GridRefManager:
        """Return the reference list for ``kind``."""
        try:
            return self._managers[kind]
        except KeyError:
            raise TypeError(f"{kind.__name__} is not held by this container") from None

    def count(self, kind: type) -> int:
        """Return how many objects of ``kind`` are held."""
        return self.manager(kind).size

    def insert(self, obj: Any) -> Any:
        """Link ``obj`` into the list for its kind and return it."""
        obj.grid_ref.link(self._managers[_kind_of(self._kinds, obj)], obj)
        return obj

    def remove(self, obj: Any) -> Any:
        """Unlink ``obj`` from whatever list holds it and return it."""
        obj.grid_ref.unlink()
        return obj

    def accept(self, visitor: ContainerVisitor) -> None:
        """Hand each kind's reference list to ``visitor.visit``, in kind order."""
        for kind in self._kinds:
            visitor.visit(self._managers[kind])


class TypeContainerVisitor:
    """Applies a visitor to every list of a TypeMapContainer."""

    def __init__(self, visitor: ContainerVisitor) -> None:
        self._visitor = visitor

    @property
    def visitor(self) -> ContainerVisitor:
        return self._visitor

    def visit(self, container: TypeMapContainer) -> None:
        container.accept(self._visitor)