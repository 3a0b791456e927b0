"""A grid cell holding world objects and grid objects, and the loader that drives it."""

from __future__ import annotations

from typing import Any, Iterable, Protocol

from gridkit.type_container import TypeContainerVisitor, TypeMapContainer


class Grid:
    """A logical segment of the world.

    World objects (the objects of interest) and grid objects are kept in
    separate containers. Grid objects must have an ``is_active_object()``
    method; active ones are tracked so that the grid knows it is in use.
    """

    def __init__(
        self,
        world_kinds: Iterable[type],
        grid_kinds: Iterable[type],
        active_kind: type | None = None,
    ) -> None:
        self._world_container = TypeMapContainer(world_kinds)
        self._grid_container = TypeMapContainer(grid_kinds)
        self._active_kind = active_kind
        self._active_grid_objects: dict[int, Any] = {}

    @property
    def world_container(self) -> TypeMapContainer:
        return self._world_container

    @property
    def grid_container(self) -> TypeMapContainer:
        return self._grid_container

    def add_world_object(self, obj: Any) -> bool:
        """An object of interest enters the grid."""
        return self._world_container.insert(obj) is not None

    def remove_world_object(self, obj: Any) -> bool:
        """An object of interest leaves the grid."""
        return self._world_container.remove(obj) is not None

    def add_grid_object(self, obj: Any) -> bool:
        """Put a grid object into the grid."""
        if obj.is_active_object():
            self._active_grid_objects[id(obj)] = obj
        return self._grid_container.insert(obj) is not None

    def remove_grid_object(self, obj: Any) -> bool:
        """Take a grid object out of the grid."""
        if obj.is_active_object():
            self._active_grid_objects.pop(id(obj), None)
        return self._grid_container.remove(obj) is not None

    def visit_grid(self, visitor: TypeContainerVisitor) -> None:
        """Run ``visitor`` over the grid objects."""
        visitor.visit(self._grid_container)

    def visit_world(self, visitor: TypeContainerVisitor) -> None:
        """Run ``visitor`` over the world objects."""
        visitor.visit(self._world_container)

    def active_objects_in_grid(self) -> int:
        """Count active grid objects plus world objects of the active kind."""
        count = len(self._active_grid_objects)
        if self._active_kind is not None:
            count += self._world_container.count(self._active_kind)
        return count


class _Loader(Protocol):
    def load(self, grid: Grid) -> Any: ...


class _Stopper(Protocol):
    def stop(self, grid: Grid) -> Any: ...


class _Unloader(Protocol):
    def unload(self, grid: Grid) -> Any: ...


class GridLoader:
    """Delegates loading, stopping and unloading of a grid to the given workers."""

    def load(self, grid: Grid, loader: _Loader) -> None:
        loader.load(grid)

    def stop(self, grid: Grid, stopper: _Stopper) -> None:
        stopper.stop(grid)

    def unload(self, grid: Grid, unloader: _Unloader) -> None:
        unloader.unload(grid)