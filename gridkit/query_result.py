"""Result sets of database queries, read one row at a time."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

Row = tuple[Any, ...]


class QueryResult(ABC):
    """A result set positioned on a current row."""

    def __init__(self, row_count: int, field_count: int) -> None:
        self.row_count = row_count
        self.field_count = field_count
        self._current: Row | None = None

    @abstractmethod
    def next_row(self) -> bool:
        """Move to the next row; False once there is none."""

    def fetch(self) -> Row | None:
        """Return the current row, or None if there is none."""
        return self._current

    def __getitem__(self, index: int) -> Any:
        if self._current is None:
            raise IndexError("no current row")
        return self._current[index]


class RowsQueryResult(QueryResult):
    """A result set over rows held in memory, starting on the first row."""

    def __init__(self, rows: Sequence[Sequence[Any]], field_count: int | None = None) -> None:
        self._rows = [tuple(row) for row in rows]
        if field_count is None:
            field_count = len(self._rows[0]) if self._rows else 0
        super().__init__(len(self._rows), field_count)
        self._position = 0
        self._current = self._rows[0] if self._rows else None

    def next_row(self) -> bool:
        if self._position + 1 >= len(self._rows):
            self._position = len(self._rows)
            self._current = None
            return False
        self._position += 1
        self._current = self._rows[self._position]
        return True


class QueryNamedResult:
    """Wraps a result set so that fields can also be read by column name."""

    def __init__(self, query: QueryResult, names: Sequence[str]) -> None:
        self._query = query
        self.field_names: list[str] = list(names)

    @property
    def field_count(self) -> int:
        return self._query.field_count

    @property
    def row_count(self) -> int:
        return self._query.row_count

    def next_row(self) -> bool:
        """Move to the next row; False once there is none."""
        return self._query.next_row()

    def fetch(self) -> Row | None:
        """Return the current row, or None if there is none."""
        return self._query.fetch()

    def field_index(self, name: str) -> int:
        """Return the column position of ``name``; KeyError if unknown."""
        try:
            return self.field_names.index(name)
        except ValueError:
            raise KeyError(f"unknown field name: {name!r}") from None

    def __getitem__(self, key: int | str) -> Any:
        if isinstance(key, str):
            key = self.field_index(key)
        return self._query[key]