"""Queued database queries whose results are handed to callbacks later.

Queries are queued by the caller, executed by ``run_pending`` (the work of a
database thread) and their callbacks run by ``process_results`` on the
thread that owns the results.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

from gridkit.locked_queue import LockedQueue
from gridkit.query_result import QueryResult

log = logging.getLogger(__name__)

DEFAULT_MAX_QUERY_LEN = 32 * 1024


class QueryTooLongError(ValueError):
    """A formatted query does not fit in the maximum query length."""


class Database(Protocol):
    def query(self, sql: str) -> QueryResult | None: ...


class SqlQueryHolder:
    """A set of numbered queries run together, keeping each one's result."""

    def __init__(self) -> None:
        self._queries: dict[int, str] = {}
        self._results: dict[int, QueryResult | None] = {}

    def set_query(self, index: int, sql: str) -> bool:
        """Put ``sql`` at ``index``; False if the slot is taken or the input invalid."""
        if index < 0 or not sql or index in self._queries:
            log.error("Query holder cannot set query %d: %s", index, sql)
            return False
        self._queries[index] = sql
        return True

    def result(self, index: int) -> QueryResult | None:
        """Return the result of the query at ``index``, or None."""
        return self._results.get(index)

    def queries(self) -> list[tuple[int, str]]:
        """Return the ``(index, sql)`` pairs in index order."""
        return sorted(self._queries.items())

    def _execute(self, database: Database) -> None:
        for index, sql in self.queries():
            self._results[index] = database.query(sql)


_Work = Callable[[], Callable[[], None]]


class AsyncDatabase:
    """Runs queries against ``database`` out of line and delivers results."""

    def __init__(self, database: Database, max_query_len: int = DEFAULT_MAX_QUERY_LEN) -> None:
        self._database = database
        self.max_query_len = max_query_len
        self._pending: LockedQueue[_Work] = LockedQueue()
        self._results: LockedQueue[Callable[[], None]] = LockedQueue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Refuse any further queued queries."""
        self._closed = True

    def async_query(self, callback: Callable[..., Any], sql: str, *args: Any) -> bool:
        """Queue ``sql``; later ``callback(result, *args)`` is called."""
        if not sql or self._closed:
            return False

        def work() -> Callable[[], None]:
            result = self._database.query(sql)
            return lambda: callback(result, *args)

        self._pending.add(work)
        return True

    def async_pquery(
        self, callback: Callable[..., Any], fmt: str, *args: Any, params: tuple = ()
    ) -> bool:
        """Queue ``fmt % args``; later ``callback(result, *params)`` is called."""
        if not fmt:
            return False
        sql = fmt % args
        if len(sql) >= self.max_query_len:
            log.error("SQL Query truncated (and not execute) for format: %s", fmt)
            raise QueryTooLongError(f"query longer than {self.max_query_len} characters")
        return self.async_query(callback, sql, *params)

    def delay_query_holder(
        self, callback: Callable[..., Any], holder: SqlQueryHolder | None, *args: Any
    ) -> bool:
        """Queue all of ``holder``'s queries; later ``callback(holder, *args)`` is called."""
        if holder is None or self._closed:
            return False

        def work() -> Callable[[], None]:
            holder._execute(self._database)
            return lambda: callback(holder, *args)

        self._pending.add(work)
        return True

    def run_pending(self) -> int:
        """Execute every queued query; return how many tasks ran."""
        count = 0
        while (work := self._pending.next()) is not None:
            self._results.add(work())
            count += 1
        return count

    def process_results(self) -> int:
        """Call the callbacks of finished queries in order; return how many."""
        count = 0
        while (deliver := self._results.next()) is not None:
            deliver()
            count += 1
        return count