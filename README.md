# gridkit

Building blocks for a game-world server. Each module can be used by itself.
Only the standard library is needed.

## Modules

- `gridkit.registry`: `ObjectRegistry` keeps objects under unique keys. It has
  `get`, `insert` (with an optional `replace`), `remove`, `has`, `keys`,
  `items` and `clear`. `keys` and `items` come back in ascending key order.
- `gridkit.locked_queue`: `LockedQueue` is a FIFO that takes a lock around
  every operation. `next(check=None)` pops the front item. It returns `None`
  when the queue is empty or when `check` turns the front item down; a
  rejected item stays in the queue. `empty()` reports whether the queue holds
  anything.
- `gridkit.query_result`: `QueryResult` is an abstract result set that sits on
  a current row. `RowsQueryResult` holds its rows in memory and begins on the
  first one. `QueryNamedResult` wraps a result so fields can be read by column
  name: `result["name"]`, or `field_index("name")`, which raises `KeyError`
  for an unknown name.
- `gridkit.refs`: `GridRefManager` and `GridReference` make an intrusive,
  doubly linked list that counts its members. A newly linked reference goes to
  the front. The manager can be iterated front to back and in reverse, and
  `sources()` yields the linked objects.
- `gridkit.type_container`:
  - `TypeMapContainer` keeps one reference list per object kind. Stored objects
    need a `grid_ref` attribute that holds a `GridReference`.
  - `TypeUnorderedMapContainer` keeps one handle-keyed map per kind. `insert`
    raises `ValueError` if a different object already uses that handle.
  - `TypeContainerVisitor` passes every list of a container to a visitor's
    `visit` method, in the order the kinds were given.
- `gridkit.grid`: `Grid` holds world objects and grid objects in two separate
  containers. `active_objects_in_grid()` counts the grid objects whose
  `is_active_object()` returned true when they were added, plus the world
  objects of the active kind. `GridLoader` passes loading, stopping and
  unloading to loader, stopper and unloader objects.
- `gridkit.async_db`: `AsyncDatabase` queues queries against any object that
  has a `query(sql)` method.
  - `run_pending()` runs the queued work.
  - `process_results()` then calls the callbacks in order.
  - `async_pquery` formats with `%`. It raises `QueryTooLongError` when the
    formatted query reaches `max_query_len`.
  - `SqlQueryHolder` groups numbered queries that run together.
- `gridkit.exception_types`:
  - `BasicType` lists debug-symbol base types.
  - `base_type_name` gives the display name for a base-type index.
  - `exception_name` names known structured exception codes.
  - `windows_version_string` describes an OS version the way a crash report
    prints it.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from gridkit.registry import ObjectRegistry
from gridkit.locked_queue import LockedQueue

registry = ObjectRegistry()
registry.insert("handler", "idle")
assert registry.get("idle") == "handler"
assert registry.insert("other", "idle") is False

queue = LockedQueue()
queue.add(1)
queue.add(2)
assert queue.next(lambda item: item > 5) is None   # front item kept
assert queue.next() == 1
```

A grid with one kind of world object and one kind of grid object:

```python
from gridkit.grid import Grid
from gridkit.refs import GridReference
from gridkit.type_container import TypeContainerVisitor

class Player:
    def __init__(self):
        self.grid_ref = GridReference()

class Creature:
    def __init__(self, active=False):
        self.grid_ref = GridReference()
        self.active = active

    def is_active_object(self):
        return self.active

grid = Grid(world_kinds=[Player], grid_kinds=[Creature], active_kind=Player)
grid.add_world_object(Player())
grid.add_grid_object(Creature(active=True))
grid.add_grid_object(Creature())
assert grid.active_objects_in_grid() == 2

class Counter:
    def __init__(self):
        self.total = 0

    def visit(self, manager):
        self.total += len(manager)

counter = Counter()
grid.visit_grid(TypeContainerVisitor(counter))
assert counter.total == 2
```

Queued queries:

```python
from gridkit.async_db import AsyncDatabase
from gridkit.query_result import RowsQueryResult

class MemoryDatabase:
    def query(self, sql):
        return RowsQueryResult([(sql,)])

db = AsyncDatabase(MemoryDatabase())
seen = []
db.async_pquery(lambda result, tag: seen.append((result[0], tag)),
                "SELECT %d", 7, params=("answer",))
db.run_pending()
db.process_results()
assert seen == [("SELECT 7", "answer")]
```

## What it does not do

- There is no database driver. `AsyncDatabase` runs whatever object you give
  it.
- Nothing starts a thread. `run_pending` and `process_results` run when you
  call them.
- There is no loading of table rows into typed records.
- There is no multi-cell grid with unload locks or timers.
- Nothing captures crashes or writes crash-report files. `gridkit.exception_types`
  only supplies the names and version text such a report would use.
- There is no command-line program.