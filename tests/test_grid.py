import pytest

from gridkit.grid import Grid, GridLoader
from gridkit.refs import GridReference
from gridkit.type_container import TypeContainerVisitor


class Player:
    def __init__(self, name):
        self.name = name
        self.grid_ref = GridReference()


class Pet:
    def __init__(self, name):
        self.name = name
        self.grid_ref = GridReference()


class Creature:
    def __init__(self, name, active=False):
        self.name = name
        self.active = active
        self.grid_ref = GridReference()

    def is_active_object(self):
        return self.active


class Collector:
    def __init__(self):
        self.seen = []

    def visit(self, manager):
        self.seen.append((manager.kind, list(manager.sources())))


class Recorder:
    def __init__(self):
        self.calls = []

    def load(self, grid):
        self.calls.append(("load", grid))

    def stop(self, grid):
        self.calls.append(("stop", grid))

    def unload(self, grid):
        self.calls.append(("unload", grid))


@pytest.fixture
def grid():
    return Grid([Player, Pet], [Creature], active_kind=Player)


def test_world_objects_count_as_active(grid):
    players = [Player("a"), Player("b")]
    for player in players:
        assert grid.add_world_object(player) is True
    grid.add_world_object(Pet("cat"))
    assert grid.active_objects_in_grid() == len(players)


def test_remove_world_object(grid):
    player = Player("a")
    grid.add_world_object(player)
    assert grid.remove_world_object(player) is True
    assert grid.active_objects_in_grid() == 0
    assert not player.grid_ref.is_valid()


def test_active_grid_objects_are_tracked(grid):
    active = Creature("guard", active=True)
    passive = Creature("rat")
    grid.add_grid_object(active)
    grid.add_grid_object(passive)
    assert grid.active_objects_in_grid() == 1
    assert grid.grid_container.count(Creature) == len([active, passive])
    grid.remove_grid_object(active)
    assert grid.active_objects_in_grid() == 0
    assert list(grid.grid_container.manager(Creature).sources()) == [passive]


def test_no_active_kind_counts_only_grid_objects():
    grid = Grid([Player], [Creature])
    grid.add_world_object(Player("a"))
    assert grid.active_objects_in_grid() == 0


def test_visit_grid_and_world(grid):
    player = Player("a")
    creature = Creature("rat")
    grid.add_world_object(player)
    grid.add_grid_object(creature)
    world_seen, grid_seen = Collector(), Collector()
    grid.visit_world(TypeContainerVisitor(world_seen))
    grid.visit_grid(TypeContainerVisitor(grid_seen))
    assert world_seen.seen == [(Player, [player]), (Pet, [])]
    assert grid_seen.seen == [(Creature, [creature])]


def test_unknown_kind_is_rejected(grid):
    with pytest.raises(TypeError):
        grid.add_world_object(Creature("rat"))


def test_grid_loader_delegates(grid):
    recorder = Recorder()
    loader = GridLoader()
    loader.load(grid, recorder)
    loader.stop(grid, recorder)
    loader.unload(grid, recorder)
    assert recorder.calls == [("load", grid), ("stop", grid), ("unload", grid)]