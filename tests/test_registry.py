import pytest

from gridkit.registry import ObjectRegistry


@pytest.fixture
def registry():
    return ObjectRegistry()


def test_get_missing_returns_none(registry):
    assert registry.get("absent") is None


def test_insert_then_get(registry):
    obj = object()
    assert registry.insert(obj, "a") is True
    assert registry.get("a") is obj
    assert registry.has("a")


def test_insert_existing_without_replace_keeps_old(registry):
    first, second = object(), object()
    registry.insert(first, "k")
    assert registry.insert(second, "k") is False
    assert registry.get("k") is first


def test_insert_existing_with_replace(registry):
    first, second = object(), object()
    registry.insert(first, "k")
    assert registry.insert(second, "k", replace=True) is True
    assert registry.get("k") is second
    assert len(registry) == 1


def test_remove(registry):
    obj = object()
    registry.insert(obj, "k")
    assert registry.remove("k") is obj
    assert not registry.has("k")
    assert registry.remove("k") is None


def test_keys_are_sorted(registry):
    for key in ["c", "a", "b"]:
        registry.insert(key.upper(), key)
    assert registry.keys() == ["a", "b", "c"]
    assert list(registry) == ["a", "b", "c"]


def test_items_pair_keys_with_objects(registry):
    registry.insert("two", 2)
    registry.insert("one", 1)
    assert registry.items() == [(1, "one"), (2, "two")]


def test_contains_and_len(registry):
    registry.insert("x", 5)
    assert 5 in registry
    assert 6 not in registry
    assert len(registry) == 1