from collections import Counter

import pytest

from collectkit.common import KeyNotFoundError
from collectkit.hashset import HashSet, HashSetConf, HashSetIter


@pytest.fixture
def hs():
    return HashSet()


def fill(s, *items):
    for item in items:
        s.add(item)


def test_new_with_conf():
    s = HashSet(HashSetConf(initial_capacity=7))
    assert len(s) == 0
    assert s.capacity() == 8


def test_add(hs):
    fill(hs, "foo", "bar", "baz", "foo")
    assert len(hs) == 3
    assert hs.contains("foo") is True
    assert hs.contains("baz") is True


def test_remove(hs):
    fill(hs, "foo", "bar", "baz", "foo")
    assert hs.remove("bar") == "bar"
    assert len(hs) == 2
    assert hs.contains("bar") is False


def test_remove_missing_raises(hs):
    with pytest.raises(KeyNotFoundError):
        hs.remove("nope")


def test_remove_all(hs):
    fill(hs, "foo", "bar", "baz", "foo")
    hs.clear()
    assert len(hs) == 0
    assert not hs.contains("bar")
    assert not hs.contains("c")


def test_iter_next(hs):
    fill(hs, "foo", "bar", "baz")
    counts = Counter(HashSetIter(hs))
    assert counts == Counter({"foo": 1, "bar": 1, "baz": 1})


def test_iter_remove(hs):
    fill(hs, "foo", "bar", "baz")
    it = HashSetIter(hs)
    for element in it:
        if element == "bar":
            assert it.remove() == "bar"
    assert len(hs) == 2
    assert not hs.contains("bar")


def test_foreach(hs):
    fill(hs, "x", "y", "x")
    seen = []
    hs.foreach(seen.append)
    assert sorted(seen) == ["x", "y"]


def test_iteration_protocol(hs):
    fill(hs, "a", "b")
    assert sorted(hs) == ["a", "b"]