import pytest

from collectkit.common import InvalidCapacityError, OutOfRangeError
from collectkit.deque import DEFAULT_CAPACITY, Deque


def make(*items):
    d = Deque()
    for item in items:
        d.add(item)
    return d


def test_new_deque_is_empty_with_default_capacity():
    d = Deque()
    assert len(d) == 0
    assert d.capacity() == DEFAULT_CAPACITY
    assert DEFAULT_CAPACITY == 8


def test_capacity_rounds_up_to_power_of_two():
    assert Deque(5).capacity() == 8
    assert Deque(0).capacity() == 2
    assert Deque(16).capacity() == 16


def test_negative_capacity_rejected():
    with pytest.raises(InvalidCapacityError):
        Deque(-1)


def test_add_appends_in_order():
    d = make("a", "b", "c")
    assert d.to_list() == ["a", "b", "c"]
    assert d.get_first() == "a"
    assert d.get_last() == "c"


def test_add_first_and_last():
    d = make("b")
    d.add_first("a")
    d.add_last("c")
    assert d.to_list() == ["a", "b", "c"]


def test_capacity_doubles_when_full():
    d = Deque(2)
    d.add("a")
    d.add("b")
    assert d.capacity() == 2
    d.add("c")
    assert d.capacity() == 4
    assert d.to_list() == ["a", "b", "c"]


def test_capacity_is_always_power_of_two_after_growth():
    d = Deque()
    for i in range(100):
        d.add_first(i)
        cap = d.capacity()
        assert cap & (cap - 1) == 0
        assert cap >= len(d)
    assert d.to_list() == list(reversed(range(100)))


def test_add_at_inserts_within_range():
    d = make(1, 2, 3, 4)
    d.add_at(9, 1)
    assert d.to_list() == [1, 9, 2, 3, 4]
    d.add_at(8, 0)
    assert d.to_list() == [8, 1, 9, 2, 3, 4]
    d.add_at(7, 5)
    assert d.to_list() == [8, 1, 9, 2, 3, 7, 4]


def test_add_at_rejects_end_and_beyond():
    d = make(1, 2)
    with pytest.raises(OutOfRangeError):
        d.add_at(3, 2)
    with pytest.raises(OutOfRangeError):
        Deque().add_at(1, 0)
    with pytest.raises(OutOfRangeError):
        d.add_at(3, -1)


def test_replace_at_returns_old():
    d = make("a", "b", "c")
    assert d.replace_at("x", 1) == "b"
    assert d.to_list() == ["a", "x", "c"]
    with pytest.raises(OutOfRangeError):
        d.replace_at("y", 3)


def test_remove_by_identity():
    a, b, c = object(), object(), object()
    d = make(a, b, c)
    assert d.remove(b) is b
    assert d.to_list() == [a, c]
    with pytest.raises(OutOfRangeError):
        d.remove(object())


def test_remove_at_positions():
    d = make(1, 2, 3, 4, 5)
    assert d.remove_at(2) == 3
    assert d.remove_at(0) == 1
    assert d.remove_at(2) == 5
    assert d.to_list() == [2, 4]
    with pytest.raises(OutOfRangeError):
        d.remove_at(2)


def test_remove_first_and_last():
    d = make(1, 2, 3)
    assert d.remove_first() == 1
    assert d.remove_last() == 3
    assert d.to_list() == [2]
    d.clear()
    with pytest.raises(OutOfRangeError):
        d.remove_first()
    with pytest.raises(OutOfRangeError):
        d.remove_last()


def test_get_on_empty_raises():
    d = Deque()
    with pytest.raises(OutOfRangeError):
        d.get_first()
    with pytest.raises(OutOfRangeError):
        d.get_last()
    with pytest.raises(OutOfRangeError):
        d.get_at(0)


def test_get_at_matches_iteration():
    items = ["p", "q", "r", "s"]
    d = make(*items)
    assert [d.get_at(i) for i in range(len(d))] == items
    assert list(d) == items


def test_clear_keeps_capacity():
    d = Deque(2)
    for i in range(5):
        d.add(i)
    cap = d.capacity()
    d.clear()
    assert len(d) == 0
    assert d.capacity() == cap


def test_copy_shallow_shares_elements():
    a, b = [1], [2]
    d = make(a, b)
    cp = d.copy_shallow()
    assert cp.get_at(0) is a
    assert cp.get_at(1) is b
    assert cp.capacity() == d.capacity()
    cp.add("x")
    assert len(d) == 2


def test_copy_deep_copies_elements():
    a, b = [1], [2]
    d = make(a, b)
    cp = d.copy_deep(list)
    assert cp.to_list() == [[1], [2]]
    assert cp.get_at(0) is not a
    assert cp.capacity() == d.capacity()


def test_trim_capacity():
    d = make(1, 2, 3)
    d.trim_capacity()
    assert d.capacity() == 4
    assert d.to_list() == [1, 2, 3]
    d.clear()
    d.trim_capacity()
    assert d.capacity() == 2


def test_reverse():
    d = make(1, 2, 3, 4)
    d.reverse()
    assert d.to_list() == [4, 3, 2, 1]
    d.reverse()
    assert d.to_list() == [1, 2, 3, 4]


def test_contains_counts_identity():
    a, b = object(), object()
    d = make(a, b, a)
    assert d.contains(a) == 2
    assert d.contains(b) == 1
    assert d.contains(object()) == 0


def test_contains_value_uses_comparator_with_item_first():
    calls = []

    def cmp(x, y):
        calls.append((x, y))
        return 0 if x == y else 1

    d = make(1, 2, 1)
    assert d.contains_value(1, cmp) == 2
    assert calls[0] == (1, 1)
    assert calls[1] == (2, 1)


def test_index_of():
    a, b = object(), object()
    d = make(a, b, a)
    assert d.index_of(a) == 0
    assert d.index_of(b) == 1
    with pytest.raises(OutOfRangeError):
        d.index_of(object())


def test_foreach_visits_in_order():
    seen = []
    make("x", "y", "z").foreach(seen.append)
    assert seen == ["x", "y", "z"]


def test_filter_mut():
    d = make(1, 2, 3, 4, 5, 6)
    d.filter_mut(lambda e: e % 2 == 0)
    assert d.to_list() == [2, 4, 6]
    d.filter_mut(lambda e: False)
    assert len(d) == 0
    with pytest.raises(OutOfRangeError):
        d.filter_mut(lambda e: True)


def test_filter_leaves_original():
    d = make(1, 2, 3, 4)
    f = d.filter(lambda e: e > 3)
    assert f.to_list() == [4]
    assert d.to_list() == [1, 2, 3, 4]
    with pytest.raises(OutOfRangeError):
        Deque().filter(lambda e: True)


def test_iter_is_snapshot():
    d = make(1, 2, 3)
    seen = []
    for item in d:
        seen.append(item)
        d.add(item)
    assert seen == [1, 2, 3]
    assert len(d) == 6