import pytest

from collectkit.common import (
    MAX_POW_TWO,
    compare_str,
    round_pow_two,
)


def test_compare_str_equal():
    assert compare_str("foo", "foo") == 0


def test_compare_str_less_and_greater():
    assert compare_str("bar", "baz") < 0
    assert compare_str("baz", "bar") > 0


def test_compare_str_prefix_is_smaller():
    assert compare_str("key", "keys") < 0
    assert compare_str("keys", "key") > 0


def test_compare_str_is_antisymmetric():
    words = ["value", "cookies", "m31", "", "5", "randomstring"]
    for a in words:
        for b in words:
            assert compare_str(a, b) == -compare_str(b, a)


def test_compare_str_accepts_bytes_and_str():
    assert compare_str(b"foo", "foo") == 0
    assert compare_str(bytearray(b"abc"), b"abd") < 0


def test_compare_str_stops_at_nul():
    assert compare_str("ab\0zz", "ab") == 0


def test_round_pow_two_from_source_example():
    assert round_pow_two(7) == 8


def test_round_pow_two_zero_gives_two():
    assert round_pow_two(0) == 2


def test_round_pow_two_keeps_powers():
    for exp in range(0, 40):
        assert round_pow_two(1 << exp) == 1 << exp


def test_round_pow_two_invariant():
    for n in range(1, 2000):
        r = round_pow_two(n)
        assert r & (r - 1) == 0
        assert n <= r < 2 * n


def test_round_pow_two_caps_at_max():
    assert round_pow_two(MAX_POW_TWO) == MAX_POW_TWO
    assert round_pow_two(MAX_POW_TWO + 12345) == MAX_POW_TWO


def test_round_pow_two_rejects_negative():
    with pytest.raises(ValueError):
        round_pow_two(-1)