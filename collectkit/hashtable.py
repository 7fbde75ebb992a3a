"""A separately chained hash table with configurable hashing and key comparison."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Tuple

from collectkit.array import Array
from collectkit.common import (
    MAX_POW_TWO,
    KeyNotFoundError,
    MaxCapacityError,
    compare_str,
    round_pow_two,
)
from collectkit.hashing import KEY_LENGTH_VARIABLE, hash_string

__all__ = [
    "DEFAULT_CAPACITY",
    "DEFAULT_LOAD_FACTOR",
    "HashTableConf",
    "TableEntry",
    "HashTable",
    "HashTableIter",
]

DEFAULT_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75


@dataclass
class HashTableConf:
    """Settings for a new :class:`HashTable`.

    The defaults give a table keyed by strings.
    """

    hash: Callable[[Any, int, int], int] = hash_string
    key_compare: Callable[[Any, Any], int] = compare_str
    initial_capacity: int = DEFAULT_CAPACITY
    load_factor: float = DEFAULT_LOAD_FACTOR
    key_length: int = KEY_LENGTH_VARIABLE
    hash_seed: int = 0


@dataclass
class TableEntry:
    """One key-value mapping held by a table."""

    key: Any
    value: Any
    hash: int


class HashTable:
    """A hash table mapping keys to values.

    Keys are hashed with the configured hash function and compared with the
    configured three-way comparator. ``None`` is allowed as a key and always
    lives in the first bucket. The number of buckets is a power of two and
    doubles once the table holds ``load_factor`` times as many entries.
    """

    __slots__ = (
        "_capacity",
        "_size",
        "_threshold",
        "_load_factor",
        "_hash",
        "_key_cmp",
        "_key_len",
        "_seed",
        "_buckets",
    )

    def __init__(self, conf: Optional[HashTableConf] = None) -> None:
        if conf is None:
            conf = HashTableConf()
        self._capacity = round_pow_two(conf.initial_capacity)
        self._buckets: List[List[TableEntry]] = [[] for _ in range(self._capacity)]
        self._hash = conf.hash
        self._key_cmp = conf.key_compare
        self._load_factor = conf.load_factor
        self._seed = conf.hash_seed
        self._key_len = conf.key_length
        self._size = 0
        self._threshold = int(self._capacity * self._load_factor)

    def _hash_key(self, key: Any) -> int:
        return self._hash(key, self._key_len, self._seed)

    def _locate(self, key: Any, probe_first: bool = False) -> Tuple[List[TableEntry], Optional[int]]:
        """Return the bucket for ``key`` and the position of its entry, if any."""
        if key is None:
            bucket = self._buckets[0]
            for position, entry in enumerate(bucket):
                if entry.key is None:
                    return bucket, position
            return bucket, None

        bucket = self._buckets[self._hash_key(key) & (self._capacity - 1)]
        for position, entry in enumerate(bucket):
            if entry.key is None:
                continue
            result = self._key_cmp(key, entry.key) if probe_first else self._key_cmp(entry.key, key)
            if result == 0:
                return bucket, position
        return bucket, None

    def _resize(self, new_capacity: int) -> None:
        if self._capacity == MAX_POW_TWO:
            raise MaxCapacityError("hash table is already at maximum capacity")
        new_buckets: List[List[TableEntry]] = [[] for _ in range(new_capacity)]
        mask = new_capacity - 1
        for bucket in self._buckets:
            for entry in bucket:
                new_buckets[entry.hash & mask].insert(0, entry)
        self._buckets = new_buckets
        self._capacity = new_capacity
        self._threshold = int(self._load_factor * new_capacity)

    def add(self, key: Any, value: Any) -> None:
        """Map ``key`` to ``value``, replacing any value already mapped to it."""
        if self._size >= self._threshold:
            self._resize(self._capacity << 1)

        bucket, position = self._locate(key)
        if position is not None:
            bucket[position].value = value
            return
        hashed = 0 if key is None else self._hash_key(key)
        bucket.insert(0, TableEntry(key, value, hashed))
        self._size += 1

    def get(self, key: Any) -> Any:
        """Return the value mapped to ``key``."""
        bucket, position = self._locate(key)
        if position is None:
            raise KeyNotFoundError(key)
        return bucket[position].value

    def remove(self, key: Any) -> Any:
        """Remove the mapping of ``key`` and return its value."""
        bucket, position = self._locate(key, probe_first=True)
        if position is None:
            raise KeyNotFoundError(key)
        entry = bucket.pop(position)
        self._size -= 1
        return entry.value

    def clear(self) -> None:
        """Remove every mapping; the capacity is kept."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def capacity(self) -> int:
        """Return the number of buckets."""
        return self._capacity

    def contains_key(self, key: Any) -> bool:
        """Return whether ``key`` is mapped in the table."""
        return self._locate(key, probe_first=True)[1] is not None

    def _entries(self) -> Iterator[TableEntry]:
        for bucket in self._buckets:
            yield from tuple(bucket)

    def _collect(self, pick: Callable[[TableEntry], Any]) -> Array:
        # An empty table gives a zero capacity, which an Array refuses.
        result = Array(len(self))
        for entry in self._entries():
            result.add(pick(entry))
        return result

    def keys(self) -> Array:
        """Return the keys as an :class:`Array`.

        Raises :class:`InvalidCapacityError` when the table is empty.
        """
        return self._collect(lambda entry: entry.key)

    def values(self) -> Array:
        """Return the values as an :class:`Array`.

        Raises :class:`InvalidCapacityError` when the table is empty.
        """
        return self._collect(lambda entry: entry.value)

    def foreach_key(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on every key."""
        for entry in self._entries():
            fn(entry.key)

    def foreach_value(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on every value."""
        for entry in self._entries():
            fn(entry.value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> "HashTableIter":
        return HashTableIter(self)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{e.key!r}: {e.value!r}" for e in self._entries())
        return f"HashTable({{{pairs}}}, capacity={self._capacity})"


class HashTableIter:
    """Iterates over the entries of a table, in no particular order.

    :meth:`remove` removes the entry most recently returned without
    disturbing the iteration.
    """

    __slots__ = ("_table", "_entries", "_last")

    def __init__(self, table: HashTable) -> None:
        self._table = table
        self._entries = table._entries()
        self._last: Optional[TableEntry] = None

    def __iter__(self) -> "HashTableIter":
        return self

    def __next__(self) -> TableEntry:
        self._last = next(self._entries)
        return self._last

    def remove(self) -> Any:
        """Remove the last returned entry from the table and return its value."""
        if self._last is None:
            raise KeyNotFoundError("no entry has been returned yet")
        return self._table.remove(self._last.key)