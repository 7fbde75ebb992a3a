"""A set built on :class:`~collectkit.hashtable.HashTable`."""

from __future__ import annotations

from typing import Any, Callable, Optional

from collectkit.hashtable import HashTable, HashTableConf, HashTableIter

__all__ = ["HashSetConf", "HashSet", "HashSetIter"]

#: Settings for a new :class:`HashSet`; the same as for a hash table.
HashSetConf = HashTableConf


class HashSet:
    """A set of elements hashed and compared as the keys of a hash table.

    With the default settings it is a set of strings.
    """

    __slots__ = ("_table",)

    def __init__(self, conf: Optional[HashTableConf] = None) -> None:
        self._table = HashTable(conf)

    def add(self, element: Any) -> None:
        """Add ``element``; an equal element already present is kept."""
        bucket, position = self._table._locate(element)
        if position is None:
            self._table.add(element, element)

    def remove(self, element: Any) -> Any:
        """Remove ``element`` and return the element that was stored."""
        return self._table.remove(element)

    def clear(self) -> None:
        """Remove every element."""
        self._table.clear()

    def contains(self, element: Any) -> bool:
        """Return whether ``element`` is in the set."""
        return self._table.contains_key(element)

    def capacity(self) -> int:
        """Return the number of buckets of the underlying table."""
        return self._table.capacity()

    def foreach(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on every element."""
        self._table.foreach_key(fn)

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> "HashSetIter":
        return HashSetIter(self)

    def __repr__(self) -> str:
        return f"HashSet({[entry.key for entry in self._table._entries()]!r})"


class HashSetIter:
    """Iterates over the elements of a set, allowing the current one to be removed."""

    __slots__ = ("_iter",)

    def __init__(self, hashset: HashSet) -> None:
        self._iter = HashTableIter(hashset._table)

    def __iter__(self) -> "HashSetIter":
        return self

    def __next__(self) -> Any:
        return next(self._iter).key

    def remove(self) -> Any:
        """Remove the last returned element and return it."""
        return self._iter.remove()