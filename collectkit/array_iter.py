"""Cursors over an :class:`~collectkit.array.Array` that can change it while iterating."""

from __future__ import annotations

import contextlib
from typing import Any, Iterator, Tuple

from collectkit.array import Array
from collectkit.common import (
    MAX_ELEMENTS,
    MaxCapacityError,
    OutOfRangeError,
    ValueNotFoundError,
)

__all__ = ["ArrayIter", "ArrayZipIter"]


def _check_room(array: Array) -> None:
    if len(array) >= array.capacity() and array.capacity() == MAX_ELEMENTS:
        raise MaxCapacityError("array is already at maximum capacity")


class ArrayIter:
    """Iterates over an array and allows removing, adding and replacing elements.

    :meth:`remove`, :meth:`add` and :meth:`replace` act on the element most
    recently returned by :meth:`__next__`. Removing does not move the cursor
    back, so the element that followed the removed one is passed over.
    """

    __slots__ = ("_array", "_index", "_last_removed")

    def __init__(self, array: Array) -> None:
        self._array = array
        self._index = 0
        self._last_removed = False

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._index >= len(self._array):
            raise StopIteration
        element = self._array.get_at(self._index)
        self._index += 1
        self._last_removed = False
        return element

    def remove(self) -> Any:
        """Remove the last returned element and return it."""
        if self._last_removed:
            raise ValueNotFoundError("the last returned element was already removed")
        removed = self._array.remove_at(self._index - 1)
        self._last_removed = True
        return removed

    def add(self, element: Any) -> None:
        """Insert ``element`` right after the last returned element."""
        index = self._index
        self._index += 1
        self._array.add_at(element, index)

    def replace(self, element: Any) -> Any:
        """Replace the last returned element and return the one replaced."""
        return self._array.replace_at(element, self._index - 1)

    def index(self) -> int:
        """Return the index of the last returned element."""
        return self._index - 1


class ArrayZipIter:
    """Iterates over two arrays in step, yielding pairs until either runs out."""

    __slots__ = ("_first", "_second", "_index", "_last_removed")

    def __init__(self, first: Array, second: Array) -> None:
        self._first = first
        self._second = second
        self._index = 0
        self._last_removed = False

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        return self

    def __next__(self) -> Tuple[Any, Any]:
        if self._index >= len(self._first) or self._index >= len(self._second):
            raise StopIteration
        pair = (self._first.get_at(self._index), self._second.get_at(self._index))
        self._index += 1
        self._last_removed = False
        return pair

    def _check_current(self) -> int:
        current = self._index - 1
        if current < 0 or current >= len(self._first) or current >= len(self._second):
            raise OutOfRangeError("no current element pair")
        return current

    def remove(self) -> Tuple[Any, Any]:
        """Remove the last returned pair from both arrays and return it."""
        current = self._check_current()
        if self._last_removed:
            raise ValueNotFoundError("the last returned pair was already removed")
        removed = (self._first.remove_at(current), self._second.remove_at(current))
        self._last_removed = True
        return removed

    def add(self, element1: Any, element2: Any) -> None:
        """Insert a pair right after the last returned pair.

        Both arrays are checked for room first, so either both elements are
        inserted or neither is.
        """
        index = self._index
        self._index += 1
        _check_room(self._first)
        _check_room(self._second)
        with contextlib.suppress(OutOfRangeError):
            self._first.add_at(element1, index)
        with contextlib.suppress(OutOfRangeError):
            self._second.add_at(element2, index)

    def replace(self, element1: Any, element2: Any) -> Tuple[Any, Any]:
        """Replace the last returned pair and return the pair replaced."""
        current = self._check_current()
        return (
            self._first.replace_at(element1, current),
            self._second.replace_at(element2, current),
        )

    def index(self) -> int:
        """Return the index of the last returned pair."""
        return self._index - 1