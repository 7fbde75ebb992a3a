"""Cursors over a :class:`~collectkit.deque.Deque` that can change it while iterating."""

from __future__ import annotations

from typing import Any, Iterator, Tuple

from collectkit.common import (
    MAX_POW_TWO,
    MaxCapacityError,
    OutOfRangeError,
    ValueNotFoundError,
)
from collectkit.deque import Deque

__all__ = ["DequeIter", "DequeZipIter"]


def _check_room(deque: Deque) -> None:
    if len(deque) >= deque.capacity() and deque.capacity() == MAX_POW_TWO:
        raise MaxCapacityError("deque is already at maximum capacity")


class DequeIter:
    """Iterates over a deque and allows removing, adding and replacing elements.

    :meth:`remove` and :meth:`replace` act on the element most recently
    returned by :meth:`__next__`; :meth:`add` inserts right after it. Removing
    moves the cursor back, so no element is passed over.
    """

    __slots__ = ("_deque", "_index", "_last_removed")

    def __init__(self, deque: Deque) -> None:
        self._deque = deque
        self._index = 0
        self._last_removed = False

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._index >= len(self._deque):
            raise StopIteration
        element = self._deque.get_at(self._index)
        self._index += 1
        self._last_removed = False
        return element

    def remove(self) -> Any:
        """Remove the last returned element and return it."""
        if self._last_removed:
            raise ValueNotFoundError("the last returned element was already removed")
        removed = self._deque.remove_at(self._index - 1)
        self._index -= 1
        self._last_removed = True
        return removed

    def add(self, element: Any) -> None:
        """Insert ``element`` right after the last returned element.

        The position must lie within the deque, so adding after the last
        element raises :class:`OutOfRangeError`.
        """
        self._deque.add_at(element, self._index)
        self._index += 1

    def replace(self, element: Any) -> Any:
        """Replace the last returned element and return the one replaced."""
        return self._deque.replace_at(element, self._index - 1)

    def index(self) -> int:
        """Return the index of the last returned element."""
        return self._index - 1


class DequeZipIter:
    """Iterates over two deques in step, yielding pairs until either runs out."""

    __slots__ = ("_first", "_second", "_index", "_last_removed")

    def __init__(self, first: Deque, second: Deque) -> None:
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

    def add(self, element1: Any, element2: Any) -> None:
        """Insert a pair right after the last returned pair.

        The position must lie within both deques. Both are checked for room
        first, so either both elements are inserted or neither is.
        """
        index = self._index
        if index >= len(self._first) or index >= len(self._second):
            raise OutOfRangeError(f"index {index} out of range for the zipped deques")
        _check_room(self._first)
        _check_room(self._second)
        self._first.add_at(element1, index)
        self._second.add_at(element2, index)
        self._index += 1

    def remove(self) -> Tuple[Any, Any]:
        """Remove the last returned pair from both deques and return it."""
        if self._last_removed:
            raise ValueNotFoundError("the last returned pair was already removed")
        current = self._check_current()
        removed = (self._first.remove_at(current), self._second.remove_at(current))
        self._index -= 1
        self._last_removed = True
        return removed

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