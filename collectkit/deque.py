"""A double-ended queue with a power-of-two capacity that doubles as it fills."""

from __future__ import annotations

import collections
from typing import Any, Callable, Deque as _DequeType, Iterator, List

from collectkit.common import (
    MAX_POW_TWO,
    InvalidCapacityError,
    MaxCapacityError,
    OutOfRangeError,
    round_pow_two,
)

__all__ = ["DEFAULT_CAPACITY", "Deque"]

DEFAULT_CAPACITY = 8


class Deque:
    """A double-ended queue of object references.

    The capacity is always a power of two and doubles whenever the deque is
    full. Lookups by element (:meth:`index_of`, :meth:`contains`,
    :meth:`remove`) compare by identity; :meth:`contains_value` compares with
    a comparator.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise InvalidCapacityError(f"capacity {capacity} is negative")
        self._items: _DequeType[Any] = collections.deque()
        self._capacity = round_pow_two(capacity)

    @classmethod
    def _from_items(cls, items, capacity: int) -> "Deque":
        result = cls.__new__(cls)
        result._items = collections.deque(items)
        result._capacity = capacity
        return result

    def _expand_capacity(self) -> None:
        if self._capacity == MAX_POW_TWO:
            raise MaxCapacityError("deque is already at maximum capacity")
        self._capacity <<= 1

    def _ensure_room(self) -> None:
        if len(self._items) >= self._capacity:
            self._expand_capacity()

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            raise OutOfRangeError(
                f"index {index} out of range for size {len(self._items)}"
            )

    def add(self, element: Any) -> None:
        """Append ``element`` to the back of the deque."""
        self.add_last(element)

    def add_first(self, element: Any) -> None:
        """Add ``element`` to the front of the deque."""
        self._ensure_room()
        self._items.appendleft(element)

    def add_last(self, element: Any) -> None:
        """Add ``element`` to the back of the deque."""
        self._ensure_room()
        self._items.append(element)

    def add_at(self, element: Any, index: int) -> None:
        """Insert ``element`` at ``index``, which must lie within the deque.

        Inserting at the position just past the last element is not allowed;
        use :meth:`add_last` for that.
        """
        self._check_index(index)
        self._ensure_room()
        self._items.insert(index, element)

    def replace_at(self, element: Any, index: int) -> Any:
        """Replace the element at ``index`` and return the one replaced."""
        self._check_index(index)
        old = self._items[index]
        self._items[index] = element
        return old

    def remove(self, element: Any) -> Any:
        """Remove the first element that is ``element`` and return it.

        Raises :class:`OutOfRangeError` when the element is not present.
        """
        return self.remove_at(self.index_of(element))

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        self._check_index(index)
        removed = self._items[index]
        del self._items[index]
        return removed

    def remove_first(self) -> Any:
        """Remove and return the front element."""
        if not self._items:
            raise OutOfRangeError("deque is empty")
        return self._items.popleft()

    def remove_last(self) -> Any:
        """Remove and return the back element."""
        if not self._items:
            raise OutOfRangeError("deque is empty")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every element; the capacity is kept."""
        self._items.clear()

    def get_at(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._items[index]

    def get_first(self) -> Any:
        """Return the front element."""
        if not self._items:
            raise OutOfRangeError("deque is empty")
        return self._items[0]

    def get_last(self) -> Any:
        """Return the back element."""
        if not self._items:
            raise OutOfRangeError("deque is empty")
        return self._items[-1]

    def copy_shallow(self) -> "Deque":
        """Return a new deque with the same elements and capacity."""
        return Deque._from_items(self._items, self._capacity)

    def copy_deep(self, copy: Callable[[Any], Any]) -> "Deque":
        """Return a new deque holding ``copy(element)`` for each element."""
        return Deque._from_items((copy(item) for item in self._items), self._capacity)

    def trim_capacity(self) -> None:
        """Shrink the capacity to the nearest power of two holding every element."""
        if self._capacity == len(self._items):
            return
        self._capacity = round_pow_two(len(self._items))

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        self._items.reverse()

    def contains(self, element: Any) -> int:
        """Return how many times ``element`` itself occurs in the deque."""
        return sum(1 for item in self._items if item is element)

    def contains_value(self, element: Any, cmp: Callable[[Any, Any], int]) -> int:
        """Return how many items ``cmp(item, element)`` reports equal to ``element``."""
        return sum(1 for item in self._items if cmp(item, element) == 0)

    def index_of(self, element: Any) -> int:
        """Return the index of the first element that is ``element``."""
        for index, item in enumerate(self._items):
            if item is element:
                return index
        raise OutOfRangeError("element not found in deque")

    def capacity(self) -> int:
        """Return how many elements fit before the deque must grow."""
        return self._capacity

    def foreach(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on each element from front to back."""
        for item in self._items:
            fn(item)

    def filter_mut(self, pred: Callable[[Any], bool]) -> None:
        """Keep only the elements for which ``pred`` is true, in place."""
        if not self._items:
            raise OutOfRangeError("deque is empty")
        kept = [item for item in self._items if pred(item)]
        self._items.clear()
        self._items.extend(kept)

    def filter(self, pred: Callable[[Any], bool]) -> "Deque":
        """Return a new deque of the elements for which ``pred`` is true."""
        if not self._items:
            raise OutOfRangeError("deque is empty")
        filtered = Deque()
        for item in self._items:
            if pred(item):
                filtered.add(item)
        return filtered

    def to_list(self) -> List[Any]:
        """Return the elements, front to back, as a new list."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r}, capacity={self._capacity})"