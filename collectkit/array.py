"""A growable array with an explicit capacity and expansion factor."""

from __future__ import annotations

import functools
from typing import Any, Callable, Iterator, List, Optional

from collectkit.common import (
    MAX_ELEMENTS,
    InvalidCapacityError,
    InvalidRangeError,
    MaxCapacityError,
    OutOfRangeError,
    ValueNotFoundError,
)

__all__ = ["DEFAULT_CAPACITY", "DEFAULT_EXPANSION_FACTOR", "Array"]

DEFAULT_CAPACITY = 8
DEFAULT_EXPANSION_FACTOR = 2


class Array:
    """A dynamic array of object references.

    Lookups by element (:meth:`index_of`, :meth:`contains`, :meth:`remove`)
    compare by identity; :meth:`contains_value` compares with a comparator.
    The capacity grows by ``exp_factor`` whenever the array is full.
    """

    __slots__ = ("_items", "_capacity", "_exp_factor")

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 exp_factor: float = DEFAULT_EXPANSION_FACTOR) -> None:
        # A factor that would not grow the array falls back to the default.
        factor = exp_factor if exp_factor > 1 else DEFAULT_EXPANSION_FACTOR
        if capacity <= 0 or factor >= MAX_ELEMENTS / capacity:
            raise InvalidCapacityError(
                f"capacity {capacity} with expansion factor {factor} is not usable"
            )
        self._items: List[Any] = []
        self._capacity = int(capacity)
        self._exp_factor = float(factor)

    @classmethod
    def _from_items(cls, items: List[Any], capacity: int, exp_factor: float) -> "Array":
        arr = cls.__new__(cls)
        arr._items = items
        arr._capacity = capacity
        arr._exp_factor = exp_factor
        return arr

    @property
    def exp_factor(self) -> float:
        """The factor by which the capacity grows."""
        return self._exp_factor

    def _expand_capacity(self) -> None:
        if self._capacity == MAX_ELEMENTS:
            raise MaxCapacityError("array is already at maximum capacity")
        new_capacity = int(self._capacity * self._exp_factor)
        if new_capacity <= self._capacity or new_capacity > MAX_ELEMENTS:
            self._capacity = MAX_ELEMENTS
        else:
            self._capacity = new_capacity

    def _ensure_room(self) -> None:
        if len(self._items) >= self._capacity:
            self._expand_capacity()

    def add(self, element: Any) -> None:
        """Append ``element`` to the end of the array."""
        self._ensure_room()
        self._items.append(element)

    def add_at(self, element: Any, index: int) -> None:
        """Insert ``element`` at ``index``, shifting later elements right.

        ``index`` may equal the size, in which case the element is appended.
        """
        size = len(self._items)
        if index == size:
            self.add(element)
            return
        if index < 0 or index > size - 1:
            raise OutOfRangeError(f"index {index} out of range for size {size}")
        self._ensure_room()
        self._items.insert(index, element)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            raise OutOfRangeError(
                f"index {index} out of range for size {len(self._items)}"
            )

    def replace_at(self, element: Any, index: int) -> Any:
        """Replace the element at ``index`` and return the one replaced."""
        self._check_index(index)
        old = self._items[index]
        self._items[index] = element
        return old

    def swap_at(self, index1: int, index2: int) -> None:
        """Swap the elements at the two indices."""
        self._check_index(index1)
        self._check_index(index2)
        items = self._items
        items[index1], items[index2] = items[index2], items[index1]

    def remove(self, element: Any) -> Any:
        """Remove the first occurrence of ``element`` and return it."""
        try:
            index = self.index_of(element)
        except OutOfRangeError:
            raise ValueNotFoundError("element not found in array") from None
        del self._items[index]
        return element

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        self._check_index(index)
        return self._items.pop(index)

    def remove_last(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise OutOfRangeError("array is empty")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every element; the capacity is kept."""
        self._items.clear()

    def get_at(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._items[index]

    def get_last(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise ValueNotFoundError("array is empty")
        return self._items[-1]

    def index_of(self, element: Any) -> int:
        """Return the index of the first element that is ``element``."""
        for index, item in enumerate(self._items):
            if item is element:
                return index
        raise OutOfRangeError("element not found in array")

    def subarray(self, begin: int, end: int) -> "Array":
        """Return a new array of the elements from ``begin`` to ``end`` inclusive."""
        if begin < 0 or begin > end or end >= len(self._items):
            raise InvalidRangeError(
                f"range [{begin}, {end}] invalid for size {len(self._items)}"
            )
        items = self._items[begin:end + 1]
        return Array._from_items(items, len(items), self._exp_factor)

    def copy_shallow(self) -> "Array":
        """Return a new array holding the same elements."""
        return Array._from_items(list(self._items), self._capacity, self._exp_factor)

    def copy_deep(self, copy: Callable[[Any], Any]) -> "Array":
        """Return a new array holding ``copy(element)`` for each element."""
        return Array._from_items(
            [copy(item) for item in self._items], self._capacity, self._exp_factor
        )

    def filter_mut(self, pred: Callable[[Any], bool]) -> None:
        """Keep only the elements for which ``pred`` is true, in place."""
        if not self._items:
            raise OutOfRangeError("array is empty")
        self._items[:] = [item for item in self._items if pred(item)]

    def filter(self, pred: Callable[[Any], bool]) -> "Array":
        """Return a new array of the elements for which ``pred`` is true."""
        if not self._items:
            raise OutOfRangeError("array is empty")
        return Array._from_items(
            [item for item in self._items if pred(item)],
            self._capacity,
            self._exp_factor,
        )

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        self._items.reverse()

    def trim_capacity(self) -> None:
        """Shrink the capacity to the number of elements, but never below 1."""
        self._capacity = max(len(self._items), 1)

    def contains(self, element: Any) -> int:
        """Return how many times ``element`` itself occurs in the array."""
        return sum(1 for item in self._items if item is element)

    def contains_value(self, element: Any, cmp: Callable[[Any, Any], int]) -> int:
        """Return how many elements ``cmp(element, item)`` reports equal to ``element``."""
        return sum(1 for item in self._items if cmp(element, item) == 0)

    def capacity(self) -> int:
        """Return how many elements fit before the array must grow."""
        return self._capacity

    def sort(self, cmp: Callable[[Any, Any], int]) -> None:
        """Sort the elements in place using a three-way comparator."""
        self._items.sort(key=functools.cmp_to_key(cmp))

    def foreach(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on each element in order."""
        for item in self._items:
            fn(item)

    def reduce(self, fn: Callable[[Any, Any], Any]) -> Optional[Any]:
        """Fold the elements from the left with ``fn(accumulated, element)``.

        A single element is folded as ``fn(element, None)``; an empty array
        gives ``None``.
        """
        items = self._items
        if not items:
            return None
        if len(items) == 1:
            return fn(items[0], None)
        result = fn(items[0], items[1])
        for item in items[2:]:
            result = fn(result, item)
        return result

    def to_list(self) -> List[Any]:
        """Return the elements as a new list."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Array({self._items!r}, capacity={self._capacity})"