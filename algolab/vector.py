"""A growable sequence that keeps track of its reserved capacity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Vector:
    """Contiguous sequence with explicit size and capacity.

    ``Vector()`` is empty, ``Vector(n)`` holds ``n`` ``None`` values,
    ``Vector(n, value)`` holds ``n`` copies of ``value`` and
    ``Vector(iterable)`` holds the iterable's items.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, *args: Any) -> None:
        self._items: list[Any] = []
        self._capacity = 0
        if not args:
            return
        if len(args) == 1:
            (source,) = args
            if isinstance(source, int) and not isinstance(source, bool):
                self._items = [None] * _count(source)
            else:
                self._items = list(source)
        elif len(args) == 2:
            n, value = args
            self._items = [value] * _count(n)
        else:
            raise TypeError(f"Vector() takes at most 2 arguments ({len(args)} given)")
        self._capacity = len(self._items)

    def size(self) -> int:
        """Number of stored elements."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return Vector(self._items[index])
        return self._items[index]

    def __setitem__(self, index: int | slice, value: Any) -> None:
        if isinstance(index, slice):
            updated = list(self._items)
            updated[index] = value
            self.reserve(len(updated))
            self._items = updated
        else:
            self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def at(self, index: int) -> Any:
        """Element at ``index``, which must lie in ``0 <= index < size``."""
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of range vector::at")
        return self._items[index]

    def clear(self) -> None:
        """Drop every element; the capacity is kept."""
        self._items.clear()

    def reserve(self, n: int) -> None:
        """Make room for at least ``n`` elements, at least doubling when growing."""
        if n < 0:
            raise ValueError(f"capacity must not be negative, got {n}")
        if n <= self._capacity:
            return
        self._capacity = max(n, self._capacity * 2)

    def push_back(self, value: Any) -> None:
        """Append ``value``."""
        self._make_room(1)
        self._items.append(value)

    def emplace_back(self, value: Any) -> Any:
        """Append ``value`` and return it."""
        self.push_back(value)
        return value

    def pop_back(self) -> None:
        """Remove the last element; does nothing when empty."""
        if self._items:
            self._items.pop()

    def resize(self, n: int, value: Any = None) -> None:
        """Truncate to ``n`` elements or pad with ``value`` up to ``n``."""
        size = len(self._items)
        if n < 0:
            raise ValueError(f"size must not be negative, got {n}")
        if n < size:
            del self._items[n:]
        elif n > size:
            self.reserve(n)
            self._items.extend([value] * (n - size))

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current size."""
        self._capacity = len(self._items)

    def front(self) -> Any:
        """First element."""
        if not self._items:
            raise IndexError("front() of an empty Vector")
        return self._items[0]

    def back(self) -> Any:
        """Last element."""
        if not self._items:
            raise IndexError("back() of an empty Vector")
        return self._items[-1]

    def capacity(self) -> int:
        """Number of elements the vector can hold before it must grow."""
        return self._capacity

    def empty(self) -> bool:
        """Whether the vector holds no elements."""
        return not self._items

    def swap(self, other: Vector) -> None:
        """Exchange contents and capacity with ``other``."""
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity

    def erase(self, first: int, last: int | None = None) -> int:
        """Remove the element at ``first``, or those in ``[first, last)``; return ``first``."""
        size = len(self._items)
        if last is None:
            if not 0 <= first < size:
                raise IndexError(f"erase position {first} out of range for size {size}")
            del self._items[first]
        else:
            if not 0 <= first <= last <= size:
                raise IndexError(f"erase range [{first}, {last}) out of range for size {size}")
            del self._items[first:last]
        return first

    def assign(self, *args: Any) -> None:
        """Replace the contents with ``n`` copies of ``value`` or with an iterable's items."""
        if len(args) == 2:
            n, value = args
            items = [value] * _count(n)
        elif len(args) == 1:
            items = list(args[0])
        else:
            raise TypeError(f"assign() takes 1 or 2 arguments ({len(args)} given)")
        self.clear()
        self.reserve(len(items))
        self._items = items

    def insert(self, position: int, *args: Any) -> int:
        """Insert ``value``, or ``count`` copies of ``value``, before ``position``."""
        if len(args) == 1:
            values = [args[0]]
        elif len(args) == 2:
            count, value = args
            values = [value] * _count(count)
        else:
            raise TypeError(f"insert() takes 2 or 3 arguments ({len(args) + 1} given)")
        self._check_position(position)
        self._make_room(len(values))
        self._items[position:position] = values
        return position

    def emplace(self, position: int, value: Any) -> int:
        """Insert ``value`` before ``position`` and return ``position``."""
        return self.insert(position, value)

    def copy(self) -> Vector:
        """A new vector with the same elements and a capacity equal to its size."""
        return Vector(self._items)

    def _make_room(self, extra: int) -> None:
        needed = len(self._items) + extra
        if needed > self._capacity:
            self.reserve(needed)

    def _check_position(self, position: int) -> None:
        if not 0 <= position <= len(self._items):
            raise IndexError(
                f"position {position} out of range for size {len(self._items)}"
            )


def _count(n: Any) -> int:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"element count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"element count must not be negative, got {n}")
    return n


def _as_list(values: Iterable[Any]) -> list[Any]:
    return list(values)