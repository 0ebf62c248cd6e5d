"""A sequence whose length is fixed when it is created."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class FixedArray:
    """Array of exactly ``size`` slots; missing initial values are ``None``."""

    __slots__ = ("_items",)

    def __init__(self, size: int, values: Iterable[Any] | None = None) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        items = list(values) if values is not None else []
        if len(items) > size:
            raise ValueError(f"too many initial values ({len(items)}) for size {size}")
        self._items: list[Any] = items + [None] * (size - len(items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedArray):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FixedArray({len(self._items)}, {self._items!r})"

    def at(self, index: int) -> Any:
        """Element at ``index``, which must lie in ``0 <= index < size``."""
        size = len(self._items)
        if not 0 <= index < size:
            raise IndexError(f"out of range at index {index}, size {size}")
        return self._items[index]

    def fill(self, value: Any) -> None:
        """Set every slot to ``value``."""
        self._items = [value] * len(self._items)

    def swap(self, other: FixedArray) -> None:
        """Exchange contents with an array of the same size."""
        if len(other) != len(self):
            raise ValueError(f"cannot swap arrays of sizes {len(self)} and {len(other)}")
        self._items, other._items = other._items, self._items

    def front(self) -> Any:
        """First element."""
        if not self._items:
            raise IndexError("front() of an empty FixedArray")
        return self._items[0]

    def back(self) -> Any:
        """Last element."""
        if not self._items:
            raise IndexError("back() of an empty FixedArray")
        return self._items[-1]

    def empty(self) -> bool:
        """Whether the array has no slots."""
        return not self._items

    def size(self) -> int:
        """Number of slots."""
        return len(self._items)


def array_of(*args: Any) -> FixedArray:
    """A FixedArray sized to and holding the given values."""
    if not args:
        raise TypeError("array_of() needs at least one value")
    return FixedArray(len(args), args)