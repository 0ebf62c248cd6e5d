"""A doubly linked list with constant-time insertion and removal at both ends."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class LinkedList:
    """Circular doubly linked list built around a sentinel node."""

    __slots__ = ("_sentinel", "_size")

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._sentinel = _Node()
        self._size = 0
        if iterable is not None:
            for value in list(iterable):
                self._link_before(self._sentinel, value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            yield node.value
            node = node.prev

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(
            a == b for a, b in zip(self, other)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._sentinel.prev = self._sentinel.next = self._sentinel
        self._size = 0

    def assign(self, *args: Any) -> None:
        """Replace the contents with ``n`` copies of ``value`` or with an iterable's items."""
        if len(args) == 2:
            n, value = args
            if not isinstance(n, int) or isinstance(n, bool):
                raise TypeError(f"element count must be an int, got {type(n).__name__}")
            if n < 0:
                raise ValueError(f"element count must not be negative, got {n}")
            items = [value] * n
        elif len(args) == 1:
            items = list(args[0])
        else:
            raise TypeError(f"assign() takes 1 or 2 arguments ({len(args)} given)")
        self.clear()
        for value in items:
            self._link_before(self._sentinel, value)

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the end."""
        self._link_before(self._sentinel, value)

    def push_front(self, value: Any) -> None:
        """Prepend ``value`` at the start."""
        self._link_before(self._sentinel.next, value)

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if not self._size:
            raise IndexError("pop_front() from an empty LinkedList")
        node = self._sentinel.next
        self._unlink(node)
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._size:
            raise IndexError("pop_back() from an empty LinkedList")
        node = self._sentinel.prev
        self._unlink(node)
        return node.value

    def front(self) -> Any:
        """First element."""
        if not self._size:
            raise IndexError("front() of an empty LinkedList")
        return self._sentinel.next.value

    def back(self) -> Any:
        """Last element."""
        if not self._size:
            raise IndexError("back() of an empty LinkedList")
        return self._sentinel.prev.value

    def empty(self) -> bool:
        """Whether the list holds no elements."""
        return self._size == 0

    def erase(self, start: int, stop: int | None = None) -> int:
        """Remove the element at ``start``, or those in ``[start, stop)``; return ``start``."""
        if stop is None:
            node = self._node_at(start, allow_end=False)
            self._unlink(node)
            return self._normalise(start)
        first = self._normalise(start)
        last = self._normalise(stop)
        if not 0 <= first <= last <= self._size:
            raise IndexError(
                f"erase range [{start}, {stop}) out of range for size {self._size}"
            )
        node = self._node_at(first, allow_end=True)
        for _ in range(last - first):
            node = self._unlink(node)
        return first

    def remove(self, value: Any) -> int:
        """Remove every element equal to ``value``; return how many were removed."""
        return self.remove_if(lambda item: item == value)

    def remove_if(self, predicate: Callable[[Any], bool]) -> int:
        """Remove every element for which ``predicate`` is true; return the count."""
        removed = 0
        node = self._sentinel.next
        while node is not self._sentinel:
            if predicate(node.value):
                node = self._unlink(node)
                removed += 1
            else:
                node = node.next
        return removed

    def insert(self, index: int, values: Iterable[Any]) -> int:
        """Insert ``values`` in order before position ``index``; return ``index``."""
        items = list(values)
        position = self._node_at(index, allow_end=True)
        for value in items:
            self._link_before(position, value)
        return self._normalise(index)

    def splice(self, index: int, other: LinkedList) -> None:
        """Move every element of ``other`` before ``index``, leaving ``other`` empty."""
        if other is self:
            raise ValueError("cannot splice a LinkedList into itself")
        position = self._node_at(index, allow_end=True)
        if not other._size:
            return
        first = other._sentinel.next
        last = other._sentinel.prev
        before = position.prev
        before.next = first
        first.prev = before
        last.next = position
        position.prev = last
        self._size += other._size
        other.clear()

    def copy(self) -> LinkedList:
        """A new list holding the same elements."""
        return LinkedList(self)

    def _link_before(self, node: _Node, value: Any) -> _Node:
        new = _Node(value)
        new.prev = node.prev
        new.next = node
        node.prev.next = new
        node.prev = new
        self._size += 1
        return new

    def _unlink(self, node: _Node) -> _Node:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.next

    def _normalise(self, index: int) -> int:
        return index + self._size if index < 0 else index

    def _node_at(self, index: int, allow_end: bool) -> _Node:
        position = self._normalise(index)
        limit = self._size if allow_end else self._size - 1
        if not 0 <= position <= limit:
            raise IndexError(f"index {index} out of range for size {self._size}")
        if position <= self._size // 2:
            node = self._sentinel.next
            for _ in range(position):
                node = node.next
        else:
            node = self._sentinel
            for _ in range(self._size - position):
                node = node.prev
        return node