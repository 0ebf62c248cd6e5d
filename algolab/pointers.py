"""Owning handles: one with a single owner and one with a shared reference count."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Deleter = Callable[[Any], None]


def close_resource(value: Any) -> None:
    """Default disposal: close the value if it has a ``close`` method."""
    close = getattr(value, "close", None)
    if callable(close):
        close()


class UniquePtr(Generic[T]):
    """Sole owner of a value; the deleter runs when the value is replaced or dropped."""

    __slots__ = ("_value", "_deleter")

    def __init__(self, value: T | None = None, deleter: Deleter | None = None) -> None:
        self._value = value
        self._deleter: Deleter = deleter if deleter is not None else close_resource

    def get(self) -> T | None:
        """The owned value, or ``None``."""
        return self._value

    def release(self) -> T | None:
        """Give up ownership without running the deleter; return the value."""
        value, self._value = self._value, None
        return value

    def reset(self, value: T | None = None) -> None:
        """Dispose of the owned value, if any, and take ownership of ``value``."""
        old, self._value = self._value, value
        if old is not None:
            self._deleter(old)

    def take(self) -> UniquePtr[T]:
        """Move ownership into a new handle, leaving this one empty."""
        return UniquePtr(self.release(), self._deleter)

    def __bool__(self) -> bool:
        return self._value is not None

    def __enter__(self) -> UniquePtr[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.reset()

    def __repr__(self) -> str:
        return f"UniquePtr({self._value!r})"


def make_unique(factory: Callable[..., T], *args: Any, **kwargs: Any) -> UniquePtr[T]:
    """Build a value with ``factory(*args, **kwargs)`` and own it uniquely."""
    return UniquePtr(factory(*args, **kwargs))


@dataclass
class _ControlBlock:
    value: Any
    count: int = 1


class SharedPtr(Generic[T]):
    """Reference-counted handle; the value is disposed of when the last handle lets go."""

    __slots__ = ("_block",)

    def __init__(self, value: T | None = None) -> None:
        self._block: _ControlBlock | None = (
            _ControlBlock(value) if value is not None else None
        )

    def copy(self) -> SharedPtr[T]:
        """Another handle sharing this value, raising the count by one."""
        other: SharedPtr[T] = SharedPtr()
        other._share(self._block)
        return other

    def assign(self, other: SharedPtr[T]) -> SharedPtr[T]:
        """Drop the current value and share ``other``'s instead; return ``self``."""
        if other is self or other._block is self._block:
            return self
        block = other._block
        self.release()
        self._share(block)
        return self

    def get(self) -> T | None:
        """The shared value, or ``None``."""
        return self._block.value if self._block is not None else None

    def use_count(self) -> int:
        """How many handles share the value; ``0`` for an empty handle."""
        return self._block.count if self._block is not None else 0

    def unique(self) -> bool:
        """Whether this is the only handle to its value."""
        return self.use_count() == 1

    def swap(self, other: SharedPtr[T]) -> None:
        """Exchange values with ``other``; counts are unchanged."""
        self._block, other._block = other._block, self._block

    def release(self) -> None:
        """Let go of the value, disposing of it if this was the last handle."""
        block, self._block = self._block, None
        if block is None:
            return
        block.count -= 1
        if block.count == 0:
            close_resource(block.value)

    def __bool__(self) -> bool:
        return self._block is not None

    def __enter__(self) -> SharedPtr[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"SharedPtr({self.get()!r}, use_count={self.use_count()})"

    def _share(self, block: _ControlBlock | None) -> None:
        self._block = block
        if block is not None:
            block.count += 1


@dataclass
class Person:
    """A small record used to demonstrate shared ownership."""

    age: int
    name: str

    def info(self) -> str:
        """Short description with name and age."""
        return f"Name: {self.name}, Age:{self.age}"