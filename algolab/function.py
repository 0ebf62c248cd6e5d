"""A nullable, copyable wrapper around any callable."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class Function:
    """Holds a callable and forwards calls to it; calling an empty one is an error."""

    __slots__ = ("_target",)

    def __init__(self, target: Callable[..., Any] | None = None) -> None:
        if target is not None and not callable(target):
            raise TypeError(f"{type(target).__name__!r} object is not callable")
        self._target = target

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self._target is None:
            raise RuntimeError("function not initialized")
        return self._target(*args, **kwargs)

    def __bool__(self) -> bool:
        return self._target is not None

    def __repr__(self) -> str:
        return f"Function({self._target!r})"