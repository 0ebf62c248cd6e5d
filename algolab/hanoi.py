"""Towers of Hanoi solved recursively and with an explicit frame stack."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass

MoveCallback = Callable[[str, str], None]


def _check(n: int) -> None:
    if n < 1:
        raise ValueError(f"number of discs must be at least 1, got {n}")


def hanoi(
    n: int,
    source: str = "A",
    target: str = "B",
    via: str = "C",
    on_move: MoveCallback | None = None,
) -> int:
    """Move ``n`` discs from ``source`` to ``target``; return the number of moves."""
    _check(n)
    if n == 1:
        if on_move is not None:
            on_move(source, target)
        return 1
    first = hanoi(n - 1, source, via, target, on_move)
    hanoi(1, source, target, via, on_move)
    second = hanoi(n - 1, via, target, source, on_move)
    return first + second + 1


@dataclass
class _Frame:
    n: int
    source: str
    target: str
    via: str
    pc: int = 0
    first: int = 0
    second: int = 0


def hanoi_iterative(
    n: int,
    source: str = "A",
    target: str = "B",
    via: str = "C",
    on_move: MoveCallback | None = None,
) -> int:
    """Same as :func:`hanoi`, driven by a stack of frames instead of recursion."""
    _check(n)
    stack = [_Frame(n, source, target, via)]
    returned = 0
    while stack:
        frame = stack[-1]
        step = frame.pc
        frame.pc += 1
        match step:
            case 0:
                if frame.n == 1:
                    if on_move is not None:
                        on_move(frame.source, frame.target)
                    stack.pop()
                    returned = 1
            case 1:
                stack.append(_Frame(frame.n - 1, frame.source, frame.via, frame.target))
            case 2:
                frame.first = returned
            case 3:
                stack.append(_Frame(1, frame.source, frame.target, frame.via))
            case 4:
                stack.append(_Frame(frame.n - 1, frame.via, frame.target, frame.source))
            case 5:
                frame.second = returned
            case 6:
                stack.pop()
                returned = frame.first + frame.second + 1
    return returned


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves for ``n`` discs (default 4) and the total count."""
    parser = argparse.ArgumentParser(description="Solve the Towers of Hanoi.")
    parser.add_argument("n", nargs="?", type=int, default=4, help="number of discs")
    parser.add_argument(
        "--iterative", action="store_true", help="use the explicit frame stack"
    )
    args = parser.parse_args(argv)
    if args.n < 1:
        parser.error("number of discs must be at least 1")
    solve = hanoi_iterative if args.iterative else hanoi
    count = solve(args.n, "A", "B", "C", lambda a, b: print(f"{a} -> {b}"))
    print(f"\nHanoi({args.n}, A, B, C) = {count}")
    return 0