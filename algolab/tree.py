"""Binary trees built from level-order arrays, and level-order listing."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

MISSING = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree of integers."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Sequence[int | None]) -> TreeNode | None:
    """Tree from a level-order array where ``-1`` or ``None`` marks a missing node.

    Children listed under a missing parent are dropped.
    """
    nodes = [None if v is None or v == MISSING else TreeNode(v) for v in values]
    for i, node in enumerate(nodes):
        if node is None:
            continue
        left, right = 2 * i + 1, 2 * i + 2
        if left < len(nodes):
            node.left = nodes[left]
        if right < len(nodes):
            node.right = nodes[right]
    return nodes[0] if nodes else None


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values level by level, with ``-1`` standing for each missing child."""
    levels: list[list[int]] = []
    queue: deque[TreeNode | None] = deque([root] if root is not None else [])
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            if node is None:
                level.append(MISSING)
            else:
                level.append(node.val)
                queue.append(node.left)
                queue.append(node.right)
        levels.append(level)
    return levels


def format_levels(root: TreeNode | None) -> str:
    """Level-order listing, one line per level, values separated by spaces."""
    return "\n".join(" ".join(map(str, level)) for level in level_order(root))