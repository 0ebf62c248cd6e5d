"""Singly linked list nodes and the classic list manipulations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list of integers."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.val})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives ``None``."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Values of the list starting at ``head``, in order."""
    return list(head) if head is not None else []


def sort_values_in_place(head: ListNode | None) -> ListNode | None:
    """Sort by rewriting node values in ascending order, keeping the nodes in place."""
    ordered = sorted(to_values(head))
    for node, value in zip(_nodes(head), ordered):
        node.val = value
    return head


def find_middle(head: ListNode | None) -> ListNode:
    """The middle node; for an even length, the last node of the first half."""
    if head is None:
        raise ValueError("find_middle() of an empty list")
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next  # type: ignore[assignment]
    return slow


def merge_two_lists(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Splice two ascending lists into one ascending list."""
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def sort_list(head: ListNode | None) -> ListNode | None:
    """Merge sort the list by relinking its nodes; returns the new head."""
    if head is None or head.next is None:
        return head
    middle = find_middle(head)
    right = sort_list(middle.next)
    middle.next = None
    left = sort_list(head)
    return merge_two_lists(left, right)


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list by relinking; returns the new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes; a trailing odd node stays put."""
    dummy = ListNode(-1, head)
    previous = dummy
    current = head
    while current is not None and current.next is not None:
        second = current.next
        rest = second.next
        current.next = rest
        second.next = current
        previous.next = second
        previous = current
        current = rest
    return dummy.next


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each full group of ``k`` nodes; a short tail keeps its order."""
    if k < 1:
        raise ValueError(f"group size must be positive, got {k}")
    remaining = sum(1 for _ in _nodes(head))
    dummy = ListNode(-1, head)
    previous = dummy
    current = head
    while remaining >= k:
        group_start = current
        previous.next = None
        for _ in range(k):
            assert current is not None
            following = current.next
            current.next = previous.next
            previous.next = current
            current = following
        assert group_start is not None
        group_start.next = current
        previous = group_start
        remaining -= k
    return dummy.next


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Sum of two numbers stored as lists of decimal digits, least significant first."""
    dummy = ListNode(-1)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next