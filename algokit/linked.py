"""Singly linked lists and the usual operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        """Yield this node and every node after it."""
        node: ListNode | None = self
        while node is not None:
            yield node
            node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Return the head of a new list holding values in order."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at head."""
    return [] if head is None else [node.val for node in head]


def _length(head: ListNode | None) -> int:
    return 0 if head is None else sum(1 for _ in head)


def get_decimal_value(head: ListNode | None) -> int:
    """Read the list as binary digits, most significant first.

    Only nodes holding 1 contribute a set bit.
    """
    number = 0
    for value in list_values(head):
        number = number * 2 + (1 if value == 1 else 0)
    return number


def has_cycle(head: ListNode | None) -> bool:
    """Return whether following next from head ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def _advance(node: ListNode | None, steps: int) -> ListNode | None:
    for _ in range(steps):
        node = node.next
    return node


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None."""
    len_a, len_b = _length(head_a), _length(head_b)
    first = _advance(head_a, max(len_a - len_b, 0))
    second = _advance(head_b, max(len_b - len_a, 0))
    while first is not None and second is not None:
        if first is second:
            return first
        first, second = first.next, second.next
    return None


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Unlink every node holding val and return the new head."""
    while head is not None and head.val == val:
        head = head.next
    if head is None:
        return None
    prev = head
    while prev.next is not None:
        if prev.next.val == val:
            prev.next = prev.next.next
        else:
            prev = prev.next
    return head


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Keep one node of each run of equal values in a sorted list."""
    if head is None:
        return None
    prev = head
    while prev.next is not None:
        if prev.next.val == prev.val:
            prev.next = prev.next.next
        else:
            prev = prev.next
    return head


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow