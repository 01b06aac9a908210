"""Harder operations on singly linked lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise, zip_longest
from typing import Optional

from algokit.linked import ListNode, build_list, list_values


@dataclass(eq=False)
class RandomNode:
    """A list node that also points at an arbitrary node of its list, or None."""

    val: int = 0
    next: Optional["RandomNode"] = None
    random: Optional["RandomNode"] = None


def _walk(head: RandomNode | None) -> Iterator[RandomNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Return a deep copy of the list, random pointers included."""
    originals = list(_walk(head))
    copies = {node: RandomNode(node.val) for node in originals}
    for first, second in pairwise(originals):
        copies[first].next = copies[second]
    for node in originals:
        if node.random is None:
            continue
        if node.random not in copies:
            raise ValueError("a random pointer leads outside the list")
        copies[node].random = copies[node.random]
    return copies[originals[0]] if originals else None


def merge_sorted_lists(
    left: ListNode | None, right: ListNode | None
) -> ListNode | None:
    """Splice two sorted lists into one; on equal values left comes first."""
    dummy = ListNode()
    tail = dummy
    while left is not None and right is not None:
        if left.val <= right.val:
            tail.next = left
            left = left.next
        else:
            tail.next = right
            right = right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def _split(head: ListNode) -> ListNode | None:
    """Cut the list after its first half and return the second half."""
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    right = slow.next
    slow.next = None
    return right


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list by merge sort, relinking its nodes; return the new head."""
    if head is None or head.next is None:
        return head
    right = _split(head)
    return merge_sorted_lists(sort_list(head), sort_list(right))


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each full group of k nodes in place; a short tail is left alone."""
    if k < 1:
        raise ValueError("k must be at least 1")
    remaining = len(list_values(head))
    dummy = ListNode(0, head)
    before = dummy
    while remaining >= k:
        group_start = before.next
        prev: ListNode | None = None
        curr = group_start
        for _ in range(k):
            following = curr.next
            curr.next = prev
            prev = curr
            curr = following
        before.next = prev
        group_start.next = curr
        before = group_start
        remaining -= k
    return dummy.next


def _add_digits(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Add two digit sequences given least significant digit first."""
    digits: list[int] = []
    carry = 0
    for a, b in zip_longest(first, second, fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    return digits


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored least significant digit first; return a new list."""
    return build_list(_add_digits(list_values(l1), list_values(l2)))


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    prev: ListNode | None = None
    while head is not None:
        following = head.next
        head.next = prev
        prev = head
        head = following
    return prev


def add_two_numbers_forward(
    l1: ListNode | None, l2: ListNode | None
) -> ListNode | None:
    """Add two numbers stored most significant digit first; return a new list."""
    digits = _add_digits(
        reversed(list_values(l1)), reversed(list_values(l2))
    )
    return build_list(reversed(digits))


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Return a new list of the odd-positioned values, then the even-positioned."""
    values = list_values(head)
    return build_list(values[::2] + values[1::2])


def delete_all_duplicates(head: ListNode | None) -> ListNode | None:
    """Return a new sorted list of the values that occur exactly once."""
    counts = Counter(list_values(head))
    return build_list(sorted(value for value, count in counts.items() if count == 1))


def partition(head: ListNode | None, x: int) -> ListNode | None:
    """Relink the nodes so values below x come first, each side keeping order."""
    less = ListNode()
    greater = ListNode()
    less_tail, greater_tail = less, greater
    node = head
    while node is not None:
        if node.val < x:
            less_tail.next = node
            less_tail = node
        else:
            greater_tail.next = node
            greater_tail = node
        node = node.next
    greater_tail.next = None
    less_tail.next = greater.next
    return less.next