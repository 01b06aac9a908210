"""Algorithms over strings."""

from __future__ import annotations

_OPENERS = {")": "(", "}": "{", "]": "["}


def remaining_string(s: str, ch: str, count: int) -> str:
    """Return what follows the count-th occurrence of ch in s, or ""."""
    seen = 0
    stop = len(s)
    for index, char in enumerate(s):
        if char == ch:
            seen += 1
        if seen == count:
            stop = index
            break
    return s[stop + 1 :]


def is_valid_parentheses(s: str) -> bool:
    """Return whether the brackets in s are balanced and properly nested.

    Every character that is not an opening bracket closes the most recent
    open one; only ')', '}' and ']' are checked against it.
    """
    stack: list[str] = []
    for char in s:
        if char in "([{":
            stack.append(char)
            continue
        if not stack:
            return False
        if char in _OPENERS and stack[-1] != _OPENERS[char]:
            return False
        stack.pop()
    return not stack


def is_palindrome_range(s: str, i: int, j: int) -> bool:
    """Return whether s[i..j], both ends included, reads the same backwards."""
    if j < i:
        return True
    segment = s[i : j + 1]
    return segment == segment[::-1]


def valid_palindrome(s: str) -> bool:
    """Return whether s is a palindrome after deleting at most one character."""
    last = len(s) - 1
    for start, (left, right) in enumerate(zip(s, reversed(s))):
        end = last - start
        if start > end:
            break
        if left != right:
            return is_palindrome_range(s, start + 1, end) or is_palindrome_range(
                s, start, end - 1
            )
    return True