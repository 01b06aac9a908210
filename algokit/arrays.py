"""Classic algorithms over lists of integers."""

from __future__ import annotations

from collections import Counter
from itertools import chain, groupby, pairwise


def max_area(heights: list[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    if len(heights) < 2:
        raise ValueError("at least two heights are required")
    start, end = 0, len(heights) - 1
    best = None
    while start < end:
        area = min(heights[start], heights[end]) * (end - start)
        best = area if best is None else max(best, area)
        if heights[start] < heights[end]:
            start += 1
        else:
            end -= 1
    return best


def max_profit(prices: list[int]) -> int:
    """Return the best profit from one buy followed by one sale."""
    if not prices:
        raise ValueError("prices must not be empty")
    buy = prices[0]
    profit = 0
    for price in prices[1:]:
        if price < buy:
            buy = price
        elif price - buy > profit:
            profit = price - buy
    return profit


def max_profit_multiple(prices: list[int]) -> int:
    """Return the best profit when any number of trades is allowed."""
    if not prices:
        raise ValueError("prices must not be empty")
    return sum(max(today - yesterday, 0) for yesterday, today in pairwise(prices))


def max_score(card_points: list[int], k: int) -> int:
    """Return the best total of k cards taken from either end."""
    if not 0 <= k <= len(card_points):
        raise ValueError("k must lie between 0 and the number of cards")
    left_sum = sum(card_points[:k])
    best = left_sum
    right_sum = 0
    taken_left = reversed(card_points[:k])
    taken_right = reversed(card_points[len(card_points) - k:])
    for dropped, added in zip(taken_left, taken_right):
        left_sum -= dropped
        right_sum += added
        best = max(best, left_sum + right_sum)
    return best


def three_sum(nums: list[int]) -> list[list[int]]:
    """Return every distinct sorted triplet that sums to zero, in order."""
    ordered = sorted(nums)
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(ordered):
        start, end = i + 1, len(ordered) - 1
        while start < end:
            total = first + ordered[start] + ordered[end]
            if total == 0:
                found.add((first, ordered[start], ordered[end]))
                start += 1
                end -= 1
            elif total > 0:
                end -= 1
            else:
                start += 1
    return [list(triplet) for triplet in sorted(found)]


_END = object()


def majority_element(nums: list[int]) -> int:
    """Return the element found by the pairing-off vote."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    count = 1
    rest = nums[1:]
    for value, following in zip(rest, chain(rest[1:], [_END])):
        count += 1 if value == candidate else -1
        if count == 0:
            if following is _END:
                raise ValueError("nums has no majority element")
            candidate = following
    return candidate


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return indices of two different elements adding up to target, or []."""
    for i, value in enumerate(nums[:-1]):
        wanted = target - value
        match = next(
            (j for j, other in enumerate(nums) if j != i and other == wanted),
            None,
        )
        if match is not None:
            return [i, match]
    return []


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values to the front in place; return their count."""
    kept = [value for value, _ in groupby(nums)]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the other order."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def find_duplicate(nums: list[int]) -> int | None:
    """Return the smallest repeated value, or None if there is none."""
    return next((b for a, b in pairwise(sorted(nums)) if a == b), None)


def find_duplicates(nums: list[int]) -> list[int]:
    """Return a value for each adjacent equal pair in sorted order."""
    return [b for a, b in pairwise(sorted(nums)) if a == b]


def subarray_sum(nums: list[int], k: int) -> int:
    """Count contiguous sub-lists whose sum is k."""
    seen = Counter({0: 1})
    prefix = 0
    total = 0
    for value in nums:
        prefix += value
        total += seen[prefix - k]
        seen[prefix] += 1
    return total


def sort_colors(nums: list[int]) -> None:
    """Sort the 0, 1 and 2 values in place by counting them.

    Values other than 0, 1 and 2 are not counted; they keep whatever
    positions are left after the counted values are written.
    """
    counts = Counter(nums)
    written = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]
    nums[: len(written)] = written


def largest_rectangle_area(heights: list[int]) -> int:
    """Return the area of the largest rectangle in the histogram."""
    if not heights:
        raise ValueError("heights must not be empty")
    stack: list[int] = []
    best = None
    for i, height in enumerate(chain(heights, [float("-inf")])):
        while stack and heights[stack[-1]] > height:
            top = stack.pop()
            width = i - stack[-1] - 1 if stack else i
            area = heights[top] * width
            best = area if best is None else max(best, area)
        stack.append(i)
    return best


def merge_sorted(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Place the first n of nums2 after the first m of nums1 and sort nums1."""
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    nums1[m : m + n] = nums2[:n]
    nums1.sort()


def subarrays_div_by_k(nums: list[int], k: int) -> int:
    """Count contiguous sub-lists whose sum is divisible by k."""
    if k == 0:
        raise ValueError("k must not be zero")
    remainders = Counter({0: 1})
    prefix = 0
    total = 0
    for value in nums:
        prefix += value
        remainder = prefix % k
        total += remainders[remainder]
        remainders[remainder] += 1
    return total


def find_min_diff(packets: list[int], m: int) -> int:
    """Return the least spread between the largest and smallest of m packets."""
    if not 1 <= m <= len(packets):
        raise ValueError("m must lie between 1 and the number of packets")
    ordered = sorted(packets)
    return min(high - low for low, high in zip(ordered, ordered[m - 1 :]))