"""Selection problems solved with binary heaps."""

from __future__ import annotations

import heapq
from collections import Counter


def find_kth_largest(nums: list[int], k: int) -> int:
    """Return the k-th largest value of nums."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must lie between 1 and the number of values")
    return heapq.nlargest(k, nums)[-1]


def top_k_frequent(nums: list[int], k: int) -> list[int]:
    """Return the k most frequent values, least frequent first.

    Ties in frequency favour the larger value, and equal frequencies are
    listed smaller value first.
    """
    counts = Counter(nums)
    chosen = heapq.nlargest(k, ((count, value) for value, count in counts.items()))
    return [value for _, value in reversed(chosen)]


def kth_smallest(matrix: list[list[int]], k: int) -> int:
    """Return the k-th smallest value of a square matrix with sorted rows."""
    size = len(matrix)
    if k < 1:
        raise ValueError("k must be at least 1")
    heap = [(row[0], r, 0) for r, row in enumerate(matrix)]
    heapq.heapify(heap)
    for _ in range(k):
        if not heap:
            raise ValueError("k exceeds the number of values in the matrix")
        value, r, c = heapq.heappop(heap)
        if c + 1 < size:
            heapq.heappush(heap, (matrix[r][c + 1], r, c + 1))
    return value