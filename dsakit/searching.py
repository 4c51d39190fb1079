"""Array queries: extremes, running sums, searches and subarray problems."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def min_max(items: Iterable[T]) -> Tuple[T, T]:
    """Return ``(smallest, largest)`` of a non-empty iterable."""
    data = list(items)
    if not data:
        raise ValueError("min_max() of an empty sequence")
    return min(data), max(data)


def prefix_sums(items: Iterable[int]) -> List[int]:
    """Return the sum of ``items[0..i]`` for every index ``i``."""
    return list(accumulate(items))


def linear_search(items: Iterable[T], key: T) -> int:
    """Index of the first element equal to ``key``, or -1 when absent."""
    for index, value in enumerate(items):
        if value == key:
            return index
    return -1


def binary_search(items: Sequence[T], key: T) -> int:
    """Index of ``key`` in an ascending sequence, or -1 when absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        if items[mid] == key:
            return mid
        if items[mid] > key:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def matrix_contains(matrix: Iterable[Iterable[T]], value: T) -> bool:
    """Whether any cell of a row-by-row matrix equals ``value``."""
    return any(cell == value for row in matrix for cell in row)


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    data = list(nums)
    if not data:
        raise ValueError("max_subarray_sum() of an empty sequence")
    best = current = data[0]
    for value in data[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def has_close_duplicate(nums: Sequence[T], k: int) -> bool:
    """Whether two equal elements lie fewer than ``k`` positions apart."""
    if k <= 1:
        return False
    window: set = set()
    for index, value in enumerate(nums):
        if value in window:
            return True
        window.add(value)
        if index >= k - 1:
            window.discard(nums[index - k + 1])
    return False