"""Classic comparison sorts and an LSD radix sort.

Every function takes any iterable and returns a new sorted list. The input
is left untouched.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, TypeVar

T = TypeVar("T")

_RADIX = 10
_RADIX_DIGITS = 10


def insertion_sort(items: Iterable[T], reverse: bool = False) -> List[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    data = list(items)
    for i in range(1, len(data)):
        current = data[i]
        j = i
        while j > 0 and (
            data[j - 1] < current if reverse else current < data[j - 1]
        ):
            data[j] = data[j - 1]
            j -= 1
        data[j] = current
    return data


def selection_sort(items: Iterable[T]) -> List[T]:
    """Sort by repeatedly moving the smallest remaining element forward."""
    data = list(items)
    for i in range(len(data) - 1):
        least = min(range(i, len(data)), key=data.__getitem__)
        data[i], data[least] = data[least], data[i]
    return data


def bubble_sort(items: Iterable[T]) -> List[T]:
    """Sort by swapping adjacent out-of-order pairs, one pass per element."""
    data = list(items)
    n = len(data)
    for i in range(n - 1):
        for j in range(n - 1, i, -1):
            if data[j] < data[j - 1]:
                data[j], data[j - 1] = data[j - 1], data[j]
    return data


def _shell_increments(n: int) -> List[int]:
    increments = []
    h = 1
    while h < n:
        increments.append(h)
        h = 3 * h + 1
    return increments


def shell_sort(items: Iterable[T]) -> List[T]:
    """Shell sort using the 1, 4, 13, 40, ... increment sequence."""
    data = list(items)
    n = len(data)
    for h in reversed(_shell_increments(n)):
        for start in range(h, 2 * h):
            for j in range(start, n, h):
                current = data[j]
                k = j
                while k - h >= 0 and current < data[k - h]:
                    data[k] = data[k - h]
                    k -= h
                data[k] = current
    return data


def _sift_down(data: list, size: int, index: int) -> None:
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == index:
            return
        data[index], data[largest] = data[largest], data[index]
        index = largest


def heap_sort(items: Iterable[T]) -> List[T]:
    """Sort by building a max-heap and repeatedly extracting its root."""
    data = list(items)
    n = len(data)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(data, n, i)
    for end in range(n - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


def _quick_sort_range(data: list, first: int, last: int) -> None:
    lower, upper = first + 1, last
    middle = (first + last) // 2
    data[first], data[middle] = data[middle], data[first]
    bound = data[first]
    while lower <= upper:
        # The largest element sits just past every range, so this stops.
        while bound > data[lower]:
            lower += 1
        while bound < data[upper]:
            upper -= 1
        if lower < upper:
            data[lower], data[upper] = data[upper], data[lower]
            lower += 1
            upper -= 1
        else:
            lower += 1
    data[upper], data[first] = data[first], data[upper]
    if first < upper - 1:
        _quick_sort_range(data, first, upper - 1)
    if upper + 1 < last:
        _quick_sort_range(data, upper + 1, last)


def quick_sort(items: Iterable[T]) -> List[T]:
    """Quicksort with a middle pivot and the maximum parked as a sentinel."""
    data = list(items)
    n = len(data)
    if n < 2:
        return data
    largest = max(range(n), key=data.__getitem__)
    data[n - 1], data[largest] = data[largest], data[n - 1]
    _quick_sort_range(data, 0, n - 2)
    return data


def _merge(left: List[T], right: List[T]) -> List[T]:
    merged: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> List[T]:
    """Stable top-down merge sort."""
    data = list(items)
    if len(data) < 2:
        return data
    mid = (len(data) + 1) // 2
    return _merge(merge_sort(data[:mid]), merge_sort(data[mid:]))


def radix_sort(items: Iterable[int]) -> List[int]:
    """LSD radix sort in base 10 over ten digits.

    Only non-negative integers below 10**10 are accepted.
    """
    data = list(items)
    for value in data:
        if value < 0:
            raise ValueError(f"radix sort needs non-negative integers, got {value}")
        if value >= _RADIX**_RADIX_DIGITS:
            raise ValueError(f"{value} has more than {_RADIX_DIGITS} digits")
    buckets = [deque() for _ in range(_RADIX)]
    factor = 1
    for _ in range(_RADIX_DIGITS):
        for value in data:
            buckets[(value // factor) % _RADIX].append(value)
        data = [value for bucket in buckets for value in bucket]
        for bucket in buckets:
            bucket.clear()
        factor *= _RADIX
    return data