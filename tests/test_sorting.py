import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
    shell_sort,
)

SAMPLES = [
    [],
    [7],
    [2, 1],
    [1, 2],
    [1, 2, 367, 35, 23, 356],
    [12, 11, 13, 5, 6, 7],
    [38, 27, 43, 3, 9, 82, 10],
    [5, 5, 5, 5],
    [3, -1, 0, -7, 3, 2, -1],
    list(range(20, 0, -1)),
]


def _random_lists():
    rng = random.Random(1234)
    return [[rng.randint(-50, 50) for _ in range(rng.randint(0, 40))] for _ in range(25)]


@pytest.mark.parametrize("sample", SAMPLES)
def test_matches_builtin_sorted(sample):
    expected = sorted(sample)
    assert insertion_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert bubble_sort(sample) == expected
    assert shell_sort(sample) == expected
    assert heap_sort(sample) == expected
    assert quick_sort(sample) == expected
    assert merge_sort(sample) == expected


def test_random_lists():
    for sample in _random_lists():
        expected = sorted(sample)
        assert insertion_sort(sample) == expected
        assert selection_sort(sample) == expected
        assert bubble_sort(sample) == expected
        assert shell_sort(sample) == expected
        assert heap_sort(sample) == expected
        assert quick_sort(sample) == expected
        assert merge_sort(sample) == expected


def test_input_is_not_modified():
    sample = [4, 1, 3, 2]
    snapshot = list(sample)
    assert insertion_sort(sample) == [1, 2, 3, 4]
    assert selection_sort(sample) == [1, 2, 3, 4]
    assert bubble_sort(sample) == [1, 2, 3, 4]
    assert shell_sort(sample) == [1, 2, 3, 4]
    assert heap_sort(sample) == [1, 2, 3, 4]
    assert quick_sort(sample) == [1, 2, 3, 4]
    assert merge_sort(sample) == [1, 2, 3, 4]
    assert sample == snapshot


def test_sorts_strings_and_generators():
    words = ["pear", "apple", "fig", "banana"]
    expected = sorted(words)
    assert insertion_sort(iter(words)) == expected
    assert selection_sort(iter(words)) == expected
    assert bubble_sort(iter(words)) == expected
    assert shell_sort(iter(words)) == expected
    assert heap_sort(iter(words)) == expected
    assert quick_sort(iter(words)) == expected
    assert merge_sort(iter(words)) == expected


def test_merge_sort_worked_example():
    assert merge_sort([12, 11, 13, 5, 6, 7]) == [5, 6, 7, 11, 12, 13]


def test_insertion_sort_descending():
    sample = [12, 45, 23, 51, 19, 8]
    assert insertion_sort(sample, reverse=True) == sorted(sample, reverse=True)


def test_merge_sort_is_stable():
    pairs = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in merge_sort(Key(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])


def test_radix_sort_sample():
    sample = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(sample) == sorted(sample)


def test_radix_sort_random_and_large():
    rng = random.Random(99)
    sample = [rng.randint(0, 10**10 - 1) for _ in range(200)]
    assert radix_sort(sample) == sorted(sample)


def test_radix_sort_empty():
    assert radix_sort([]) == []


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_radix_sort_rejects_too_many_digits():
    with pytest.raises(ValueError):
        radix_sort([10**10])