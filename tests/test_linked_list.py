import pytest

from dsakit.linked_list import LinkedList, merge_sorted


def test_append_keeps_order():
    values = [1, 2, 3]
    assert list(LinkedList(values)) == values


def test_insert_at_head():
    lst = LinkedList([1, 2, 3])
    lst.insert_at_head(4)
    assert list(lst) == [4, 1, 2, 3]
    assert len(lst) == 4


def test_contains():
    lst = LinkedList([4, 1, 2, 3])
    assert 3 in lst
    assert 5 not in lst


def test_delete_middle_and_head():
    lst = LinkedList([4, 1, 2, 3])
    lst.delete(3)
    assert list(lst) == [4, 1, 2]
    assert lst.delete_at_head() == 4
    assert list(lst) == [1, 2]
    lst.append(9)
    assert list(lst) == [1, 2, 9]


def test_delete_missing_raises():
    with pytest.raises(ValueError):
        LinkedList([1, 2]).delete(7)
    with pytest.raises(ValueError):
        LinkedList().delete(7)


def test_delete_at_head_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().delete_at_head()


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4], list(range(20))])
def test_reverse_both_ways(values):
    a = LinkedList(values)
    a.reverse()
    assert list(a) == values[::-1]
    b = LinkedList(values)
    b.reverse_recursive()
    assert list(b) == values[::-1]
    b.append(100)
    assert list(b)[-1] == 100


def test_reverse_in_groups():
    lst = LinkedList([1, 2, 3, 4, 5, 6])
    lst.reverse_in_groups(2)
    assert list(lst) == [2, 1, 4, 3, 6, 5]


@pytest.mark.parametrize("k", [1, 3, 4, 10])
def test_reverse_in_groups_preserves_elements(k):
    values = list(range(9))
    lst = LinkedList(values)
    lst.reverse_in_groups(k)
    assert sorted(lst) == values
    assert len(lst) == len(values)
    if k >= len(values):
        assert list(lst) == values[::-1]
    if k == 1:
        assert list(lst) == values


def test_reverse_in_groups_rejects_zero():
    with pytest.raises(ValueError):
        LinkedList([1]).reverse_in_groups(0)


def test_merge_sort_example():
    values = [12, 11, 13, 5, 6, 7]
    lst = LinkedList(values)
    lst.merge_sort()
    assert list(lst) == sorted(values)
    lst.append(99)
    assert list(lst)[-1] == 99


def test_merge_sort_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    lst = LinkedList(Key(p) for p in pairs)
    lst.merge_sort()
    assert [k.pair for k in lst] == sorted(pairs, key=lambda p: p[0])


def test_merge_sorted():
    first, second = [1, 3, 5], [2, 4, 6]
    merged = merge_sorted(LinkedList(first), LinkedList(second))
    assert list(merged) == sorted(first + second)
    assert list(merge_sorted([], second)) == second
    assert list(merge_sorted(first, [])) == first