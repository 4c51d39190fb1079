"""A singly linked list with reversal, deletion and merge sort."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One cell of a singly linked list."""

    value: Any
    next: Optional["ListNode"] = None


def _merge_nodes(left: Optional[ListNode], right: Optional[ListNode]) -> Optional[ListNode]:
    """Stably merge two sorted chains; ties take the left node first."""
    dummy = ListNode(None)
    tail = dummy
    while left is not None and right is not None:
        if left.value <= right.value:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def _sort_nodes(head: Optional[ListNode]) -> Optional[ListNode]:
    if head is None or head.next is None:
        return head
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    right = slow.next
    slow.next = None
    return _merge_nodes(_sort_nodes(head), _sort_nodes(right))


class LinkedList:
    """A singly linked list of values."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._size = 0
        for value in values or ():
            self.append(value)

    def insert_at_head(self, value: Any) -> None:
        self.head = ListNode(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def append(self, value: Any) -> None:
        node = ListNode(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def delete_at_head(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self.head is None:
            raise ValueError(f"{value!r} is not in the list")
        if self.head.value == value:
            self.delete_at_head()
            return
        previous = self.head
        while previous.next is not None and previous.next.value != value:
            previous = previous.next
        if previous.next is None:
            raise ValueError(f"{value!r} is not in the list")
        if previous.next is self._tail:
            self._tail = previous
        previous.next = previous.next.next
        self._size -= 1

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _find_tail(self) -> Optional[ListNode]:
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def reverse(self) -> None:
        """Reverse the list in place, iteratively."""
        previous: Optional[ListNode] = None
        current = self.head
        self._tail = current
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place by recursing to the last node."""

        def reverse_from(node: Optional[ListNode]) -> Optional[ListNode]:
            if node is None or node.next is None:
                return node
            new_head = reverse_from(node.next)
            node.next.next = node
            node.next = None
            return new_head

        self._tail = self.head
        self.head = reverse_from(self.head)

    def reverse_in_groups(self, k: int) -> None:
        """Reverse every run of ``k`` nodes in place; a short last run is reversed too."""
        if k < 1:
            raise ValueError("group size must be at least 1")
        dummy = ListNode(None, self.head)
        group_prev = dummy
        current = self.head
        while current is not None:
            group_head = current
            previous: Optional[ListNode] = None
            count = 0
            while current is not None and count < k:
                current.next, previous, current = previous, current, current.next
                count += 1
            group_prev.next = previous
            group_head.next = current
            group_prev = group_head
        self.head = dummy.next
        self._tail = self._find_tail()

    def merge_sort(self) -> None:
        """Sort the list in place with a stable merge sort."""
        self.head = _sort_nodes(self.head)
        self._tail = self._find_tail()


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> LinkedList:
    """Merge two ascending sequences into a new list.

    On equal values the element from ``second`` comes first.
    """
    left, right = iter(first), iter(second)
    merged = LinkedList()
    sentinel = object()
    a = next(left, sentinel)
    b = next(right, sentinel)
    while a is not sentinel and b is not sentinel:
        if a < b:
            merged.append(a)
            a = next(left, sentinel)
        else:
            merged.append(b)
            b = next(right, sentinel)
    for rest_first, rest in ((a, left), (b, right)):
        if rest_first is not sentinel:
            merged.append(rest_first)
            for value in rest:
                merged.append(value)
    return merged