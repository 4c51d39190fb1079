"""A doubly linked list with positional and value deletion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """A list of values linked in both directions."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values or ():
            self.append(value)

    def prepend(self, value: Any) -> None:
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return self._unlink(node)

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        self._unlink(node)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"