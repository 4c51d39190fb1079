"""A singly linked circular list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class CircularLinkedList:
    """A circular list whose last node links back to the first."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values or ():
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self._tail is None:
            raise ValueError("list is empty")
        previous = self._tail
        for _ in range(self._size):
            current = previous.next
            if current.value == value:
                if current is previous:
                    self._tail = None
                else:
                    previous.next = current.next
                    if current is self._tail:
                        self._tail = previous
                self._size -= 1
                return
            previous = current
        raise ValueError(f"{value!r} is not in the list")

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[Any]:
        """Yield each value once, starting at the head."""
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"