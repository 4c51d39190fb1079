"""Queue implementations: fixed array, two stacks and a linked deque."""

from __future__ import annotations

from collections import deque
from typing import Deque, List


class QueueEmptyError(Exception):
    """Raised when removing from or peeking an empty queue."""


class QueueFullError(Exception):
    """Raised when pushing onto a full array queue."""


class ArrayQueue:
    """Queue over a fixed array whose slots are never reused.

    At most ``capacity`` values can ever be pushed, even if some are popped.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: List = []
        self._front = 0

    def push(self, value) -> None:
        if len(self._slots) >= self.capacity:
            raise QueueFullError("queue overflow")
        self._slots.append(value)

    def pop(self):
        if self._front >= len(self._slots):
            raise QueueEmptyError("no element in queue")
        value = self._slots[self._front]
        self._front += 1
        return value

    def peek(self):
        if self._front >= len(self._slots):
            raise QueueEmptyError("no element in queue")
        return self._slots[self._front]

    def __len__(self) -> int:
        return len(self._slots) - self._front


class TwoStackQueue:
    """Queue built from an inbox and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: List = []
        self._outbox: List = []

    def push(self, value) -> None:
        self._inbox.append(value)

    def pop(self):
        if not self._outbox:
            if not self._inbox:
                raise QueueEmptyError("queue is empty")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class LinkedQueue:
    """Unbounded queue over a linked deque."""

    def __init__(self) -> None:
        self._items: Deque = deque()

    def enqueue(self, value) -> None:
        self._items.append(value)

    def dequeue(self):
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def front(self):
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)