import pytest

from dsakit.queues import (
    ArrayQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
    TwoStackQueue,
)


def test_array_queue_fifo():
    queue = ArrayQueue(10)
    for value in [1, 2, 3, 4]:
        queue.push(value)
    assert queue.peek() == 1
    assert queue.pop() == 1
    assert queue.peek() == 2
    assert len(queue) == 3


def test_array_queue_overflow():
    queue = ArrayQueue(2)
    queue.push(1)
    queue.push(2)
    with pytest.raises(QueueFullError):
        queue.push(3)


def test_array_queue_slots_not_reused():
    queue = ArrayQueue(2)
    queue.push(1)
    queue.push(2)
    assert queue.pop() == 1
    assert queue.pop() == 2
    assert len(queue) == 0
    with pytest.raises(QueueFullError):
        queue.push(3)


def test_array_queue_empty():
    queue = ArrayQueue(3)
    with pytest.raises(QueueEmptyError):
        queue.pop()
    with pytest.raises(QueueEmptyError):
        queue.peek()


def test_two_stack_queue_interleaved():
    queue = TwoStackQueue()
    for value in [1, 2, 3, 4]:
        queue.push(value)
    assert queue.pop() == 1
    queue.push(5)
    assert [queue.pop() for _ in range(4)] == [2, 3, 4, 5]
    assert len(queue) == 0


def test_two_stack_queue_empty():
    with pytest.raises(QueueEmptyError):
        TwoStackQueue().pop()


def test_linked_queue_fifo():
    queue = LinkedQueue()
    for value in "abc":
        queue.enqueue(value)
    assert queue.front() == "a"
    assert queue.dequeue() == "a"
    assert len(queue) == 2


def test_linked_queue_clear():
    queue = LinkedQueue()
    queue.enqueue(1)
    queue.enqueue(2)
    queue.clear()
    assert len(queue) == 0
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    with pytest.raises(QueueEmptyError):
        queue.front()