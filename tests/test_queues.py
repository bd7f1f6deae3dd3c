import pytest
from hypothesis import given, strategies as st

from dsalgo.queues import CircularQueue, LinkedQueue, QueueEmptyError, QueueFullError


def test_first_in_first_out():
    for queue in (CircularQueue(), LinkedQueue()):
        for value in ["a", "b", "c"]:
            queue.enqueue(value)
        assert len(queue) == 3
        assert [queue.dequeue() for _ in range(3)] == ["a", "b", "c"]
        assert queue.is_empty()


def test_dequeue_empty_raises():
    for queue in (CircularQueue(), LinkedQueue()):
        with pytest.raises(QueueEmptyError):
            queue.dequeue()


def test_circular_queue_keeps_one_slot_free():
    queue = CircularQueue(4)
    for value in range(3):
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(3)


def test_circular_queue_default_holds_max_size_minus_one():
    queue = CircularQueue()
    for value in range(49):
        queue.enqueue(value)
    assert queue.is_full()
    assert len(queue) == 49


def test_circular_queue_wraps_around():
    queue = CircularQueue(3)
    seen = []
    for value in range(10):
        queue.enqueue(value)
        seen.append(queue.dequeue())
    assert seen == list(range(10))
    assert queue.is_empty()


def test_linked_queue_reusable_after_emptying():
    queue = LinkedQueue()
    queue.enqueue(1)
    assert queue.dequeue() == 1
    queue.enqueue(2)
    assert queue.dequeue() == 2
    assert queue.is_empty()


@given(values=st.lists(st.integers(), max_size=40))
def test_order_preserved(values):
    for queue in (CircularQueue(), LinkedQueue()):
        for value in values:
            queue.enqueue(value)
        assert len(queue) == len(values)
        assert [queue.dequeue() for _ in values] == values