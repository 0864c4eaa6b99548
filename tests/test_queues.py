import pytest

from dsakit.queues import ArrayQueue, LinkedQueue, QueueEmpty, QueueFull


def test_first_in_first_out():
    for queue in (ArrayQueue(), LinkedQueue()):
        for value in (1, 2, 3):
            queue.enqueue(value)
        assert queue.peek() == 1
        assert queue.dequeue() == 1
        assert queue.dequeue() == 2
        assert not queue.is_empty()
        assert queue.dequeue() == 3
        assert queue.is_empty()


def test_length_tracks_contents():
    for queue in (ArrayQueue(), LinkedQueue()):
        queue.enqueue("a")
        queue.enqueue("b")
        assert len(queue) == 2
        queue.dequeue()
        assert len(queue) == 1


def test_dequeue_empty_array():
    with pytest.raises(QueueEmpty):
        ArrayQueue().dequeue()


def test_dequeue_empty_linked():
    with pytest.raises(QueueEmpty):
        LinkedQueue().dequeue()


def test_peek_empty_array():
    with pytest.raises(QueueEmpty):
        ArrayQueue().peek()


def test_peek_empty_linked():
    with pytest.raises(QueueEmpty):
        LinkedQueue().peek()


def test_reusable_after_emptying():
    for queue in (ArrayQueue(), LinkedQueue()):
        queue.enqueue(7)
        queue.dequeue()
        queue.enqueue(9)
        assert queue.peek() == 9
        assert len(queue) == 1


def test_order_preserved():
    values = list(range(20))
    for queue in (ArrayQueue(), LinkedQueue()):
        for value in values:
            queue.enqueue(value)
        assert [queue.dequeue() for _ in values] == values


def test_array_queue_default_capacity():
    queue = ArrayQueue()
    for value in range(100):
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueFull):
        queue.enqueue(100)


def test_array_queue_wraps_around():
    queue = ArrayQueue(3)
    received = []
    for value in range(10):
        queue.enqueue(value)
        if queue.is_full():
            received.append(queue.dequeue())
    while not queue.is_empty():
        received.append(queue.dequeue())
    assert received == list(range(10))


def test_array_queue_full_leaves_contents():
    queue = ArrayQueue(1)
    queue.enqueue("first")
    with pytest.raises(QueueFull):
        queue.enqueue("second")
    assert queue.dequeue() == "first"


def test_array_queue_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(0)