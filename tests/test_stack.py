import pytest

from dsakit.stack import ArrayStack, StackOverflow, StackUnderflow


def test_last_in_first_out():
    stack = ArrayStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.peek() == 3
    assert stack.pop() == 3
    assert stack.pop() == 2
    assert not stack.is_empty()
    assert stack.pop() == 1
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = ArrayStack()
    stack.push("x")
    stack.peek()
    assert len(stack) == 1


def test_default_capacity_is_one_hundred():
    stack = ArrayStack()
    for value in range(100):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(StackOverflow):
        stack.push(100)


def test_overflow_leaves_stack_intact():
    stack = ArrayStack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflow):
        stack.push(3)
    assert len(stack) == 2
    assert stack.peek() == 2


def test_pop_empty():
    with pytest.raises(StackUnderflow):
        ArrayStack().pop()


def test_peek_empty():
    with pytest.raises(StackUnderflow):
        ArrayStack().peek()


def test_pop_reverses_push_order():
    stack = ArrayStack(10)
    values = [4, 8, 15, 16, 23, 42]
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == values[::-1]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayStack(0)