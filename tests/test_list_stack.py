import pytest

from chaincoll.common import EmptyError
from chaincoll.list_stack import ListStack


def test_stack_order():
    stack = ListStack()
    with pytest.raises(EmptyError):
        stack.pop()

    stack.push(1)
    assert stack.peek() == 1

    stack.push(2)
    stack.push(3)
    assert len(stack) == 3

    assert stack.pop() == 3
    assert stack.pop() == 2
    assert stack.pop() == 1

    with pytest.raises(EmptyError):
        stack.pop()
    assert len(stack) == 0


def test_peek_on_empty_stack_raises():
    stack = ListStack()
    with pytest.raises(EmptyError):
        stack.peek()


def test_peek_does_not_remove():
    stack = ListStack()
    stack.push("a")
    stack.push("b")
    assert stack.peek() == "b"
    assert stack.peek() == "b"
    assert len(stack) == 2