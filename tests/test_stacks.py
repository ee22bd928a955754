import pytest

from apidesign.stacks import IntStack, Stack, main


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty() is True
    assert len(stack) == 0


def test_push_makes_stack_non_empty():
    stack = Stack()
    stack.push("a")
    assert stack.is_empty() is False
    assert len(stack) == 1


def test_pop_returns_values_in_reverse_order():
    stack = Stack()
    for value in ["a", "b", "c"]:
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == ["c", "b", "a"]
    assert stack.is_empty() is True


def test_pop_empty_returns_default():
    stack = Stack(default="nothing")
    assert stack.pop() == "nothing"
    assert len(stack) == 0


def test_pop_empty_without_default_returns_none():
    assert Stack().pop() is None


def test_int_stack_pop_empty_returns_zero():
    stack = IntStack()
    assert stack.pop() == 0
    assert stack.is_empty() is True


def test_int_stack_push_pop_roundtrip():
    stack = IntStack()
    stack.push(10)
    assert stack.pop() == 10
    assert stack.pop() == 0


@pytest.mark.parametrize("values", [[1], [5, -3, 7], list(range(20))])
def test_length_tracks_pushes_and_pops(values):
    stack = IntStack()
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    popped = [stack.pop() for _ in values]
    assert popped == list(reversed(values))
    assert len(stack) == 0


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "Empty: 1\nEmpty: 0\nPopped off: 10\nEmpty: 1\n"