import pytest

from apidesign.arglist import ArgList
from apidesign.command_stack import CommandStack, main


def test_new_stack_is_empty():
    result = CommandStack().command("IsEmpty")
    assert result.contains_bool() is True
    assert result.to_bool() is True


def test_push_returns_true_and_fills_stack():
    stack = CommandStack()
    result = stack.command("Push", ArgList().add("value", 10))
    assert result.to_bool() is True
    assert stack.command("IsEmpty").to_bool() is False


def test_push_pop_roundtrip():
    stack = CommandStack()
    stack.command("Push", ArgList().add("value", 10))
    popped = stack.command("Pop")
    assert popped.contains_int() is True
    assert popped.to_int() == 10
    assert stack.command("IsEmpty").to_bool() is True


def test_pop_order_is_lifo():
    stack = CommandStack()
    for value in (1, 2, 3):
        stack.command("Push", ArgList().add("value", value))
    popped = [stack.command("Pop").to_int() for _ in range(3)]
    assert popped == [3, 2, 1]


def test_pop_empty_returns_zero():
    result = CommandStack().command("Pop")
    assert result.contains_int() is True
    assert result.to_int() == 0


def test_push_without_value_pushes_zero():
    stack = CommandStack()
    stack.command("Push")
    assert stack.command("IsEmpty").to_bool() is False
    assert stack.command("Pop").to_int() == 0


def test_push_converts_string_value():
    stack = CommandStack()
    stack.command("Push", ArgList().add("value", "12"))
    assert stack.command("Pop").to_int() == 12


def test_unknown_command_raises():
    with pytest.raises(ValueError):
        CommandStack().command("Peek")


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "Empty: 1\nEmpty: 0\nPopped off: 10\nEmpty: 1\n"