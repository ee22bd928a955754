"""Last-in, first-out stacks with a fallback value for popping an empty stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO stack whose ``pop`` returns ``default`` when there is nothing to pop."""

    def __init__(self, default: T | None = None) -> None:
        self._default = default
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> T | None:
        """Remove and return the top value, or the default if the stack is empty."""
        if not self._items:
            return self._default
        return self._items.pop()

    def is_empty(self) -> bool:
        """Return True when the stack holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class IntStack(Stack[int]):
    """A stack of integers; popping an empty one yields 0."""

    def __init__(self) -> None:
        super().__init__(0)


def main(argv: list[str] | None = None) -> int:
    """Push and pop one value, reporting emptiness along the way."""
    stack = IntStack()
    print(f"Empty: {int(stack.is_empty())}")
    stack.push(10)
    print(f"Empty: {int(stack.is_empty())}")
    value = stack.pop()
    print(f"Popped off: {value}")
    print(f"Empty: {int(stack.is_empty())}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())