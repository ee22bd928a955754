"""An integer stack driven by named commands and argument lists."""

from __future__ import annotations

from apidesign.arglist import Arg, ArgList


class CommandStack:
    """A stack of ints operated through ``Push``, ``Pop`` and ``IsEmpty`` commands."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def command(self, cmd: str, args: ArgList | None = None) -> Arg:
        """Run ``cmd`` with ``args`` and return its result as an :class:`Arg`.

        Raises ValueError for an unknown command.
        """
        if args is None:
            args = ArgList()
        if cmd == "Push":
            self._items.append(args.get("value").to_int())
            return Arg(True)
        if cmd == "Pop":
            if not self._items:
                return Arg(0)
            return Arg(self._items.pop())
        if cmd == "IsEmpty":
            return Arg(not self._items)
        raise ValueError(f"unknown command for Stack: {cmd!r}")


def main(argv: list[str] | None = None) -> int:
    """Push and pop one value through commands, reporting emptiness."""
    stack = CommandStack()
    print(f"Empty: {int(stack.command('IsEmpty').to_bool())}")
    stack.command("Push", ArgList().add("value", 10))
    print(f"Empty: {int(stack.command('IsEmpty').to_bool())}")
    value = stack.command("Pop").to_int()
    print(f"Popped off: {value}")
    print(f"Empty: {int(stack.command('IsEmpty').to_bool())}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())