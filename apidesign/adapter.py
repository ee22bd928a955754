"""An adapter that offers a simpler call over an object with a wider interface."""

from __future__ import annotations

from types import TracebackType


class Original:
    """The object being adapted; it expects an extra flag on every call."""

    def do_something(self, value: int, verbose: bool) -> list[str]:
        """Do the work for ``value`` and return the lines it reported."""
        lines = ["call Original::DoSomething", "Original::DoSomething bPrint"]
        for line in lines:
            print(line)
        return lines


class Adapter:
    """Owns an :class:`Original` and supplies its flag so callers pass only a value.

    Used as a context manager, leaving the block releases the wrapped object.
    """

    def __init__(self) -> None:
        self._original: Original | None = Original()
        print("call Adapter::Adapter()")

    def do_something(self, value: int) -> list[str]:
        """Forward ``value`` to the wrapped object with the flag set."""
        print("call Adapter::DoSomething")
        if self._original is None:
            return []
        return self._original.do_something(value, True)

    def __enter__(self) -> Adapter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        print("call Adapter::~Adapter()")
        self._original = None


def main(argv: list[str] | None = None) -> int:
    """Create an adapter and make one call through it."""
    with Adapter() as adapter:
        adapter.do_something(42)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())