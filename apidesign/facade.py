"""A facade that hides two collaborating objects behind one call."""

from __future__ import annotations


class Original1:
    """First hidden collaborator."""

    def do_something(self, value: int) -> str:
        """Report ``value`` and return the line written."""
        line = f"Original1::DoSometing nValue{value}"
        print(line)
        return line


class Original2:
    """Second hidden collaborator."""

    def do_something(self) -> str:
        """Report the call and return the line written."""
        line = "Original2::DoSometing"
        print(line)
        return line


class FacadeImpl:
    """Creates the collaborators lazily, on first use, and keeps them."""

    def __init__(self) -> None:
        self._original1: Original1 | None = None
        self._original2: Original2 | None = None

    def original1(self) -> Original1:
        """Return the first collaborator, creating it if needed."""
        if self._original1 is None:
            print("create Original1")
            self._original1 = Original1()
        return self._original1

    def original2(self) -> Original2:
        """Return the second collaborator, creating it if needed."""
        if self._original2 is None:
            print("create Original2")
            self._original2 = Original2()
        return self._original2


class Facade:
    """One entry point that drives both collaborators."""

    def __init__(self) -> None:
        self._impl = FacadeImpl()

    def do_something(self) -> None:
        self._impl.original1().do_something(32)
        self._impl.original2().do_something()


def main(argv: list[str] | None = None) -> int:
    """Make one call through the facade."""
    Facade().do_something()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())