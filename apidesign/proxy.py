"""A proxy that stands in for an object and shares its interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType


class Service(ABC):
    """The interface shared by the real object and its proxy."""

    @abstractmethod
    def do_something(self, value: int) -> None:
        """Do the work for ``value``."""


class Original(Service):
    """The real implementation."""

    def do_something(self, value: int) -> None:
        print("call Original::DoSomething")


class Proxy(Service):
    """Forwards every call to an :class:`Original` it owns.

    Used as a context manager, leaving the block releases the wrapped object.
    """

    def __init__(self) -> None:
        self._original: Original | None = Original()
        print("call Proxy::Proxy()")

    def do_something(self, value: int) -> None:
        print("call Proxy::DoSomething")
        if self._original is not None:
            self._original.do_something(value)

    def __enter__(self) -> Proxy:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        print("call Proxy::~Proxy()")
        self._original = None


def main(argv: list[str] | None = None) -> int:
    """Create a proxy and make one call through it."""
    with Proxy() as proxy:
        proxy.do_something(42)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())