"""A class with exactly one, lazily created, instance."""

from __future__ import annotations

import atexit
import threading
from typing import ClassVar, TypeVar

S = TypeVar("S", bound="Singleton")


def _announce_destroyed() -> None:
    print("Singleton destroyed")


class Singleton:
    """Obtain the instance with :meth:`get_instance`; direct construction is refused.

    Each subclass has its own single instance.
    """

    _instances: ClassVar[dict[type, Singleton]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        raise TypeError(f"use {type(self).__name__}.get_instance() instead")

    @classmethod
    def get_instance(cls: type[S]) -> S:
        """Return the instance, creating it on first call; safe across threads."""
        with Singleton._lock:
            instance = Singleton._instances.get(cls)
            if instance is None:
                instance = object.__new__(cls)
                print("Singleton created")
                atexit.register(_announce_destroyed)
                Singleton._instances[cls] = instance
            return instance  # type: ignore[return-value]


def main(argv: list[str] | None = None) -> int:
    """Fetch the instance twice."""
    Singleton.get_instance()
    Singleton.get_instance()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())