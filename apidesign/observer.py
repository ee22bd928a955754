"""Subjects that notify subscribed observers of numbered messages."""

from __future__ import annotations

from typing import Protocol


class _Observer(Protocol):
    def update(self, message: int) -> None: ...


class MyObserver:
    """An observer that reports each message it receives and keeps a record of it."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.received: list[int] = []

    def update(self, message: int) -> None:
        self.received.append(message)
        print(f"Observer name:{self.name}Received message:{message}")

    def __repr__(self) -> str:
        return f"MyObserver({self.name!r})"


class Subject:
    """Keeps observers per message and notifies them in subscription order."""

    def __init__(self) -> None:
        self._observers: dict[int, list[_Observer]] = {}

    def subscribe(self, message: int, observer: _Observer | None) -> None:
        """Subscribe ``observer`` to ``message``; None is ignored."""
        if observer is not None:
            self._observers.setdefault(message, []).append(observer)

    def unsubscribe(self, message: int, observer: _Observer) -> None:
        """Remove every subscription of ``observer`` to ``message``."""
        observers = self._observers.get(message)
        if observers is not None:
            observers[:] = [o for o in observers if o is not observer]

    def notify(self, message: int) -> None:
        """Call ``update`` on every observer subscribed to ``message``."""
        for observer in list(self._observers.get(message, ())):
            observer.update(message)