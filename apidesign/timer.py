"""A named timer that measures how long it has existed."""

from __future__ import annotations

import time
from types import TracebackType


class AutoTimer:
    """Starts timing when created; :meth:`elapsed` gives the seconds since then."""

    __slots__ = ("name", "_start")

    def __init__(self, name: str) -> None:
        self.name = name
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        """Return the seconds since the timer was created."""
        return time.perf_counter() - self._start

    def __enter__(self) -> AutoTimer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        return None

    def __repr__(self) -> str:
        return f"AutoTimer({self.name!r})"