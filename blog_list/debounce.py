from __future__ import annotations

import asyncio
from functools import partial
from typing import Any, Callable, Optional, Protocol


class Cancellable(Protocol):
    def cancel(self) -> Any:  # pragma: no cover - interface
        ...


Scheduler = Callable[[float, Callable[[], None]], Cancellable]


def call_later(delay: float, fn: Callable[[], None]) -> asyncio.TimerHandle:
    return asyncio.get_running_loop().call_later(delay, fn)


class Debouncer:
    """
    Coalesce a burst of calls into one deferred call after `delay` seconds of quiet.

    Every call cancels the pending invocation and schedules a new one with the
    latest arguments. `schedule(delay, fn)` must return a handle with `cancel()`;
    the default uses the running asyncio loop.
    """

    def __init__(
        self,
        callback: Callable[..., None],
        delay: float,
        *,
        schedule: Optional[Scheduler] = None,
    ) -> None:
        self._callback = callback
        self._delay = delay
        self._schedule = schedule or call_later
        self._handle: Optional[Cancellable] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.cancel()
        self._handle = self._schedule(self._delay, partial(self._fire, args, kwargs))

    def _fire(self, args: tuple, kwargs: dict) -> None:
        self._handle = None
        self._callback(*args, **kwargs)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
