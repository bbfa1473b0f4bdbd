"""Delay/cancel timer that coalesces bursts of calls into one delayed call."""
from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import structlog

log = structlog.get_logger()

DEFAULT_WAIT = 0.15   # seconds


class Debouncer:
    """Call *fn* once, *wait* seconds after the most recent trigger.

    Must be triggered from inside a running asyncio event loop.
    """

    def __init__(self, fn: Callable[[], Any], wait: float = DEFAULT_WAIT) -> None:
        self._fn = fn
        self.wait = wait
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.wait, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def flush(self) -> None:
        """Run the pending call now, if there is one."""
        if self._handle is not None:
            self.cancel()
            self._fire()

    def _fire(self) -> None:
        self._handle = None
        try:
            self._fn()
        except Exception as exc:
            log.error("debounced_call_failed", error=str(exc), error_type=type(exc).__name__)
