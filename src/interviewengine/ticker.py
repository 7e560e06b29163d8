"\"\"\"Background one-second ticker for hosting an engine.\"\"\""

from __future__ import annotations

import threading
from typing import Callable, Protocol


class Tickable(Protocol):
    def tick(self) -> bool: ...


class Ticker:
    """Calls ``target.tick()`` every ``interval`` seconds until stopped.

    After ``stop()`` returns no further ticks are delivered.
    """

    def __init__(
        self,
        target: Tickable,
        *,
        interval: float = 1.0,
        on_tick: Callable[[bool], None] | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("Tick interval must be positive.")
        self._target = target
        self._interval = interval
        self._on_tick = on_tick
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="interview-ticker", daemon=True)

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def start(self) -> None:
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread.is_alive() and threading.current_thread() is not self._thread:
            self._thread.join(timeout if timeout is not None else self._interval * 2)

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            fired = self._target.tick()
            if self._on_tick is not None:
                self._on_tick(fired)


__all__ = ["Tickable", "Ticker"]
