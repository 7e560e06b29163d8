"\"\"\"Cancelable one-second countdown driven by the host's tick loop.\"\"\""

from __future__ import annotations

from typing import Callable

import structlog

ExpiryCallback = Callable[[], None]


class CountdownTimer:
    """Countdown that fires its expiry callback exactly once per arm.

    The timer never sleeps; the host calls :meth:`tick` once per elapsed
    second. ``disarm`` is idempotent and has no effect after expiry.
    """

    def __init__(self) -> None:
        self._remaining = 0
        self._on_expire: ExpiryCallback | None = None
        self._logger = structlog.get_logger(__name__)

    @property
    def armed(self) -> bool:
        return self._on_expire is not None

    @property
    def remaining(self) -> int:
        return self._remaining

    def arm(self, seconds: int, on_expire: ExpiryCallback) -> None:
        if seconds <= 0:
            raise ValueError("Timer duration must be a positive number of seconds.")
        self.disarm()
        self._remaining = int(seconds)
        self._on_expire = on_expire
        self._logger.debug("timer.armed", seconds=self._remaining)

    def disarm(self) -> None:
        if self._on_expire is None:
            return
        self._logger.debug("timer.disarmed", remaining=self._remaining)
        self._remaining = 0
        self._on_expire = None

    def tick(self) -> bool:
        """Advance one second. Return True when this tick fired the expiry."""
        if self._on_expire is None:
            return False
        self._remaining -= 1
        if self._remaining > 0:
            return False

        # Cleared before the callback so it may re-arm for the next turn.
        callback = self._on_expire
        self._remaining = 0
        self._on_expire = None
        self._logger.debug("timer.expired")
        callback()
        return True


__all__ = ["CountdownTimer", "ExpiryCallback"]
