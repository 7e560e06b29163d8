"\"\"\"Process-local durable store.\"\"\""

from __future__ import annotations

import copy
import threading
from typing import Any


class InMemoryStore:
    """Dict-backed store. Values are deep-copied in and out."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> dict[str, Any] | None:
        with self._lock:
            value = self._data.get(key)
            return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: dict[str, Any]) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(value)

    def list(self, prefix: str) -> list[dict[str, Any]]:
        with self._lock:
            return [
                copy.deepcopy(value)
                for key, value in self._data.items()
                if key.startswith(prefix)
            ]

    def __len__(self) -> int:
        return len(self._data)
