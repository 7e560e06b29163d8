"\"\"\"Durable store adapters for candidate records.\"\"\""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .candidate_store import CandidateStore
from .memory import InMemoryStore
from .sqlite import SQLiteStore


@runtime_checkable
class DurableStore(Protocol):
    """Key-value persistence contract.

    Values are JSON-compatible mappings. ``set`` overwrites any value already
    stored under the key; ``list`` returns the values whose key starts with
    ``prefix`` in first-write order.
    """

    def get(self, key: str) -> dict[str, Any] | None:
        """Return the stored value or None when the key is absent."""

    def set(self, key: str, value: dict[str, Any]) -> None:
        """Insert or overwrite the value stored under ``key``."""

    def list(self, prefix: str) -> list[dict[str, Any]]:
        """Return every stored value whose key starts with ``prefix``."""


__all__ = ["CandidateStore", "DurableStore", "InMemoryStore", "SQLiteStore"]
