"\"\"\"Maps candidate records onto a durable key-value store.\"\"\""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from ..schemas import Candidate

if TYPE_CHECKING:
    from . import DurableStore

KEY_PREFIX = "candidate:"


class CandidateStore:
    """Upsert and list candidate records keyed by session id."""

    def __init__(self, store: "DurableStore", *, prefix: str = KEY_PREFIX):
        self._store = store
        self._prefix = prefix
        self._logger = structlog.get_logger(__name__)

    def key_for(self, candidate_id: str) -> str:
        return f"{self._prefix}{candidate_id}"

    def persist(self, candidate: Candidate) -> None:
        """Overwrite the snapshot stored for ``candidate.id``. Safe to repeat."""
        self._store.set(self.key_for(candidate.id), candidate.model_dump(mode="json"))
        self._logger.info(
            "store.persisted",
            candidate_id=candidate.id,
            answers=len(candidate.answers),
            complete=candidate.is_complete,
        )

    def get(self, candidate_id: str) -> Candidate | None:
        raw = self._store.get(self.key_for(candidate_id))
        return Candidate.model_validate(raw) if raw is not None else None

    def list_all(self) -> list[Candidate]:
        candidates: list[Candidate] = []
        for raw in self._store.list(self._prefix):
            try:
                candidates.append(Candidate.model_validate(raw))
            except ValidationError as exc:
                self._logger.warning("store.invalid_record", error=str(exc))
        return candidates


__all__ = ["CandidateStore", "KEY_PREFIX"]
