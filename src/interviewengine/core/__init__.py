"\"\"\"Core interview engine components.\"\"\""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..schemas import Candidate

# NOTE: keep imports explicit for export clarity.
from .extractor import ExtractedFields, FieldExtractor, extract_fields
from .scoring import PlaceholderScorer, ScoreResult, ScorerConfig
from .session import (
    Session,
    SessionPhase,
    SessionState,
    SessionStateMachine,
    new_session_id,
)
from .timer import CountdownTimer
from .validators import FieldValidator, ValidatorConfig, is_valid_email, is_valid_phone


@runtime_checkable
class Scorer(Protocol):
    """Scorer contract: score in [0, 100] and a non-empty summary."""

    def score(self, candidate: Candidate) -> ScoreResult:
        """Return the score for a completed candidate."""


__all__ = [
    "CountdownTimer",
    "ExtractedFields",
    "FieldExtractor",
    "FieldValidator",
    "PlaceholderScorer",
    "Scorer",
    "ScoreResult",
    "ScorerConfig",
    "Session",
    "SessionPhase",
    "SessionState",
    "SessionStateMachine",
    "ValidatorConfig",
    "extract_fields",
    "is_valid_email",
    "is_valid_phone",
    "new_session_id",
]
