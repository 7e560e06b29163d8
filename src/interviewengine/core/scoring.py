"\"\"\"Placeholder interview scoring.\"\"\""

from __future__ import annotations

import random
from dataclasses import dataclass

from ..schemas import Candidate

DEFAULT_SUMMARY = "Candidate shows good knowledge in React/Node.js"


@dataclass(slots=True, frozen=True)
class ScoreResult:
    """Score in [0, 100] with a non-empty summary."""

    score: int
    summary: str


@dataclass
class ScorerConfig:
    """Configuration for the placeholder scorer."""

    summary: str = DEFAULT_SUMMARY
    seed: int | None = None


class PlaceholderScorer:
    """Stand-in scorer: a random score that ignores answer content."""

    def __init__(self, *, config: ScorerConfig | None = None) -> None:
        self._config = config or ScorerConfig()
        if not self._config.summary.strip():
            raise ValueError("Scorer summary must be non-empty.")
        self._rng = random.Random(self._config.seed)

    def score(self, candidate: Candidate) -> ScoreResult:
        raw = int(self._rng.random() * 100)
        return ScoreResult(score=_clamp(raw), summary=self._config.summary)


def _clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


__all__ = ["DEFAULT_SUMMARY", "PlaceholderScorer", "ScoreResult", "ScorerConfig"]
