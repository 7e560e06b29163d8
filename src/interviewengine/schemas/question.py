from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QuestionLevel(str, Enum):
    """Difficulty band of an interview question."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Question(BaseModel):
    """Immutable interview question with its answer time limit."""

    level: QuestionLevel
    time_limit_seconds: int = Field(gt=0)
    text: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)
