from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Candidate(BaseModel):
    """Persisted interview result for one session."""

    id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    answers: list[str] = Field(default_factory=list)
    score: int | None = Field(default=None, ge=0, le=100)
    summary: str | None = None
    completed_at: str | None = None

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @property
    def is_complete(self) -> bool:
        return self.score is not None
