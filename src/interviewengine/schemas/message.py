from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Sender(str, Enum):
    SYSTEM = "System"
    CANDIDATE = "Candidate"


class Message(BaseModel):
    """Transcript entry. Frozen once appended."""

    sender: Sender
    text: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def system(cls, text: str) -> "Message":
        return cls(sender=Sender.SYSTEM, text=text)

    @classmethod
    def candidate(cls, text: str) -> "Message":
        return cls(sender=Sender.CANDIDATE, text=text)
