"\"\"\"Pydantic schema definitions for interview session data.\"\"\""

from __future__ import annotations

from .candidate import Candidate
from .message import Message, Sender
from .question import Question, QuestionLevel

__all__ = [
    "Candidate",
    "Message",
    "Question",
    "QuestionLevel",
    "Sender",
]
