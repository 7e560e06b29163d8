"\"\"\"Error taxonomy for the interview engine.\"\"\""

from __future__ import annotations


class InterviewError(Exception):
    """Base class for recoverable interview engine errors."""


class FieldValidationError(InterviewError, ValueError):
    """Raised when a typed identity field fails its format check."""

    def __init__(self, field: str, value: str, message: str):
        super().__init__(message)
        self.field = field
        self.value = value
        self.message = message


class UnsupportedDocumentError(InterviewError):
    """Raised when an uploaded document is not an accepted format."""

    def __init__(self, filename: str | None, reason: str):
        super().__init__(reason)
        self.filename = filename
        self.reason = reason

    def __str__(self) -> str:  # pragma: no cover - trivial
        if self.filename:
            return f"Unsupported document {self.filename!r}: {self.reason}"
        return f"Unsupported document: {self.reason}"


class ExtractionFailure(InterviewError):
    """Raised when text could not be extracted from an accepted document."""


class DoubleAnswerError(InterviewError):
    """Raised when an answer arrives for a question that is no longer open."""

    def __init__(self, question_index: int, expected_index: int):
        super().__init__(
            f"Question {question_index} is not open (expected {expected_index})"
        )
        self.question_index = question_index
        self.expected_index = expected_index


__all__ = [
    "InterviewError",
    "FieldValidationError",
    "UnsupportedDocumentError",
    "ExtractionFailure",
    "DoubleAnswerError",
]
