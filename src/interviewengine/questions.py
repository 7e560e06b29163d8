"\"\"\"Default question bank.\"\"\""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from .schemas import Question, QuestionLevel

DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question(
        level=QuestionLevel.EASY,
        time_limit_seconds=20,
        text="Explain the difference between let, const, and var in JS.",
    ),
    Question(
        level=QuestionLevel.EASY,
        time_limit_seconds=20,
        text="What is JSX in React?",
    ),
    Question(
        level=QuestionLevel.MEDIUM,
        time_limit_seconds=60,
        text="Explain the lifecycle methods of a React component.",
    ),
    Question(
        level=QuestionLevel.MEDIUM,
        time_limit_seconds=60,
        text="How does Node.js handle asynchronous operations?",
    ),
    Question(
        level=QuestionLevel.HARD,
        time_limit_seconds=120,
        text="Design a REST API for a todo app using Node.js and Express.",
    ),
    Question(
        level=QuestionLevel.HARD,
        time_limit_seconds=120,
        text="Explain state management strategies in React for large applications.",
    ),
)


def build_question_bank(
    raw: Iterable[Question | dict[str, Any]] | None = None,
) -> tuple[Question, ...]:
    """Return an immutable question bank, defaulting to ``DEFAULT_QUESTIONS``."""

    if raw is None:
        return DEFAULT_QUESTIONS
    bank = tuple(
        item if isinstance(item, Question) else Question.model_validate(item)
        for item in raw
    )
    if not bank:
        raise ValueError("Question bank must contain at least one question.")
    return bank


def total_time_limit(questions: Sequence[Question]) -> int:
    return sum(question.time_limit_seconds for question in questions)


__all__ = ["DEFAULT_QUESTIONS", "build_question_bank", "total_time_limit"]
