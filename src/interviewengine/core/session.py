"\"\"\"Interview session state machine.\"\"\""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Sequence

import pendulum
import structlog

from ..errors import DoubleAnswerError, FieldValidationError
from ..schemas import Candidate, Message, Question
from .extractor import ExtractedFields
from .scoring import PlaceholderScorer
from .timer import CountdownTimer
from .validators import DEFAULT_EMAIL_DOMAIN, FieldValidator

if TYPE_CHECKING:
    from ..adapters.candidate_store import CandidateStore
    from . import Scorer

FINISHED_MESSAGE = "Interview finished!"
UPLOAD_PARSED_MESSAGE = "Resume uploaded & parsed successfully!"
UPLOAD_EMPTY_MESSAGE = "No details could be read from the resume. Please type them instead."


class SessionPhase(str, Enum):
    COLLECTING_NAME = "collecting_name"
    COLLECTING_EMAIL = "collecting_email"
    COLLECTING_PHONE = "collecting_phone"
    ASKING_QUESTION = "asking_question"
    FINISHED = "finished"

    @property
    def is_collecting(self) -> bool:
        return self in _COLLECTION_ORDER


_COLLECTION_ORDER: tuple[SessionPhase, ...] = (
    SessionPhase.COLLECTING_NAME,
    SessionPhase.COLLECTING_EMAIL,
    SessionPhase.COLLECTING_PHONE,
)


@dataclass(slots=True, frozen=True)
class SessionState:
    """Read-only snapshot of the machine for the presentation layer."""

    phase: SessionPhase
    current_question_index: int
    remaining_seconds: int


def new_session_id() -> str:
    return uuid.uuid4().hex[:8]


@dataclass
class Session:
    """Per-candidate mutable state: identity fields, transcript and record."""

    id: str = field(default_factory=new_session_id)
    name: str = ""
    email: str = ""
    phone: str = ""
    resume_text: str = ""
    messages: list[Message] = field(default_factory=list)
    candidate: Candidate | None = None

    def record_answer(self, index: int, text: str) -> tuple[Candidate, bool]:
        """Append the answer for ``index``; return the record and whether it was created."""

        created = self.candidate is None
        expected = 0 if created else len(self.candidate.answers)
        if index != expected:
            raise DoubleAnswerError(index, expected)
        if self.candidate is None:
            self.candidate = Candidate(
                id=self.id,
                name=self.name,
                email=self.email,
                phone=self.phone,
            )
        self.candidate.answers.append(text)
        return self.candidate, created


class SessionStateMachine:
    """Sequences identity collection and timed questions for one session.

    Transitions are not reentrant; callers serialize ``submit_text``,
    ``apply_extracted`` and ``tick``.
    """

    def __init__(
        self,
        *,
        session: Session,
        questions: Sequence[Question],
        timer: CountdownTimer | None = None,
        validator: FieldValidator | None = None,
        scorer: "Scorer | None" = None,
        candidate_store: "CandidateStore | None" = None,
    ) -> None:
        if not questions:
            raise ValueError("At least one question is required.")
        self._session = session
        self._questions = tuple(questions)
        self._timer = timer or CountdownTimer()
        self._validator = validator or FieldValidator()
        self._scorer = scorer or PlaceholderScorer()
        self._store = candidate_store
        self._phase = SessionPhase.COLLECTING_NAME
        self._index = 0
        self._started = False
        self._logger = structlog.get_logger(__name__).bind(session_id=session.id)

    @property
    def session(self) -> Session:
        return self._session

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    def state(self) -> SessionState:
        return SessionState(
            phase=self._phase,
            current_question_index=self._index,
            remaining_seconds=self._timer.remaining,
        )

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self._logger.info("session.started", questions=len(self._questions))
        self._advance_collection(force_prompt=True)

    def submit_text(self, text: str) -> bool:
        """Route typed input to field collection or the open question."""
        if self._phase is SessionPhase.FINISHED or not text.strip():
            return False
        if self._phase is SessionPhase.ASKING_QUESTION:
            return self.submit_answer(text)

        self._session.messages.append(Message.candidate(text))
        try:
            self._collect(self._phase, text.strip())
        except FieldValidationError as exc:
            self._logger.info("session.field_rejected", field=exc.field)
            self._emit(exc.message)
            self._emit(self._prompt_for(self._phase))
            return False
        self._advance_collection()
        return True

    def apply_extracted(self, fields: ExtractedFields) -> bool:
        """Pre-fill identity fields from a parsed resume.

        Only fields not yet collected are filled, and only with values that
        pass validation. Returns True when any field was taken.
        """
        if not self._phase.is_collecting:
            self._logger.info("session.extract_ignored", phase=self._phase.value)
            return False

        taken: list[str] = []
        if not self._field_ready(SessionPhase.COLLECTING_NAME) and fields.name.strip():
            self._session.name = fields.name.strip()
            taken.append("name")
        if not self._field_ready(SessionPhase.COLLECTING_EMAIL) and self._validator.is_valid_email(fields.email):
            self._session.email = fields.email
            taken.append("email")
        if not self._field_ready(SessionPhase.COLLECTING_PHONE) and self._validator.is_valid_phone(fields.phone):
            self._session.phone = fields.phone
            taken.append("phone")

        self._logger.info("session.fields_extracted", fields=taken)
        self._emit(UPLOAD_PARSED_MESSAGE if taken else UPLOAD_EMPTY_MESSAGE)
        self._advance_collection(force_prompt=True)
        return bool(taken)

    def submit_answer(self, text: str) -> bool:
        if self._phase is not SessionPhase.ASKING_QUESTION:
            return False
        self._session.messages.append(Message.candidate(text))
        return self._resolve_question(self._index, text, source="candidate")

    def tick(self) -> bool:
        if self._phase is SessionPhase.FINISHED:
            return False
        return self._timer.tick()

    def _collect(self, phase: SessionPhase, value: str) -> None:
        if phase is SessionPhase.COLLECTING_NAME:
            self._session.name = value
        elif phase is SessionPhase.COLLECTING_EMAIL:
            if not self._validator.is_valid_email(value):
                raise FieldValidationError("email", value, self._email_error())
            self._session.email = value
        elif phase is SessionPhase.COLLECTING_PHONE:
            if not self._validator.is_valid_phone(value):
                raise FieldValidationError("phone", value, "Enter valid 10-digit phone!")
            self._session.phone = value

    def _field_ready(self, phase: SessionPhase) -> bool:
        if phase is SessionPhase.COLLECTING_NAME:
            return bool(self._session.name)
        if phase is SessionPhase.COLLECTING_EMAIL:
            return self._validator.is_valid_email(self._session.email)
        return self._validator.is_valid_phone(self._session.phone)

    def _prompt_for(self, phase: SessionPhase) -> str:
        if phase is SessionPhase.COLLECTING_NAME:
            return "Please enter your full name:"
        if phase is SessionPhase.COLLECTING_EMAIL:
            domain = self._validator.email_domain
            if domain == DEFAULT_EMAIL_DOMAIN:
                return "Please enter a valid Gmail address:"
            return f"Please enter a valid @{domain} email address:"
        return "Please enter your 10-digit phone number:"

    def _email_error(self) -> str:
        domain = self._validator.email_domain
        if domain == DEFAULT_EMAIL_DOMAIN:
            return "Enter valid Gmail!"
        return f"Enter valid @{domain} email!"

    def _advance_collection(self, *, force_prompt: bool = False) -> None:
        for phase in _COLLECTION_ORDER:
            if self._field_ready(phase):
                continue
            if phase is not self._phase or force_prompt:
                self._set_phase(phase)
                self._emit(self._prompt_for(phase))
            return
        self._ask_question(0)

    def _ask_question(self, index: int) -> None:
        question = self._questions[index]
        self._set_phase(SessionPhase.ASKING_QUESTION)
        self._index = index
        self._emit(question.text)
        self._timer.arm(
            question.time_limit_seconds,
            lambda: self._resolve_question(index, "", source="timeout"),
        )
        self._logger.info(
            "session.question_asked",
            index=index,
            level=question.level.value,
            time_limit=question.time_limit_seconds,
        )

    def _resolve_question(self, index: int, text: str, *, source: str) -> bool:
        if self._phase is not SessionPhase.ASKING_QUESTION or index != self._index:
            self._logger.debug("session.stale_answer", index=index, source=source)
            return False
        try:
            candidate, created = self._session.record_answer(index, text)
        except DoubleAnswerError as exc:
            self._logger.debug(
                "session.double_answer",
                index=exc.question_index,
                expected=exc.expected_index,
                source=source,
            )
            return False

        self._timer.disarm()
        self._logger.info("session.answer_recorded", index=index, source=source)
        if created:
            self._persist(candidate)

        if index + 1 < len(self._questions):
            self._ask_question(index + 1)
        else:
            self._finish(candidate)
        return True

    def _finish(self, candidate: Candidate) -> None:
        self._timer.disarm()
        self._set_phase(SessionPhase.FINISHED)
        self._index = len(self._questions) + 1

        result = self._scorer.score(candidate)
        candidate.score = result.score
        candidate.summary = result.summary
        candidate.completed_at = pendulum.now("UTC").to_iso8601_string()

        self._emit(FINISHED_MESSAGE)
        self._logger.info("session.finished", score=result.score, answers=len(candidate.answers))
        self._persist(candidate)

    def _persist(self, candidate: Candidate) -> None:
        if self._store is not None:
            self._store.persist(candidate)

    def _set_phase(self, phase: SessionPhase) -> None:
        if phase is self._phase:
            return
        self._logger.debug("session.phase_changed", previous=self._phase.value, phase=phase.value)
        self._phase = phase

    def _emit(self, text: str) -> None:
        self._session.messages.append(Message.system(text))


__all__ = [
    "FINISHED_MESSAGE",
    "Session",
    "SessionPhase",
    "SessionState",
    "SessionStateMachine",
    "new_session_id",
]
