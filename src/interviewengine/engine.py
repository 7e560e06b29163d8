"\"\"\"Interview engine assembly and command surface.\"\"\""

from __future__ import annotations

import threading
from typing import Callable, Sequence

import structlog

from .adapters import CandidateStore, InMemoryStore
from .core import (
    CountdownTimer,
    ExtractedFields,
    FieldExtractor,
    FieldValidator,
    Scorer,
    Session,
    SessionState,
    SessionStateMachine,
)
from .errors import ExtractionFailure, UnsupportedDocumentError
from .pdf_utils import extract_text
from .questions import DEFAULT_QUESTIONS
from .schemas import Candidate, Message, Question

DocumentReader = Callable[[bytes, "str | None"], str]


class InterviewEngine:
    """One interview session behind a small command/snapshot surface.

    ``submit_text``, ``upload_document`` and ``tick`` are the only mutating
    entry points; they share one lock so transitions never overlap, whether
    they come from the input loop or the one-second ticker.
    """

    def __init__(
        self,
        *,
        questions: Sequence[Question] | None = None,
        candidate_store: CandidateStore | None = None,
        validator: FieldValidator | None = None,
        extractor: FieldExtractor | None = None,
        scorer: Scorer | None = None,
        timer: CountdownTimer | None = None,
        document_reader: DocumentReader | None = None,
        session: Session | None = None,
    ) -> None:
        self._session = session or Session()
        self._store = candidate_store or CandidateStore(InMemoryStore())
        validator = validator or FieldValidator()
        self._extractor = extractor or FieldExtractor(email_domain=validator.email_domain)
        self._read_document = document_reader or extract_text
        self._machine = SessionStateMachine(
            session=self._session,
            questions=questions or DEFAULT_QUESTIONS,
            timer=timer or CountdownTimer(),
            validator=validator,
            scorer=scorer,
            candidate_store=self._store,
        )
        self._lock = threading.Lock()
        self._logger = structlog.get_logger(__name__).bind(session_id=self._session.id)
        with self._lock:
            self._machine.start()

    @property
    def session_id(self) -> str:
        return self._session.id

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._machine.questions

    def current_messages(self) -> tuple[Message, ...]:
        with self._lock:
            return tuple(self._session.messages)

    def remaining_seconds(self) -> int:
        with self._lock:
            return self._machine.state().remaining_seconds

    def state(self) -> SessionState:
        with self._lock:
            return self._machine.state()

    def candidate(self) -> Candidate | None:
        with self._lock:
            record = self._session.candidate
            return record.model_copy(deep=True) if record is not None else None

    def candidate_list(self) -> list[Candidate]:
        return self._store.list_all()

    def submit_text(self, text: str) -> bool:
        with self._lock:
            return self._machine.submit_text(text)

    def upload_document(self, data: bytes, filename: str | None = None) -> ExtractedFields:
        """Pre-fill identity fields from a resume.

        Raises ``UnsupportedDocumentError`` for anything but a PDF; the
        session is left untouched in that case. Unreadable PDFs count as a
        document with no fields.
        """
        with self._lock:
            if not self._machine.phase.is_collecting:
                self._logger.info("document.ignored", phase=self._machine.phase.value)
                return ExtractedFields()

            try:
                text = self._read_document(data, filename)
            except UnsupportedDocumentError as exc:
                self._logger.warning("document.rejected", filename=filename, reason=exc.reason)
                raise
            except ExtractionFailure as exc:
                self._logger.warning("document.extraction_failed", filename=filename, error=str(exc))
                text = ""

            self._session.resume_text = text
            fields = self._extractor.extract(text)
            self._machine.apply_extracted(fields)
            return fields

    def tick(self) -> bool:
        with self._lock:
            return self._machine.tick()


__all__ = ["DocumentReader", "InterviewEngine"]
