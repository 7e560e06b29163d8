from __future__ import annotations

import pytest

from interviewengine.adapters import CandidateStore, InMemoryStore
from interviewengine.core import PlaceholderScorer, ScorerConfig, SessionPhase
from interviewengine.engine import InterviewEngine
from interviewengine.errors import ExtractionFailure, UnsupportedDocumentError
from interviewengine.questions import DEFAULT_QUESTIONS
from interviewengine.schemas import Sender

RESUME_TEXT = "Name: Jane Doe\njane.doe@gmail.com\n9876543210\n"


class StubReader:
    def __init__(self, text: str = RESUME_TEXT, error: Exception | None = None) -> None:
        self._text = text
        self._error = error
        self.calls: list[tuple[bytes, str | None]] = []

    def __call__(self, data: bytes, filename: str | None) -> str:
        self.calls.append((data, filename))
        if self._error is not None:
            raise self._error
        return self._text


def build_engine(reader: StubReader | None = None) -> tuple[InterviewEngine, CandidateStore]:
    store = CandidateStore(InMemoryStore())
    engine = InterviewEngine(
        candidate_store=store,
        scorer=PlaceholderScorer(config=ScorerConfig(seed=1)),
        document_reader=reader or StubReader(),
    )
    return engine, store


def system_texts(engine: InterviewEngine) -> list[str]:
    return [m.text for m in engine.current_messages() if m.sender is Sender.SYSTEM]


def test_upload_prefills_fields_and_asks_first_question() -> None:
    reader = StubReader()
    engine, _ = build_engine(reader)

    fields = engine.upload_document(b"%PDF-1.4", "resume.pdf")

    assert (fields.name, fields.email, fields.phone) == ("Jane Doe", "jane.doe@gmail.com", "9876543210")
    assert reader.calls == [(b"%PDF-1.4", "resume.pdf")]
    state = engine.state()
    assert state.phase is SessionPhase.ASKING_QUESTION
    assert state.current_question_index == 0
    assert engine.remaining_seconds() == DEFAULT_QUESTIONS[0].time_limit_seconds
    texts = system_texts(engine)
    assert texts[-1] == DEFAULT_QUESTIONS[0].text
    assert not any("email" in text.lower() or "phone" in text.lower() for text in texts)


def test_invalid_email_is_rejected_until_valid() -> None:
    engine, _ = build_engine()

    assert engine.submit_text("Jane") is True
    assert engine.submit_text("jane@yahoo.com") is False
    assert engine.state().phase is SessionPhase.COLLECTING_EMAIL
    assert engine.submit_text("jane@gmail.com") is True
    assert engine.state().phase is SessionPhase.COLLECTING_PHONE


def test_question_times_out_after_its_limit() -> None:
    engine, _ = build_engine()
    for text in ("Jane", "jane@gmail.com", "9876543210"):
        engine.submit_text(text)
    assert engine.remaining_seconds() == 20

    for _ in range(20):
        engine.tick()

    state = engine.state()
    assert state.current_question_index == 1
    assert engine.remaining_seconds() == DEFAULT_QUESTIONS[1].time_limit_seconds
    assert engine.candidate().answers == [""]
    assert system_texts(engine)[-1] == DEFAULT_QUESTIONS[1].text


def test_full_session_persists_one_scored_record() -> None:
    engine, store = build_engine()
    engine.upload_document(b"%PDF-1.4", "resume.pdf")

    for idx in range(len(DEFAULT_QUESTIONS)):
        assert engine.submit_text(f"answer {idx + 1}") is True

    state = engine.state()
    assert state.phase is SessionPhase.FINISHED
    assert state.current_question_index == len(DEFAULT_QUESTIONS) + 1
    assert engine.remaining_seconds() == 0

    records = engine.candidate_list()
    assert records == store.list_all()
    assert len(records) == 1
    record = records[0]
    assert record.id == engine.session_id
    assert record.name == "Jane Doe"
    assert record.answers == [f"answer {idx + 1}" for idx in range(6)]
    assert 0 <= record.score <= 100
    assert record.summary

    assert engine.submit_text("one more") is False
    assert engine.tick() is False


def test_unsupported_document_is_declined_without_state_change() -> None:
    reader = StubReader(error=UnsupportedDocumentError("resume.docx", "Only PDF files are supported."))
    engine, _ = build_engine(reader)
    before = engine.current_messages()

    with pytest.raises(UnsupportedDocumentError):
        engine.upload_document(b"PK", "resume.docx")

    assert engine.current_messages() == before
    assert engine.state().phase is SessionPhase.COLLECTING_NAME

    engine.submit_text("Jane")
    assert engine.state().phase is SessionPhase.COLLECTING_EMAIL


def test_extraction_failure_falls_back_to_manual_collection() -> None:
    engine, _ = build_engine(StubReader(error=ExtractionFailure("broken")))

    fields = engine.upload_document(b"%PDF-1.4", "resume.pdf")

    assert fields.is_empty()
    assert engine.state().phase is SessionPhase.COLLECTING_NAME
    assert system_texts(engine)[-2].startswith("No details could be read")
    assert system_texts(engine)[-1] == "Please enter your full name:"


def test_upload_after_questions_started_is_ignored() -> None:
    reader = StubReader()
    engine, _ = build_engine(reader)
    engine.upload_document(b"%PDF-1.4", "resume.pdf")
    message_count = len(engine.current_messages())

    fields = engine.upload_document(b"%PDF-1.4", "resume.pdf")

    assert fields.is_empty()
    assert len(reader.calls) == 1
    assert len(engine.current_messages()) == message_count


def test_snapshots_are_read_only_copies() -> None:
    engine, _ = build_engine()
    engine.upload_document(b"%PDF-1.4", "resume.pdf")
    engine.submit_text("first answer")

    snapshot = engine.candidate()
    snapshot.answers.append("tampered")

    assert engine.candidate().answers == ["first answer"]
    assert isinstance(engine.current_messages(), tuple)
