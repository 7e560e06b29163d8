from __future__ import annotations

import pytest

import interviewengine.pdf_utils as pdf_utils
from interviewengine.errors import ExtractionFailure, UnsupportedDocumentError

PDF_BYTES = b"%PDF-1.4\n% Dummy"


class DummyDocument:
    def __enter__(self) -> "DummyDocument":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


@pytest.fixture
def stub_pymupdf(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    calls: list[dict] = []

    def fake_open(*, stream: bytes, filetype: str) -> DummyDocument:
        calls.append({"stream": stream, "filetype": filetype})
        return DummyDocument()

    def fake_to_markdown(document: DummyDocument) -> str:
        return (
            "# Jane Doe\n"
            "**Name:** Jane Doe\n"
            "- Email: `jane.doe@gmail.com`\n"
            "---\n"
            "Phone: 9876543210\n"
        )

    monkeypatch.setattr(pdf_utils.pymupdf, "open", fake_open)
    monkeypatch.setattr(pdf_utils.pymupdf4llm, "to_markdown", fake_to_markdown)
    return calls


def test_extract_text_strips_markup(stub_pymupdf: list[dict]) -> None:
    text = pdf_utils.extract_text(PDF_BYTES, "resume.pdf")

    assert stub_pymupdf == [{"stream": PDF_BYTES, "filetype": "pdf"}]
    assert text.splitlines() == [
        "Jane Doe",
        "Name: Jane Doe",
        "Email: jane.doe@gmail.com",
        "",
        "Phone: 9876543210",
    ]


def test_uppercase_extension_is_accepted(stub_pymupdf: list[dict]) -> None:
    assert "Phone: 9876543210" in pdf_utils.extract_text(PDF_BYTES, "RESUME.PDF")


@pytest.mark.parametrize("filename", ["resume.docx", "resume.txt", "resume"])
def test_non_pdf_extension_is_rejected(stub_pymupdf: list[dict], filename: str) -> None:
    with pytest.raises(UnsupportedDocumentError) as excinfo:
        pdf_utils.extract_text(PDF_BYTES, filename)

    assert excinfo.value.filename == filename
    assert stub_pymupdf == []


def test_non_pdf_content_is_rejected(stub_pymupdf: list[dict]) -> None:
    with pytest.raises(UnsupportedDocumentError):
        pdf_utils.extract_text(b"PK\x03\x04 zip archive")
    with pytest.raises(UnsupportedDocumentError):
        pdf_utils.extract_text(b"", "resume.pdf")


def test_unreadable_pdf_raises_extraction_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_open(**_: object) -> DummyDocument:
        raise RuntimeError("cannot open broken document")

    monkeypatch.setattr(pdf_utils.pymupdf, "open", broken_open)

    with pytest.raises(ExtractionFailure):
        pdf_utils.extract_text(PDF_BYTES, "resume.pdf")
