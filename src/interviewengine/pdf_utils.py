"""Utilities for extracting plain text from uploaded PDF resumes."""

from __future__ import annotations

import re
from pathlib import PurePath

import pymupdf
import pymupdf4llm

from .errors import ExtractionFailure, UnsupportedDocumentError

PDF_SIGNATURE = b"%PDF-"
ACCEPTED_SUFFIX = ".pdf"

_MARKUP_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^#{1,6}\s+"),  # headings
    re.compile(r"^\s*[-*]\s+"),  # bullets
    re.compile(r"\*\*|`"),  # emphasis / code
    re.compile(r"^-{3,}$"),  # rules
)


def ensure_pdf(data: bytes, filename: str | None = None) -> None:
    """Raise ``UnsupportedDocumentError`` unless ``data`` looks like a PDF.

    When a filename is given its extension must be ``.pdf``; the payload must
    always start with the PDF signature.
    """

    if filename is not None and PurePath(filename).suffix.lower() != ACCEPTED_SUFFIX:
        raise UnsupportedDocumentError(filename, "Only PDF files are supported.")
    if not data or data.lstrip()[: len(PDF_SIGNATURE)] != PDF_SIGNATURE:
        raise UnsupportedDocumentError(filename, "File content is not a PDF document.")


def extract_text(data: bytes, filename: str | None = None) -> str:
    """Return the plain text of a PDF payload with markdown markup removed.

    Parameters
    ----------
    data:
        Raw bytes of the uploaded file.
    filename:
        Optional original file name, used for the extension check.
    """

    ensure_pdf(data, filename)
    try:
        with pymupdf.open(stream=data, filetype="pdf") as document:
            markdown = pymupdf4llm.to_markdown(document)
    except Exception as exc:  # noqa: BLE001 - pymupdf raises several error types
        raise ExtractionFailure(f"Could not read PDF: {exc}") from exc

    return _strip_markup(markdown)


def _strip_markup(markdown: str) -> str:
    cleaned_lines: list[str] = []
    for line in markdown.splitlines():
        for pattern in _MARKUP_PATTERNS:
            line = pattern.sub("", line)
        cleaned_lines.append(line.rstrip())
    return "\n".join(cleaned_lines).strip()


__all__ = ["ensure_pdf", "extract_text"]
