"\"\"\"Identity field extraction from resume text.\"\"\""

from __future__ import annotations

import re
from dataclasses import dataclass

from .validators import DEFAULT_EMAIL_DOMAIN

_NAME_PATTERN = re.compile(r"Name[:\s]+([A-Za-z \t]+)", re.IGNORECASE)
_PHONE_PATTERN = re.compile(r"\b[0-9]{10}\b", re.ASCII)


@dataclass(frozen=True, slots=True)
class ExtractedFields:
    """Identity fields guessed from a document. Empty string when absent."""

    name: str = ""
    email: str = ""
    phone: str = ""

    def is_empty(self) -> bool:
        return not (self.name or self.email or self.phone)


class FieldExtractor:
    """Pattern-based guesser for name, email and phone. First match wins."""

    def __init__(self, *, email_domain: str = DEFAULT_EMAIL_DOMAIN) -> None:
        self._email = re.compile(rf"[a-zA-Z0-9._%+-]+@{re.escape(email_domain)}\b", re.ASCII)

    def extract(self, raw_text: str | None) -> ExtractedFields:
        if not raw_text:
            return ExtractedFields()

        name_match = _NAME_PATTERN.search(raw_text)
        email_match = self._email.search(raw_text)
        phone_match = _PHONE_PATTERN.search(raw_text)

        return ExtractedFields(
            name=_clean_name(name_match.group(1)) if name_match else "",
            email=email_match.group(0) if email_match else "",
            phone=phone_match.group(0) if phone_match else "",
        )


def _clean_name(value: str) -> str:
    return " ".join(value.split())


def extract_fields(raw_text: str | None) -> ExtractedFields:
    return FieldExtractor().extract(raw_text)


__all__ = ["ExtractedFields", "FieldExtractor", "extract_fields"]
