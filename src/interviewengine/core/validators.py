"\"\"\"Format predicates for identity fields.\"\"\""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_EMAIL_DOMAIN = "gmail.com"

_PHONE_PATTERN = re.compile(r"[0-9]{10}")


def email_pattern(domain: str = DEFAULT_EMAIL_DOMAIN) -> re.Pattern[str]:
    return re.compile(rf"[a-zA-Z0-9._%+-]+@{re.escape(domain)}", re.ASCII)


@dataclass
class ValidatorConfig:
    """Configuration for identity field validation."""

    email_domain: str = DEFAULT_EMAIL_DOMAIN


class FieldValidator:
    """Strict placeholder checks: one email domain, ten-digit phones."""

    def __init__(self, *, config: ValidatorConfig | None = None) -> None:
        self._config = config or ValidatorConfig()
        self._email = email_pattern(self._config.email_domain)

    @property
    def email_domain(self) -> str:
        return self._config.email_domain

    def is_valid_email(self, value: str) -> bool:
        return bool(self._email.fullmatch(value or ""))

    def is_valid_phone(self, value: str) -> bool:
        return bool(_PHONE_PATTERN.fullmatch(value or ""))


_DEFAULT = FieldValidator()


def is_valid_email(value: str) -> bool:
    return _DEFAULT.is_valid_email(value)


def is_valid_phone(value: str) -> bool:
    return _DEFAULT.is_valid_phone(value)


__all__ = [
    "DEFAULT_EMAIL_DOMAIN",
    "FieldValidator",
    "ValidatorConfig",
    "is_valid_email",
    "is_valid_phone",
]
