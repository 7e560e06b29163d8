"\"\"\"Pydantic configuration schema for CLI YAML input.\"\"\""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from .question import Question


class ValidationConfig(BaseModel):
    email_domain: str | None = None


class ScorerConfig(BaseModel):
    summary: str | None = None
    seed: int | None = None


class StoreConfig(BaseModel):
    backend: Literal["memory", "sqlite"] = "memory"
    path: str | None = None


class AppConfig(BaseModel):
    questions: list[Question] | None = None
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        if self.questions:
            settings["questions"] = [q.model_dump(mode="json") for q in self.questions]
        validation = self.validation.model_dump(exclude_none=True)
        if validation:
            settings["validation"] = validation
        scorer = self.scorer.model_dump(exclude_none=True)
        if scorer:
            settings["scorer"] = scorer
        if self.store.backend != "memory" or self.store.path:
            settings["store"] = self.store.model_dump(exclude_none=True)
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
