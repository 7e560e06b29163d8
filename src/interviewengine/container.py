"\"\"\"Dependency injection container for the interview engine.\"\"\""

from __future__ import annotations

from dependency_injector import containers, providers

from .adapters import CandidateStore, InMemoryStore, SQLiteStore
from .core import (
    CountdownTimer,
    FieldExtractor,
    FieldValidator,
    PlaceholderScorer,
    ScorerConfig,
    ValidatorConfig,
)
from .engine import InterviewEngine
from .questions import build_question_bank


class InterviewContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    question_bank = providers.Singleton(
        build_question_bank,
        config.questions,
    )

    validator = providers.Singleton(FieldValidator)
    field_extractor = providers.Singleton(FieldExtractor)
    scorer = providers.Singleton(PlaceholderScorer)

    durable_store = providers.Singleton(InMemoryStore)
    candidate_store = providers.Singleton(CandidateStore, store=durable_store)

    # Session-scoped: every engine gets its own timer.
    timer = providers.Factory(CountdownTimer)

    engine = providers.Factory(
        InterviewEngine,
        questions=question_bank,
        candidate_store=candidate_store,
        validator=validator,
        extractor=field_extractor,
        scorer=scorer,
        timer=timer,
    )


def create_container(*, settings: dict | None = None) -> InterviewContainer:
    """Instantiate container with optional overrides."""

    container = InterviewContainer()

    if not settings:
        return container

    if settings.get("questions"):
        container.config.override({"questions": settings["questions"]})

    validation_settings = settings.get("validation", {}) if isinstance(settings, dict) else {}
    if validation_settings:
        validator_config = ValidatorConfig(**validation_settings)
        container.validator.override(
            providers.Singleton(FieldValidator, config=validator_config)
        )
        container.field_extractor.override(
            providers.Singleton(FieldExtractor, email_domain=validator_config.email_domain)
        )

    scorer_settings = settings.get("scorer", {}) if isinstance(settings, dict) else {}
    if scorer_settings:
        scorer_config = ScorerConfig(**scorer_settings)
        container.scorer.override(
            providers.Singleton(PlaceholderScorer, config=scorer_config)
        )

    store_settings = settings.get("store", {}) if isinstance(settings, dict) else {}
    if store_settings.get("backend") == "sqlite":
        path = store_settings.get("path")
        if not path:
            raise ValueError("The sqlite store backend requires a 'path'.")
        container.durable_store.override(providers.Singleton(SQLiteStore, path=path))

    return container
