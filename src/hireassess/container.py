"\"\"\"Dependency injection container for the assessment service.\"\"\""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    BlueprintCompiler,
    ChoiceScorer,
    CodingScorer,
    ConstraintExtractor,
    HeuristicCodeJudge,
    KeyPointScorer,
    QuestionGenerator,
    ResponseEvaluator,
)
from .core.scorers import HeuristicJudgeConfig, KeyPointConfig
from .service import AssessmentService
from .storage import InMemoryAssessmentStore, JsonFileAssessmentStore


class AssessmentContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    extractor = providers.Singleton(ConstraintExtractor)
    compiler = providers.Singleton(BlueprintCompiler, extractor=extractor)
    generator = providers.Singleton(QuestionGenerator)

    code_judge = providers.Singleton(HeuristicCodeJudge)
    choice_scorer = providers.Singleton(ChoiceScorer)
    key_point_scorer = providers.Singleton(KeyPointScorer)
    coding_scorer = providers.Singleton(CodingScorer, judge=code_judge)

    scorers = providers.List(
        choice_scorer,
        key_point_scorer,
        coding_scorer,
    )

    evaluator = providers.Singleton(
        ResponseEvaluator,
        scorers=scorers,
        strength_threshold=config.strength_threshold,
        weakness_threshold=config.weakness_threshold,
    )

    store = providers.Singleton(InMemoryAssessmentStore)

    service = providers.Factory(
        AssessmentService,
        compiler=compiler,
        generator=generator,
        evaluator=evaluator,
        store=store,
    )


def create_container(*, settings: dict | None = None) -> AssessmentContainer:
    """Instantiate container with optional overrides."""

    container = AssessmentContainer()

    if not settings:
        return container

    core_settings = settings.get("core", {}) if isinstance(settings, dict) else {}
    if core_settings:
        container.config.override(core_settings)

    scorer_settings = settings.get("scorers", {}) if isinstance(settings, dict) else {}

    if "key_points" in scorer_settings:
        key_point_config = KeyPointConfig(**scorer_settings["key_points"])
        container.key_point_scorer.override(
            providers.Singleton(KeyPointScorer, config=key_point_config)
        )

    if "coding" in scorer_settings:
        judge_config = HeuristicJudgeConfig(**scorer_settings["coding"])
        container.code_judge.override(
            providers.Singleton(HeuristicCodeJudge, config=judge_config)
        )

    storage_settings = settings.get("storage", {}) if isinstance(settings, dict) else {}
    if storage_settings.get("path"):
        container.store.override(
            providers.Singleton(JsonFileAssessmentStore, path=storage_settings["path"])
        )

    return container
