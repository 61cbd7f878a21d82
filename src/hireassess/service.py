"\"\"\"Boundary operations over the assessment engine and its record store.\"\"\""

from __future__ import annotations

import secrets
import string
from typing import Any, Callable, Iterable, Mapping

import pendulum
import structlog

from .core import BlueprintCompiler, QuestionGenerator, ResponseEvaluator
from .schemas import Assessment, Blueprint, Report, SubmissionRecord
from .storage import AssessmentStore, InMemoryAssessmentStore

_ID_ALPHABET = string.ascii_lowercase + string.digits


class AssessmentError(Exception):
    """Base class for boundary operation failures."""


class InvalidInput(AssessmentError, ValueError):
    """Raised when a required top-level argument is missing or unusable."""


class NotFound(AssessmentError, KeyError):
    """Raised when a referenced assessment id is not in the store."""

    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(record_id)
        self.kind = kind
        self.record_id = record_id

    def __str__(self) -> str:
        return f"{self.kind} not found: {self.record_id!r}"


def default_test_id() -> str:
    """Return an opaque id shaped like ``T1a2b3c``."""
    return "T" + "".join(secrets.choice(_ID_ALPHABET) for _ in range(6))


def default_clock() -> str:
    return pendulum.now("UTC").to_iso8601_string()


class AssessmentService:
    """Create blueprints, generate assessments and score submissions."""

    def __init__(
        self,
        *,
        compiler: BlueprintCompiler,
        generator: QuestionGenerator,
        evaluator: ResponseEvaluator,
        store: AssessmentStore | None = None,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], str] | None = None,
    ) -> None:
        self._compiler = compiler
        self._generator = generator
        self._evaluator = evaluator
        self._store = store if store is not None else InMemoryAssessmentStore()
        self._id_factory = id_factory or default_test_id
        self._clock = clock or default_clock
        self._logger = structlog.get_logger(__name__)

    def create_blueprint(
        self,
        *,
        role: str | None = None,
        stack: Iterable[str] | None = None,
        experience: str | None = None,
        types: Iterable[str] | None = None,
        duration: int | None = None,
        notes: str | None = None,
    ) -> Blueprint:
        return self._compiler.compile(
            role=role,
            stack=stack,
            experience=experience,
            types=types,
            duration=duration,
            notes=notes,
        )

    def generate_test(self, blueprint: Blueprint | Mapping[str, Any] | None) -> Assessment:
        if blueprint is None:
            raise InvalidInput("Missing blueprint")
        resolved = self._coerce_blueprint(blueprint)
        questions = self._generator.generate(resolved)

        assessment = Assessment(
            id=self._id_factory(),
            blueprint=resolved,
            questions=questions,
            created_at=self._clock(),
        )
        self._store.put("tests", assessment.id, assessment.to_record())

        self._logger.info(
            "assessment.generated",
            test_id=assessment.id,
            question_count=len(questions),
            total_time=assessment.total_time,
            skills=sorted({question.skill for question in questions}),
        )
        return assessment

    def submit_answers(self, test_id: str, responses: Mapping[str, Any] | None) -> Report:
        assessment = self.fetch_test(test_id)
        report = self._evaluator.evaluate(assessment, responses or {})

        record = SubmissionRecord(report=report, submitted_at=self._clock())
        self._store.put("results", test_id, record.to_record())

        self._logger.info(
            "assessment.submitted",
            test_id=test_id,
            answered=len(responses or {}),
            overall_score=report.overall_score,
            weaknesses=report.weaknesses,
        )
        return report

    def fetch_test(self, test_id: str) -> Assessment:
        raw = self._store.get("tests", test_id)
        if raw is None:
            self._logger.warning("assessment.not_found", test_id=test_id, kind="test")
            raise NotFound("Test", test_id)
        return Assessment.model_validate(raw)

    def fetch_result(self, test_id: str) -> SubmissionRecord:
        raw = self._store.get("results", test_id)
        if raw is None:
            self._logger.warning("assessment.not_found", test_id=test_id, kind="result")
            raise NotFound("Result", test_id)
        return SubmissionRecord.model_validate(raw)

    @staticmethod
    def _coerce_blueprint(blueprint: Blueprint | Mapping[str, Any]) -> Blueprint:
        if isinstance(blueprint, Blueprint):
            return blueprint
        if not isinstance(blueprint, Mapping):
            raise InvalidInput("Blueprint must be a mapping")
        return BlueprintCompiler.restore(blueprint)
