"\"\"\"Question variants tagged on ``type``.\"\"\""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

Difficulty = Literal["easy", "medium", "hard"]
QuestionType = Literal["MCQ", "short", "coding", "scenario"]

QUESTION_TYPES: tuple[str, ...] = ("MCQ", "short", "coding", "scenario")


class _QuestionBase(BaseModel):
    id: str
    skill: str
    difficulty: Difficulty
    time: int
    prompt: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class MCQQuestion(_QuestionBase):
    """Multiple choice question with a single correct option."""

    type: Literal["MCQ"] = "MCQ"
    options: list[str]
    answer: int


class ShortQuestion(_QuestionBase):
    """Short free-text answer checked against key points."""

    type: Literal["short"] = "short"
    key_points: list[str] = Field(default_factory=list)


class CodingTestCase(BaseModel):
    """Literal input/expected output pair for a coding question."""

    input: Any
    expected_output: Any

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CodingQuestion(_QuestionBase):
    """Coding task with starter code and reference cases."""

    type: Literal["coding"] = "coding"
    starter_code: str
    tests: list[CodingTestCase] = Field(default_factory=list)
    evaluator_hint: str = ""


class ScenarioQuestion(_QuestionBase):
    """Open scenario graded against a rubric."""

    type: Literal["scenario"] = "scenario"
    rubric: list[str] = Field(default_factory=list)


Question = Annotated[
    Union[MCQQuestion, ShortQuestion, CodingQuestion, ScenarioQuestion],
    Field(discriminator="type"),
]

_QUESTION_ADAPTER: TypeAdapter[Question] = TypeAdapter(Question)


def parse_question(raw: dict[str, Any]) -> Question:
    """Validate a raw question mapping into its typed variant."""
    return _QUESTION_ADAPTER.validate_python(raw)
