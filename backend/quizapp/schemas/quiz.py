"""Quiz schemas."""

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, Field, model_validator

from quizapp.schemas.common import CamelModel


class QuestionCreate(CamelModel):
    """One authored question; ``correct_answer`` is an index into ``options``."""

    question: str = Field(min_length=1)
    options: list[str] = Field(min_length=2)
    correct_answer: int

    @model_validator(mode="after")
    def check_answer_in_range(self):
        if not 0 <= self.correct_answer < len(self.options):
            raise ValueError(
                f"correctAnswer must be between 0 and {len(self.options) - 1}"
            )
        return self


def _strip_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("title must not be blank")
    return value


Title = Annotated[str, AfterValidator(_strip_title)]


class QuizCreate(CamelModel):
    """POST /api/quiz/create"""

    title: Title
    description: str = ""
    time_limit: int = Field(ge=1)  # minutes
    questions: list[QuestionCreate] = Field(min_length=1)


class QuizUpdate(CamelModel):
    """PUT /api/quiz/{id}: only supplied fields are changed."""

    title: Title | None = None
    description: str | None = None
    time_limit: int | None = Field(default=None, ge=1)
    questions: list[QuestionCreate] | None = Field(default=None, min_length=1)


class QuestionRead(CamelModel):
    """Student-safe question: no correct answer."""

    question: str
    options: list[str]


class QuestionAdminRead(QuestionRead):
    correct_answer: int


class QuizRead(CamelModel):
    """Quiz as shown to students (answer key stripped)."""

    id: uuid.UUID
    title: str
    description: str = ""
    time_limit: int
    questions: list[QuestionRead]
    created_at: datetime


class QuizAdminRead(QuizRead):
    """Quiz with its answer key, for admins."""

    questions: list[QuestionAdminRead]
    created_by: uuid.UUID | None = None
    updated_at: datetime | None = None
