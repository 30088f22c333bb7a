"""Submission & result schemas."""

import uuid
from datetime import datetime
from typing import Any

from quizapp.schemas.common import CamelModel


class QuizSubmit(CamelModel):
    """POST /api/quiz/{id}/submit: one option index (or null) per question, in order."""

    # checked by services.grading.validate_answers
    answers: Any = None


class SubmissionRead(CamelModel):
    """Grading outcome returned right after a submission."""

    message: str = "Quiz submitted successfully"
    score: int
    total: int
    percentage: float
    correct_count: int
    wrong_count: int
    result_id: uuid.UUID


class ResultSummary(CamelModel):
    """One row of a result history listing."""

    result_id: uuid.UUID
    quiz_id: uuid.UUID | None = None
    quiz_title: str
    score: int
    total: int
    correct_count: int
    wrong_count: int
    percentage: float
    status: str
    submitted_at: datetime


class ResultRead(CamelModel):
    """A full stored result record."""

    id: uuid.UUID
    user_id: uuid.UUID
    quiz_id: uuid.UUID
    quiz_title: str
    score: int
    total: int
    correct_count: int
    wrong_count: int
    percentage: float
    status: str
    user_answers: dict[int, int | None]
    submitted_at: datetime


class ResultSnapshot(CamelModel):
    score: int
    total: int
    percentage: float
    correct_count: int
    wrong_count: int
    status: str
    submitted_at: datetime


class ReviewQuestion(CamelModel):
    """A quiz question next to what the student picked."""

    question: str
    options: list[str]
    correct_answer: int
    user_answer: int | None = None


class ResultReview(CamelModel):
    """GET /api/quiz/results/{id}: quiz with answer key plus the graded result."""

    id: uuid.UUID
    title: str
    description: str = ""
    time_limit: int
    questions: list[ReviewQuestion]
    result: ResultSnapshot
