"""Grading service for quiz submissions.

Every question is multiple choice: the answer key is an option index and a
submission is an ordered list holding one option index (or ``None``) per
question. Grading is an exact index comparison; there is no partial credit.

Submissions are lenient about length: a short answer list is padded with
``None`` (counted wrong) and entries past the last question are ignored.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quizapp.core.errors import InvalidPayloadError, NotFoundError, PersistenceError
from quizapp.db.models import Quiz, Result, ResultStatusEnum

logger = logging.getLogger(__name__)


@dataclass
class GradeOutcome:
    """Scores for one graded answer list."""

    score: int
    total: int
    correct_count: int
    wrong_count: int
    percentage: float
    user_answers: dict[int, int | None] = field(default_factory=dict)


# ── Validation ────────────────────────────────────────────────────────────────


def _is_option_index(value: Any) -> bool:
    # bool is an int subclass; True must not match answer key 1
    return isinstance(value, int) and not isinstance(value, bool)


def validate_answers(answers: Any) -> list[int | None]:
    """Check that *answers* is an ordered list of option indexes or ``None``.

    Raises:
        InvalidPayloadError: if *answers* is not a list/tuple, or holds
            anything other than ints and ``None``.
    """
    if not isinstance(answers, (list, tuple)):
        raise InvalidPayloadError("Answers must be an array")

    for position, value in enumerate(answers):
        if value is not None and not _is_option_index(value):
            raise InvalidPayloadError(
                "Each answer must be an option index or null",
                details={"index": position, "value": repr(value)},
            )
    return list(answers)


# ── Grading ──────────────────────────────────────────────────────────────────


def grade_answers(questions: Sequence[dict], answers: Sequence[int | None]) -> GradeOutcome:
    """Grade *answers* against the answer key embedded in *questions*.

    Args:
        questions: The quiz's ordered question documents; each carries a
            ``correct_answer`` option index.
        answers: Submitted option indexes, positionally aligned with
            *questions*. Missing trailing entries count as unanswered.

    Returns:
        A :class:`GradeOutcome`. ``percentage`` is left unrounded.
    """
    total = len(questions)
    if total == 0:
        # quizzes are authored with at least one question
        raise ValueError("cannot grade a quiz with no questions")

    correct = 0
    user_answers: dict[int, int | None] = {}
    for index, question in enumerate(questions):
        submitted = answers[index] if index < len(answers) else None
        user_answers[index] = submitted
        if _is_option_index(submitted) and submitted == question["correct_answer"]:
            correct += 1

    return GradeOutcome(
        score=correct,
        total=total,
        correct_count=correct,
        wrong_count=total - correct,
        percentage=(correct / total) * 100,
        user_answers=user_answers,
    )


# ── Submission ───────────────────────────────────────────────────────────────


def submit_quiz(
    db: Session,
    quiz_id: uuid.UUID,
    user_id: uuid.UUID,
    answers: Any,
) -> Result:
    """Grade a submission and store it as a new, immutable :class:`Result`.

    Nothing is written unless grading succeeds. Submissions are not
    deduplicated: submitting twice stores two results.

    Raises:
        InvalidPayloadError: malformed *answers*.
        NotFoundError: no quiz with *quiz_id*.
        PersistenceError: the database rejected the read or the insert.
    """
    answers = validate_answers(answers)

    try:
        quiz = db.get(Quiz, quiz_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to load quiz %s for grading", quiz_id)
        raise PersistenceError("Error submitting quiz") from exc
    if quiz is None:
        raise NotFoundError("Quiz not found", details={"quiz_id": str(quiz_id)})

    outcome = grade_answers(quiz.questions, answers)

    result = Result(
        user_id=user_id,
        quiz_id=quiz.id,
        score=outcome.score,
        total=outcome.total,
        correct_count=outcome.correct_count,
        wrong_count=outcome.wrong_count,
        percentage=outcome.percentage,
        status=ResultStatusEnum.COMPLETED,
        # JSON object keys are strings; order is preserved
        user_answers={str(i): a for i, a in outcome.user_answers.items()},
    )
    try:
        db.add(result)
        db.commit()
        db.refresh(result)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to store result for quiz %s", quiz_id)
        raise PersistenceError("Error submitting quiz") from exc

    logger.info(
        "Graded quiz %s for user %s: %d/%d (%.2f%%)",
        quiz.id, user_id, outcome.score, outcome.total, outcome.percentage,
    )
    return result
