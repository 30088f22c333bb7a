"""Read helpers over stored results and the quizzes they point at."""

import logging
import uuid
from collections.abc import Iterable, Mapping, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quizapp.core.errors import NotFoundError, PersistenceError
from quizapp.db.models import Quiz, Result
from quizapp.schemas.result import ResultSummary

logger = logging.getLogger(__name__)

# Shown wherever a result's quiz has since been deleted
DELETED_QUIZ_TITLE = "Deleted Quiz"


def find_results_for_user(
    db: Session, user_id: uuid.UUID, newest_first: bool = False
) -> list[Result]:
    """Every result the user has submitted, ordered by submission time."""
    order = Result.submitted_at.desc() if newest_first else Result.submitted_at.asc()
    try:
        return (
            db.query(Result)
            .filter(Result.user_id == user_id)
            .order_by(order)
            .all()
        )
    except SQLAlchemyError as exc:
        logger.exception("Failed to load results for user %s", user_id)
        raise PersistenceError("Failed to fetch results") from exc


def find_result(db: Session, result_id: uuid.UUID) -> Result:
    """Load one result or raise :class:`NotFoundError`."""
    try:
        result = db.get(Result, result_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to load result %s", result_id)
        raise PersistenceError("Failed to fetch result") from exc
    if result is None:
        raise NotFoundError("Result not found")
    return result


def resolve_quiz_titles(db: Session, quiz_ids: Iterable[uuid.UUID]) -> dict[uuid.UUID, str]:
    """Map quiz ids to titles in one query. Deleted quizzes are simply absent."""
    ids = set(quiz_ids)
    if not ids:
        return {}
    try:
        rows = db.query(Quiz.id, Quiz.title).filter(Quiz.id.in_(ids)).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to resolve quiz titles")
        raise PersistenceError("Failed to fetch quiz titles") from exc
    return {quiz_id: title for quiz_id, title in rows}


def title_for(titles: Mapping[uuid.UUID, str], quiz_id: uuid.UUID) -> str:
    return titles.get(quiz_id, DELETED_QUIZ_TITLE)


def result_summaries(db: Session, results: Sequence[Result]) -> list[ResultSummary]:
    """Result listing rows with resolved quiz titles."""
    titles = resolve_quiz_titles(db, (r.quiz_id for r in results))
    return [
        ResultSummary(
            result_id=r.id,
            quiz_id=r.quiz_id,
            quiz_title=title_for(titles, r.quiz_id),
            score=r.score,
            total=r.total,
            correct_count=r.correct_count,
            wrong_count=r.wrong_count,
            percentage=r.percentage,
            status=r.status.value,
            submitted_at=r.submitted_at,
        )
        for r in results
    ]
