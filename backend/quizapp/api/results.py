"""Result history routes."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from quizapp.api.deps import get_current_user
from quizapp.core.errors import NotFoundError
from quizapp.db.models import RoleEnum, User
from quizapp.db.session import get_db
from quizapp.schemas.result import ResultRead, ResultSummary
from quizapp.services.results import (
    find_result,
    find_results_for_user,
    resolve_quiz_titles,
    result_summaries,
    title_for,
)

router = APIRouter()


@router.get("/mine", response_model=list[ResultSummary])
def list_my_results(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """All of the caller's results, newest first."""
    results = find_results_for_user(db, current_user.id, newest_first=True)
    return result_summaries(db, results)


@router.get("/{result_id}", response_model=ResultRead)
def get_result(
    result_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """A single stored result, including the submitted answers."""
    result = find_result(db, result_id)
    if result.user_id != current_user.id and current_user.role != RoleEnum.ADMIN:
        raise NotFoundError("Result not found")

    titles = resolve_quiz_titles(db, [result.quiz_id])
    return ResultRead(
        id=result.id,
        user_id=result.user_id,
        quiz_id=result.quiz_id,
        quiz_title=title_for(titles, result.quiz_id),
        score=result.score,
        total=result.total,
        correct_count=result.correct_count,
        wrong_count=result.wrong_count,
        percentage=result.percentage,
        status=result.status.value,
        user_answers=result.answers_by_index(),
        submitted_at=result.submitted_at,
    )
