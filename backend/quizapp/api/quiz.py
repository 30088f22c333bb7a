"""Quiz authoring, browsing, submission, and result review routes.

Admins author quizzes; anyone may browse them without the answer key;
authenticated users submit answers and review their graded results.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from quizapp.api.deps import get_current_user, require_admin
from quizapp.core.errors import NotFoundError
from quizapp.db.models import Quiz, RoleEnum, User
from quizapp.db.session import get_db
from quizapp.schemas.common import SuccessResponse
from quizapp.schemas.quiz import (
    QuestionAdminRead,
    QuestionCreate,
    QuestionRead,
    QuizAdminRead,
    QuizCreate,
    QuizRead,
    QuizUpdate,
)
from quizapp.schemas.result import (
    QuizSubmit,
    ResultReview,
    ResultSnapshot,
    ResultSummary,
    ReviewQuestion,
    SubmissionRead,
)
from quizapp.services.grading import submit_quiz
from quizapp.services.results import (
    find_result,
    find_results_for_user,
    result_summaries,
)

logger = logging.getLogger(__name__)
router = APIRouter()


# ── helpers ───────────────────────────────────────────────────────────────────


def _questions_doc(questions: list[QuestionCreate]) -> list[dict]:
    return [
        {"question": q.question, "options": q.options, "correct_answer": q.correct_answer}
        for q in questions
    ]


def _quiz_read(quiz: Quiz) -> QuizRead:
    return QuizRead(
        id=quiz.id,
        title=quiz.title,
        description=quiz.description or "",
        time_limit=quiz.time_limit,
        questions=[
            QuestionRead(question=q["question"], options=q["options"])
            for q in quiz.questions
        ],
        created_at=quiz.created_at,
    )


def _quiz_admin_read(quiz: Quiz) -> QuizAdminRead:
    return QuizAdminRead(
        id=quiz.id,
        title=quiz.title,
        description=quiz.description or "",
        time_limit=quiz.time_limit,
        questions=[QuestionAdminRead(**q) for q in quiz.questions],
        created_by=quiz.created_by,
        created_at=quiz.created_at,
        updated_at=quiz.updated_at,
    )


def _get_quiz_or_404(db: Session, quiz_id: uuid.UUID) -> Quiz:
    quiz = db.get(Quiz, quiz_id)
    if quiz is None:
        raise NotFoundError("Quiz not found", details={"quiz_id": str(quiz_id)})
    return quiz


# ── Admin: create ────────────────────────────────────────────────────────────


@router.post("/create", response_model=QuizAdminRead, status_code=status.HTTP_201_CREATED)
def create_quiz(
    body: QuizCreate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Author a new quiz."""
    quiz = Quiz(
        title=body.title,
        description=body.description,
        time_limit=body.time_limit,
        questions=_questions_doc(body.questions),
        created_by=admin.id,
    )
    db.add(quiz)
    db.commit()
    db.refresh(quiz)
    logger.info("Quiz %s created by %s (%d questions)", quiz.id, admin.email, len(quiz.questions))
    return _quiz_admin_read(quiz)


# ── Browse (no answer key) ───────────────────────────────────────────────────


@router.get("/", response_model=list[QuizRead])
def list_quizzes(db: Session = Depends(get_db)):
    """All quizzes, newest first, with correct answers stripped."""
    quizzes = db.query(Quiz).order_by(Quiz.created_at.desc()).all()
    return [_quiz_read(q) for q in quizzes]


# ── Results of the current user ──────────────────────────────────────────────


@router.get("/myresults", response_model=list[ResultSummary])
def my_results(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """The caller's result history, newest first."""
    results = find_results_for_user(db, current_user.id, newest_first=True)
    return result_summaries(db, results)


@router.get("/results/user/{email}", response_model=list[ResultSummary])
def results_for_user(
    email: str,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_admin),
):
    """Another user's result history, looked up by email (admin only)."""
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        raise NotFoundError("Invalid user")
    results = find_results_for_user(db, user.id, newest_first=True)
    return result_summaries(db, results)


@router.get("/results/{result_id}", response_model=ResultReview)
def review_result(
    result_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """A graded result next to the quiz's answer key.

    Only the result's owner (or an admin) may review it. The review needs the
    quiz itself, so results of deleted quizzes cannot be reviewed.
    """
    result = find_result(db, result_id)
    if result.user_id != current_user.id and current_user.role != RoleEnum.ADMIN:
        raise NotFoundError("Result not found")

    quiz = _get_quiz_or_404(db, result.quiz_id)
    return ResultReview(
        id=quiz.id,
        title=quiz.title,
        description=quiz.description or "",
        time_limit=quiz.time_limit,
        questions=[
            ReviewQuestion(
                question=q["question"],
                options=q["options"],
                correct_answer=q["correct_answer"],
                user_answer=result.answer_for(index),
            )
            for index, q in enumerate(quiz.questions)
        ],
        result=ResultSnapshot(
            score=result.score,
            total=result.total,
            percentage=result.percentage,
            correct_count=result.correct_count,
            wrong_count=result.wrong_count,
            status=result.status.value,
            submitted_at=result.submitted_at,
        ),
    )


# ── Submission ───────────────────────────────────────────────────────────────


@router.post("/{quiz_id}/submit", response_model=SubmissionRead)
def submit(
    quiz_id: uuid.UUID,
    body: QuizSubmit,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Grade the caller's answers and store the result."""
    result = submit_quiz(db, quiz_id, current_user.id, body.answers)
    return SubmissionRead(
        score=result.score,
        total=result.total,
        percentage=result.percentage,
        correct_count=result.correct_count,
        wrong_count=result.wrong_count,
        result_id=result.id,
    )


# ── Admin: read / update / delete ────────────────────────────────────────────


@router.get("/admin/{quiz_id}", response_model=QuizAdminRead)
def get_quiz_admin(
    quiz_id: uuid.UUID,
    _admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """One quiz including its answer key."""
    return _quiz_admin_read(_get_quiz_or_404(db, quiz_id))


@router.get("/{quiz_id}", response_model=QuizRead)
def get_quiz(quiz_id: uuid.UUID, db: Session = Depends(get_db)):
    """One quiz with correct answers stripped."""
    return _quiz_read(_get_quiz_or_404(db, quiz_id))


@router.put("/{quiz_id}", response_model=QuizAdminRead)
def update_quiz(
    quiz_id: uuid.UUID,
    body: QuizUpdate,
    _admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Change the supplied fields of a quiz.

    Existing results keep the totals and answers they were graded with.
    """
    quiz = _get_quiz_or_404(db, quiz_id)
    if body.title is not None:
        quiz.title = body.title
    if body.description is not None:
        quiz.description = body.description
    if body.time_limit is not None:
        quiz.time_limit = body.time_limit
    if body.questions is not None:
        quiz.questions = _questions_doc(body.questions)
    db.commit()
    db.refresh(quiz)
    return _quiz_admin_read(quiz)


@router.delete("/{quiz_id}", response_model=SuccessResponse)
def delete_quiz(
    quiz_id: uuid.UUID,
    _admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Delete a quiz. Its results stay and show up as "Deleted Quiz"."""
    quiz = _get_quiz_or_404(db, quiz_id)
    db.delete(quiz)
    db.commit()
    logger.info("Quiz %s deleted", quiz_id)
    return SuccessResponse(message="Quiz deleted successfully")
