"""Student analytics dashboard route."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from quizapp.api.deps import require_student
from quizapp.db.models import User
from quizapp.db.session import get_db
from quizapp.schemas.dashboard import DashboardRead
from quizapp.services.analytics import get_dashboard

router = APIRouter()


@router.get("/student", response_model=DashboardRead)
def student_dashboard(
    current_user: User = Depends(require_student),
    db: Session = Depends(get_db),
):
    """Heatmap, daily trend and summary over the student's whole result history."""
    return get_dashboard(db, current_user.id)
