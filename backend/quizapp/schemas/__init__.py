"""Pydantic schemas: re‑exported for convenience."""

from quizapp.schemas.common import CamelModel, ErrorResponse, SuccessResponse  # noqa: F401
from quizapp.schemas.user import (  # noqa: F401
    Role,
    UserCreate,
    UserLogin,
    UserRead,
    AuthResponse,
)
from quizapp.schemas.quiz import (  # noqa: F401
    QuestionCreate,
    QuestionRead,
    QuestionAdminRead,
    QuizCreate,
    QuizUpdate,
    QuizRead,
    QuizAdminRead,
)
from quizapp.schemas.result import (  # noqa: F401
    QuizSubmit,
    SubmissionRead,
    ResultSummary,
    ResultRead,
    ResultReview,
)
from quizapp.schemas.dashboard import (  # noqa: F401
    HeatmapPoint,
    TrendPoint,
    QuizHighlight,
    DashboardSummary,
    DashboardRead,
)
