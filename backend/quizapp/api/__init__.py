"""API route package: imports all routers for main.py."""

from quizapp.api.health import router as health_router  # noqa: F401
from quizapp.api.auth import router as auth_router  # noqa: F401
from quizapp.api.quiz import router as quiz_router  # noqa: F401
from quizapp.api.results import router as results_router  # noqa: F401
from quizapp.api.dashboard import router as dashboard_router  # noqa: F401
