"""Student dashboard schemas."""

from quizapp.schemas.common import CamelModel


class HeatmapPoint(CamelModel):
    """Number of submissions on one calendar day."""

    date: str  # YYYY-MM-DD
    count: int


class TrendPoint(CamelModel):
    """Average percentage across one calendar day's submissions."""

    date: str  # YYYY-MM-DD
    percentage: float
    count: int


class QuizHighlight(CamelModel):
    quiz_title: str
    percentage: float


class DashboardSummary(CamelModel):
    total_quizzes: int = 0
    avg_percentage: float = 0
    best_quiz: QuizHighlight | None = None
    worst_quiz: QuizHighlight | None = None


class DashboardRead(CamelModel):
    """GET /api/dashboard/student"""

    heatmap: list[HeatmapPoint] = []
    trend: list[TrendPoint] = []
    summary: DashboardSummary = DashboardSummary()
