"""Student dashboard analytics.

Everything is derived from the student's stored results on each request;
nothing is cached or maintained incrementally.

  - summary  → count, mean percentage, best and worst quiz
  - trend    → mean percentage per calendar day
  - heatmap  → submissions per calendar day

Days are UTC calendar dates of ``submitted_at`` in ``YYYY-MM-DD`` form.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from quizapp.db.models import Result
from quizapp.schemas.dashboard import (
    DashboardRead,
    DashboardSummary,
    HeatmapPoint,
    QuizHighlight,
    TrendPoint,
)
from quizapp.services.results import (
    find_results_for_user,
    resolve_quiz_titles,
    title_for,
)

logger = logging.getLogger(__name__)


def _day(ts: datetime) -> str:
    """UTC calendar date of *ts*; naive timestamps are taken to be UTC already."""
    if ts.tzinfo is not None:
        ts = ts.astimezone(timezone.utc)
    return ts.strftime("%Y-%m-%d")


def _highlight(result: Result, titles: Mapping[uuid.UUID, str]) -> QuizHighlight:
    return QuizHighlight(
        quiz_title=title_for(titles, result.quiz_id),
        percentage=result.percentage,
    )


def build_dashboard(
    results: Sequence[Result],
    titles: Mapping[uuid.UUID, str],
) -> DashboardRead:
    """Aggregate *results* (oldest first) into the dashboard payload.

    Ties for best/worst go to the earliest result in *results*.
    """
    if not results:
        return DashboardRead()

    count = len(results)
    average = sum(r.percentage for r in results) / count
    best = max(results, key=lambda r: r.percentage)
    worst = min(results, key=lambda r: r.percentage)

    by_day: dict[str, list[float]] = {}
    for r in results:
        by_day.setdefault(_day(r.submitted_at), []).append(r.percentage)

    days = sorted(by_day)
    trend = [
        TrendPoint(
            date=day,
            percentage=round(sum(by_day[day]) / len(by_day[day]), 2),
            count=len(by_day[day]),
        )
        for day in days
    ]
    heatmap = [HeatmapPoint(date=day, count=len(by_day[day])) for day in days]

    return DashboardRead(
        heatmap=heatmap,
        trend=trend,
        summary=DashboardSummary(
            total_quizzes=count,
            avg_percentage=round(average, 2),
            best_quiz=_highlight(best, titles),
            worst_quiz=_highlight(worst, titles),
        ),
    )


def get_dashboard(db: Session, user_id: uuid.UUID) -> DashboardRead:
    """Load the user's full result history and aggregate it."""
    results = find_results_for_user(db, user_id)
    titles = resolve_quiz_titles(db, (r.quiz_id for r in results))
    logger.debug("Building dashboard for user %s from %d results", user_id, len(results))
    return build_dashboard(results, titles)
