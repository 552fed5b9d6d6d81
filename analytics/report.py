"""
Performance Report
==================

Collects the figures shown on a student's analytics page: average grade,
the z-score trend of the latest results and the revision priorities.
"""

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence

import pandas as pd

from analytics.metrics import compute_z_score, filter_by_student, rank_revision_topics
from models.quiz_models import QuizResult

TREND_COLUMNS = ["Quiz", "Z-Score", "Score (%)"]
TITLE_LABEL_LENGTH = 15


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_z_score(value: float) -> float:
    # Exact ties go away from zero, e.g. 0.125 -> 0.13
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def shorten_title(title: str) -> str:
    return title[:TITLE_LABEL_LENGTH] + "..."


@dataclass
class PerformanceReport:
    assessments_taken: int = 0
    average_score: int = 0
    latest_z_score: float = 0.0
    z_score_trend: pd.DataFrame = field(default_factory=lambda: pd.DataFrame(columns=TREND_COLUMNS))
    revision_topics: List[str] = field(default_factory=list)

    @property
    def weakest_topic(self) -> Optional[str]:
        return self.revision_topics[0] if self.revision_topics else None


def build_z_score_trend(results: Sequence[QuizResult], window: int = 5) -> pd.DataFrame:
    """Z-scores of the last `window` results, oldest first."""
    if window <= 0:
        raise ValueError("Trend window must be a positive integer.")

    rows = []
    for result in list(results)[-window:]:
        rows.append({
            "Quiz": shorten_title(result.quiz_title),
            "Z-Score": round_z_score(compute_z_score(result)),
            "Score (%)": round_half_up(result.percentage),
        })
    return pd.DataFrame(rows, columns=TREND_COLUMNS)


def build_performance_report(results: Sequence[QuizResult], student_id: Optional[str] = None,
                             trend_window: int = 5) -> PerformanceReport:
    """
    Builds the report over the results in insertion order.
    An empty history gives an empty report rather than an error.
    """
    selected = filter_by_student(results, student_id)
    if not selected:
        return PerformanceReport()

    percentages = pd.Series([r.percentage for r in selected])
    trend_df = build_z_score_trend(selected, trend_window)

    return PerformanceReport(
        assessments_taken=len(selected),
        average_score=round_half_up(percentages.mean()),
        latest_z_score=float(trend_df["Z-Score"].iloc[-1]),
        z_score_trend=trend_df,
        revision_topics=rank_revision_topics(selected),
    )
