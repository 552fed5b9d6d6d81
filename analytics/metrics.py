"""
Analytics and Metrics Calculation Module
=========================================

This module turns a history of quiz results into standardized scores and a
ranked list of topics to revise.
"""

import collections
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import pandas as pd

from models.quiz_models import QuizResult, validate_result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassDistribution:
    mean: int
    std_dev: int


def simulate_class_distribution(quiz_id: str) -> ClassDistribution:
    """
    Builds a stand-in class distribution for a quiz from its id.

    There is no cohort data to compare against, so the mean and standard
    deviation are derived from the sum of the character codes of `quiz_id`.
    The same quiz always gets the same distribution; different quizzes get
    different ones. Replace this with real peer statistics when available.

    mean    = 65 + seed % 20  (65..84)
    std_dev = 10 + seed % 10  (10..19)
    """
    seed = sum(ord(char) for char in quiz_id)
    return ClassDistribution(mean=65 + seed % 20, std_dev=10 + seed % 10)


def compute_z_score(result: QuizResult) -> float:
    """
    Number of simulated standard deviations the result's percentage lies
    from the simulated mean of its quiz.
    Raises InvalidResultError for results with a non-positive max_score.
    """
    validate_result(result)
    distribution = simulate_class_distribution(result.quiz_id)
    z_score = (result.percentage - distribution.mean) / distribution.std_dev
    logger.debug("Z-score for result %s (quiz %s): %.4f", result.id, result.quiz_id, z_score)
    return z_score


def filter_by_student(results: Iterable[QuizResult], student_id: Optional[str] = None) -> List[QuizResult]:
    # None keeps every student's results pooled together
    if student_id is None:
        return list(results)
    return [r for r in results if r.student_id == student_id]


def count_topic_mistakes(results: Iterable[QuizResult], student_id: Optional[str] = None) -> pd.Series:
    """
    Counts incorrect answers per topic across all results.
    Returns a Series sorted by descending count; ties keep first-seen order.
    """
    topic_counts = collections.defaultdict(int)

    for result in filter_by_student(results, student_id):
        for topic in result.incorrect_topics:
            topic_counts[topic] += 1

    if not topic_counts:
        return pd.Series(dtype="int64")

    series_counts = pd.Series(topic_counts, dtype="int64")
    series_counts = series_counts[series_counts > 0]
    return series_counts.sort_values(ascending=False, kind="stable")


def rank_revision_topics(results: Iterable[QuizResult], student_id: Optional[str] = None) -> List[str]:
    """Topics ordered from most to least frequently missed, each listed once."""
    return [str(topic) for topic in count_topic_mistakes(results, student_id).index]
