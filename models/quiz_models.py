"""
Data Models for Quiz Analytics
==============================

This module defines the data structures used to represent quizzes and quiz
results throughout the grading and analysis pipeline. All models are
implemented as dataclasses.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class InvalidResultError(ValueError):
    """Raised when a quiz result breaks the score invariants."""


@dataclass
class QuizQuestion:
    id: str
    question: str
    topic: str
    options: List[str] = field(default_factory=list)
    correct_answer: Optional[str] = None
    explanation: Optional[str] = None


@dataclass
class Quiz:
    id: str
    title: str
    questions: List[QuizQuestion] = field(default_factory=list)
    generated_date: Optional[str] = None


@dataclass(frozen=True)
class QuizResult:
    """
    One graded submission. Created once at grading time and never edited.
    `incorrect_topics` holds one entry per wrongly answered question.
    """
    id: str
    quiz_id: str
    quiz_title: str
    student_id: str
    score: int
    max_score: int
    date_taken: str
    incorrect_topics: Tuple[str, ...] = ()
    time_taken_seconds: Optional[float] = None

    def __post_init__(self):
        # Accept any sequence but store it immutably
        object.__setattr__(self, "incorrect_topics", tuple(self.incorrect_topics))

    @property
    def percentage(self) -> float:
        if self.max_score <= 0:
            raise InvalidResultError(
                f"Result {self.id} has max_score={self.max_score}; expected a positive value.")
        return (self.score / self.max_score) * 100


def new_result_id() -> str:
    return str(time.time_ns())


def validate_result(result: QuizResult) -> QuizResult:
    """
    Checks `0 <= score <= max_score` and `max_score > 0`.
    Returns the result unchanged so it can be used inline.
    """
    if result.max_score <= 0:
        raise InvalidResultError(
            f"Result {result.id} has max_score={result.max_score}; expected a positive value.")
    if not 0 <= result.score <= result.max_score:
        raise InvalidResultError(
            f"Result {result.id} has score={result.score} outside 0..{result.max_score}.")
    return result
