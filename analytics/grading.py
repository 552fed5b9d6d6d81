"""
Submission Grading
==================

Scores a student's answers against a quiz and produces the QuizResult record
that feeds the analytics.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from models.quiz_models import InvalidResultError, Quiz, QuizResult, new_result_id

logger = logging.getLogger(__name__)


def grade_submission(quiz: Quiz, answers: Dict[str, str], student_id: str,
                     time_taken_seconds: Optional[float] = None,
                     taken_at: Optional[datetime] = None) -> QuizResult:
    """
    One point per question whose answer matches `correct_answer`; a question
    without a `correct_answer` can never score.
    Wrong and unanswered questions add their topic to `incorrect_topics`,
    in question order.
    """
    if not quiz.questions:
        raise InvalidResultError(f"Quiz {quiz.id} has no questions to grade.")

    score = 0
    incorrect_topics = []

    for question in quiz.questions:
        if question.correct_answer is not None and answers.get(question.id) == question.correct_answer:
            score += 1
        else:
            incorrect_topics.append(question.topic)

    taken_at = taken_at or datetime.now(timezone.utc)

    result = QuizResult(
        id=new_result_id(),
        quiz_id=quiz.id,
        quiz_title=quiz.title,
        student_id=student_id,
        score=score,
        max_score=len(quiz.questions),
        date_taken=taken_at.isoformat(),
        incorrect_topics=tuple(incorrect_topics),
        time_taken_seconds=time_taken_seconds,
    )
    logger.info("Graded quiz %s for %s: %d/%d", quiz.id, student_id, score, result.max_score)
    return result
