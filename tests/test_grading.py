"""
Test Grading

Tests for turning a quiz submission into a QuizResult.
"""
from datetime import datetime, timezone

import pytest

from analytics.grading import grade_submission
from models.quiz_models import InvalidResultError, Quiz, QuizQuestion


@pytest.fixture
def physics_quiz():
    """Four-question quiz over three topics"""
    return Quiz(
        id="phys_q1",
        title="Forces and Motion",
        questions=[
            QuizQuestion(id="1", question="Unit of force?", topic="Units",
                         options=["N", "J", "W", "Pa"], correct_answer="N"),
            QuizQuestion(id="2", question="F = ?", topic="Newton's Laws",
                         options=["ma", "mv", "mgh", "pV"], correct_answer="ma"),
            QuizQuestion(id="3", question="Friction opposes?", topic="Friction",
                         options=["Motion", "Gravity", "Mass", "Time"], correct_answer="Motion"),
            QuizQuestion(id="4", question="Net force at rest?", topic="Newton's Laws",
                         options=["0", "mg", "ma", "1"], correct_answer="0"),
        ],
    )


def test_all_correct(physics_quiz):
    answers = {"1": "N", "2": "ma", "3": "Motion", "4": "0"}
    result = grade_submission(physics_quiz, answers, "STD_DEMO")

    assert result.score == 4
    assert result.max_score == 4
    assert result.incorrect_topics == ()
    assert result.quiz_id == "phys_q1"
    assert result.quiz_title == "Forces and Motion"


def test_wrong_and_unanswered_questions_record_topics(physics_quiz):
    answers = {"1": "N", "2": "mv"}
    taken_at = datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)
    result = grade_submission(physics_quiz, answers, "STD_DEMO",
                              time_taken_seconds=300, taken_at=taken_at)

    assert result.score == 1
    assert result.incorrect_topics == ("Newton's Laws", "Friction", "Newton's Laws")
    assert result.date_taken == "2025-03-01T10:00:00+00:00"
    assert result.time_taken_seconds == 300
    assert result.student_id == "STD_DEMO"


def test_result_ids_are_unique(physics_quiz):
    first = grade_submission(physics_quiz, {}, "STD_DEMO")
    second = grade_submission(physics_quiz, {}, "STD_DEMO")
    assert first.id != second.id


def test_empty_quiz_is_rejected():
    with pytest.raises(InvalidResultError):
        grade_submission(Quiz(id="empty", title="Empty"), {}, "STD_DEMO")


def test_question_without_correct_answer_never_scores():
    quiz = Quiz(id="open", title="Open Question", questions=[
        QuizQuestion(id="1", question="Explain inertia.", topic="Inertia"),
    ])

    unanswered = grade_submission(quiz, {}, "STD_DEMO")
    assert unanswered.score == 0
    assert unanswered.incorrect_topics == ("Inertia",)
