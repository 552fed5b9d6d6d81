import sys

from models.quiz_models import QuizResult
from storage.results_repository import PickleResultRepository


def make_result(result_id, quiz_id, score, max_score, incorrect_topics=(),
                student_id="STD_DEMO", quiz_title=None):
    return QuizResult(
        id=result_id,
        quiz_id=quiz_id,
        quiz_title=quiz_title or f"Quiz {quiz_id}",
        student_id=student_id,
        score=score,
        max_score=max_score,
        date_taken=f"2025-03-0{result_id}T10:00:00+00:00",
        incorrect_topics=tuple(incorrect_topics),
        time_taken_seconds=300,
    )


# Five submissions from the demo student; the last one is phys_q1 at 7/10
mock_results = [
    make_result("1", "quiz_demo", 8, 10, ["Kinematics", "Vectors"],
                quiz_title="Introduction to Mechanics"),
    make_result("2", "chem_q1", 3, 5, ["Stoichiometry", "Kinematics"]),
    make_result("3", "bio_q2", 4, 4, []),
    make_result("4", "math_q3", 6, 10, ["Vectors", "Vectors", "Integrals", "Kinematics"]),
    make_result("5", "phys_q1", 7, 10, ["Kinematics", "Friction", "Vectors"],
                quiz_title="Forces and Motion"),
]


def save_results(results, filename="quiz_results.pkl"):
    repository = PickleResultRepository(filename)
    for result in results:
        repository.append_result(result)
    return repository


if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else "quiz_results.pkl"
    save_results(mock_results, target)
    print(f"{len(mock_results)} demo results saved to {target}")
