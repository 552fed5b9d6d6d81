import os
import sys

from analytics.report import build_performance_report
from storage.results_repository import PickleResultRepository, StorageError
from utils.logging_config import configure_logging


# ==========================================
# ENVIRONMENT
# ==========================================

def load_settings():
    """
    Reads the report settings from environment variables.
    Raises ValueError when ANALYTICS_TREND_WINDOW is not a positive integer.
    """
    raw_window = os.getenv("ANALYTICS_TREND_WINDOW", "5")
    try:
        trend_window = int(raw_window)
    except ValueError:
        raise ValueError(f"ANALYTICS_TREND_WINDOW must be an integer, got {raw_window!r}") from None
    if trend_window <= 0:
        raise ValueError(f"ANALYTICS_TREND_WINDOW must be positive, got {trend_window}")

    return {
        "store_path": os.getenv("RESULTS_STORE_PATH", "quiz_results.pkl"),
        # Unset means every student's results are pooled
        "student_id": os.getenv("ANALYTICS_STUDENT_ID") or None,
        "trend_window": trend_window,
    }


# ==========================================
# OUTPUT
# ==========================================

def format_report(report, student_label):
    if report.assessments_taken == 0:
        return ("No Analytics Available Yet\n"
                "Complete some quizzes to generate data.")

    lines = [
        f"Student Analytics: {student_label}",
        f"Average Grade: {report.average_score}%",
        f"Assessments Taken: {report.assessments_taken}",
        f"Weakest Topic: {report.weakest_topic or 'None'}",
        f"Z-Score Trend: {report.latest_z_score}",
        "",
        "Performance Z-Score",
        report.z_score_trend.to_string(index=False),
        "",
        "Recommended Revision Plan",
    ]
    if report.revision_topics:
        for i, topic in enumerate(report.revision_topics):
            lines.append(f"  Priority {i + 1}: {topic}")
    else:
        lines.append("  No significant weak areas detected.")
    return "\n".join(lines)


# ==========================================
# MAIN
# ==========================================

def main():
    logger = configure_logging(os.getenv("LOG_LEVEL", "INFO"))
    try:
        settings = load_settings()
    except ValueError as e:
        logger.error("Invalid settings: %s", e)
        return 1

    repository = PickleResultRepository(settings["store_path"])
    try:
        results = repository.list_results(settings["student_id"])
    except StorageError as e:
        logger.error("Unable to load results: %s", e)
        return 1

    logger.info("Loaded %d results from %s", len(results), settings["store_path"])
    report = build_performance_report(results, trend_window=settings["trend_window"])
    print(format_report(report, settings["student_id"] or "All students"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
