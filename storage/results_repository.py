"""
Result Storage
==============

Append-only stores for quiz results. Results are kept in insertion order;
the only deletion is a full reset.
"""

import logging
import os
import pickle
from typing import List, Optional

from models.quiz_models import QuizResult, validate_result

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the underlying medium cannot be read or written."""


class InMemoryResultRepository:
    def __init__(self, results: Optional[List[QuizResult]] = None):
        self._results: List[QuizResult] = []
        for result in results or []:
            self.append_result(result)

    def append_result(self, result: QuizResult) -> None:
        self._results.append(validate_result(result))

    def list_results(self, student_id: Optional[str] = None) -> List[QuizResult]:
        """All results in insertion order. `student_id=None` returns every student's results."""
        if student_id is None:
            return list(self._results)
        return [r for r in self._results if r.student_id == student_id]

    def clear(self) -> None:
        self._results = []


class PickleResultRepository:
    """Stores the whole history as a pickled list in a single file."""

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> List[QuizResult]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "rb") as f:
                history = pickle.load(f)
        except Exception as e:
            # pickle.load can raise almost anything on a corrupt file
            logger.error("Could not read results from %s: %s", self.path, e)
            raise StorageError(f"Could not read results from {self.path}") from e

        if not isinstance(history, list):
            logger.error("Unexpected %s in %s; expected a list of results", type(history).__name__, self.path)
            raise StorageError(f"{self.path} does not hold a result history")
        return history

    def _dump(self, results: List[QuizResult]) -> None:
        try:
            with open(self.path, "wb") as f:
                pickle.dump(results, f)
        except OSError as e:
            logger.error("Could not write results to %s: %s", self.path, e)
            raise StorageError(f"Could not write results to {self.path}") from e

    def append_result(self, result: QuizResult) -> None:
        validate_result(result)
        history = self._load()
        history.append(result)
        self._dump(history)
        logger.info("Saved result %s for quiz %s (%d stored)", result.id, result.quiz_id, len(history))

    def list_results(self, student_id: Optional[str] = None) -> List[QuizResult]:
        """All results in insertion order. `student_id=None` returns every student's results."""
        history = self._load()
        if student_id is None:
            return history
        return [r for r in history if r.student_id == student_id]

    def clear(self) -> None:
        """Deletes the history file."""
        if not os.path.exists(self.path):
            return
        try:
            os.remove(self.path)
        except OSError as e:
            raise StorageError(f"Could not delete {self.path}") from e
        logger.info("Cleared result history at %s", self.path)
