"""Scoring services: calculator, classifier, cache and ranker."""

from wifi_grader.core.services.cache import FingerprintStrategy, ScoreCache, compute_fingerprint
from wifi_grader.core.services.grading import GradeClassifier, compute_grade
from wifi_grader.core.services.ranking import Ranker
from wifi_grader.core.services.scoring import ScoreBreakdown, ScoreCalculator

__all__ = [
    "ScoreCalculator",
    "ScoreBreakdown",
    "GradeClassifier",
    "compute_grade",
    "ScoreCache",
    "FingerprintStrategy",
    "compute_fingerprint",
    "Ranker",
]
