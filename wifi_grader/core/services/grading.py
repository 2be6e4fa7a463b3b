"""
Grade classification for WiFi Grader.

Thresholds are fixed, evaluated highest first:
    - EXCELLENT: score >= 70
    - GOOD:      score >= 55
    - OKAY:      score >= 40
    - BAD:       score >= 20
    - VERY_BAD:  everything else
"""

from __future__ import annotations

from typing import Callable, Optional

from wifi_grader.core.domain.models import NetworkObservation, RiskLevel, SecurityGrade
from wifi_grader.core.services.scoring import ScoreCalculator

GRADE_THRESHOLDS = (
    (70, SecurityGrade.EXCELLENT),
    (55, SecurityGrade.GOOD),
    (40, SecurityGrade.OKAY),
    (20, SecurityGrade.BAD),
)

RISK_THRESHOLDS = (
    (70, RiskLevel.LOW),
    (40, RiskLevel.MEDIUM),
    (20, RiskLevel.HIGH),
)


def compute_grade(score: float) -> SecurityGrade:
    """Total over any numeric score; there is no unknown grade."""
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return SecurityGrade.VERY_BAD


def compute_risk_level(score: float) -> RiskLevel:
    for threshold, level in RISK_THRESHOLDS:
        if score >= threshold:
            return level
    return RiskLevel.CRITICAL


class GradeClassifier:
    """Maps scores, or observations through a scorer, to grades."""

    def __init__(self, scorer: Optional[Callable[[NetworkObservation], int]] = None):
        self.scorer = scorer if scorer is not None else ScoreCalculator().score

    @staticmethod
    def classify(score: float) -> SecurityGrade:
        return compute_grade(score)

    def grade(self, observation: NetworkObservation) -> SecurityGrade:
        return compute_grade(self.scorer(observation))
