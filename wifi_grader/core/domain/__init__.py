"""Core domain layer for WiFi Grader."""

from wifi_grader.core.domain.models import (
    GradedNetwork,
    NetworkAssessment,
    NetworkObservation,
    RiskLevel,
    SecurityGrade,
    SecurityProtocol,
    frequency_to_channel,
)

__all__ = [
    "NetworkObservation",
    "GradedNetwork",
    "NetworkAssessment",
    "SecurityProtocol",
    "SecurityGrade",
    "RiskLevel",
    "frequency_to_channel",
]
