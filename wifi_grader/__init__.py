"""WiFi Grader - security scoring and ranking of observed wireless networks.

This package assigns a normalized 0-100 security score and a five-level
grade to observed wireless network records, and ranks collections of them
for operator review.

Key Features:
- Seven-component weighted security score with per-component breakdown
- Five-level grade classification
- Fingerprint-keyed score cache
- Security ranking with tie-break rules
- Per-network assessment (risk level, threats, recommendations)
- JSON/CSV reports and a JSON-only command line interface

Architecture:
- core: domain models and pure scoring services
- infrastructure: observation sources, normalization, report export
- application: use cases wiring the core to its collaborators
- config / cli / utils: configuration, command line and logging
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Public API exports
from wifi_grader.core.domain.models import (
    GradedNetwork,
    NetworkAssessment,
    NetworkObservation,
    SecurityGrade,
    SecurityProtocol,
)
from wifi_grader.core.exceptions import (
    ConfigurationError,
    DataValidationError,
    ScanError,
    StorageError,
    WifiGraderError,
)
from wifi_grader.core.services import GradeClassifier, Ranker, ScoreCache, ScoreCalculator

__all__ = [
    "NetworkObservation",
    "SecurityProtocol",
    "SecurityGrade",
    "GradedNetwork",
    "NetworkAssessment",
    "ScoreCalculator",
    "GradeClassifier",
    "ScoreCache",
    "Ranker",
    "WifiGraderError",
    "ScanError",
    "ConfigurationError",
    "DataValidationError",
    "StorageError",
]
