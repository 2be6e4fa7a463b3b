"""Application use cases for WiFi Grader."""

from wifi_grader.application.use_cases.network_grading import NetworkGradingUseCase

__all__ = ["NetworkGradingUseCase"]
