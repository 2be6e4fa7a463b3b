"""Application layer for WiFi Grader."""

from wifi_grader.application.use_cases import NetworkGradingUseCase

__all__ = ["NetworkGradingUseCase"]
