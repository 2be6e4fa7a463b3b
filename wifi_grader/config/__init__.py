"""Configuration layer for WiFi Grader."""

from wifi_grader.config.manager import ConfigurationManager
from wifi_grader.config.settings import (
    CacheSettings,
    LoggingSettings,
    RankingSettings,
    ReportSettings,
    ScannerSettings,
    WifiGraderSettings,
)

__all__ = [
    "ConfigurationManager",
    "WifiGraderSettings",
    "CacheSettings",
    "RankingSettings",
    "ScannerSettings",
    "ReportSettings",
    "LoggingSettings",
]
