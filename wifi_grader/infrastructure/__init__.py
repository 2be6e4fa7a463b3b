"""Infrastructure layer for WiFi Grader."""

from wifi_grader.infrastructure.reporting import ReportWriter
from wifi_grader.infrastructure.scanner import (
    FileScanner,
    StaticScanner,
    UnsupportedScanner,
    WifiScanner,
    create_scanner,
)

__all__ = [
    "WifiScanner",
    "FileScanner",
    "StaticScanner",
    "UnsupportedScanner",
    "create_scanner",
    "ReportWriter",
]
