"""Configuration settings models using Pydantic."""

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from wifi_grader.core.services.cache import FingerprintStrategy


class CacheSettings(BaseModel):
    """Score cache configuration."""

    enabled: bool = Field(True, description="Memoize scores by fingerprint")
    fingerprint: FingerprintStrategy = Field(
        FingerprintStrategy.FULL,
        description="Cache key strategy (full/partial)"
    )


class RankingSettings(BaseModel):
    """Ranking configuration."""

    tie_window: int = Field(5, gt=0, description="Score distance treated as a tie")


class ScannerSettings(BaseModel):
    """Observation source configuration."""

    source: str = Field("auto", description="Observation source (auto/file)")
    observations_path: Optional[Path] = Field(None, description="JSON file with network records")
    strict: bool = Field(False, description="Reject the whole file on a malformed record")

    @field_validator('source')
    @classmethod
    def validate_source(cls, v):
        valid_sources = ['auto', 'file']
        if v.lower() not in valid_sources:
            raise ValueError(f"Scanner source must be one of: {valid_sources}")
        return v.lower()


class ReportSettings(BaseModel):
    """Report export configuration."""

    output_directory: Path = Field(Path("reports"), description="Report output directory")
    format: str = Field("json", description="Report format (json/csv)")

    @field_validator('format')
    @classmethod
    def validate_format(cls, v):
        valid_formats = ['json', 'csv']
        if v.lower() not in valid_formats:
            raise ValueError(f"Report format must be one of: {valid_formats}")
        return v.lower()


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Log level")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format"
    )
    file_enabled: bool = Field(False, description="Enable file logging")
    console_enabled: bool = Field(True, description="Enable console logging")
    log_directory: Path = Field(Path("logs"), description="Log file directory")
    max_file_size_mb: int = Field(10, gt=0, description="Maximum log file size")
    backup_count: int = Field(5, gt=0, description="Number of backup log files")

    @field_validator('level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class WifiGraderSettings(BaseModel):
    """Main configuration settings for WiFi Grader."""

    # Core settings
    environment: str = Field("development", description="Environment (dev/prod/test)")
    debug: bool = Field(False, description="Enable debug mode")

    # Component settings
    cache: CacheSettings = Field(default_factory=CacheSettings)
    ranking: RankingSettings = Field(default_factory=RankingSettings)
    scanner: ScannerSettings = Field(default_factory=ScannerSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Additional settings
    custom_settings: Dict[str, Any] = Field(default_factory=dict, description="Custom settings")

    @field_validator('environment')
    @classmethod
    def validate_environment(cls, v):
        valid_envs = ['development', 'production', 'testing']
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    def get_report_path(self, filename: str) -> Path:
        """Get full path to a report file."""
        return self.report.output_directory / filename

    def get_log_path(self, filename: str) -> Path:
        """Get full path to a log file."""
        return self.logging.log_directory / filename
