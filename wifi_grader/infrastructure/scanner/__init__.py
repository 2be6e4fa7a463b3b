"""
Observation sources for WiFi Grader
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from pydantic import ValidationError

from wifi_grader.config.settings import ScannerSettings
from wifi_grader.core.domain.models import NetworkObservation
from wifi_grader.core.exceptions import DataValidationError, ScanError
from wifi_grader.infrastructure.normalization import normalize_record

logger = logging.getLogger(__name__)


class WifiScanner(ABC):
    """Abstract source of network observations"""

    @abstractmethod
    def scan(self) -> List[NetworkObservation]:
        """Return the networks currently observed"""
        pass

    @abstractmethod
    def is_supported(self) -> bool:
        """Whether this source can produce observations here"""
        pass

    @property
    @abstractmethod
    def platform_name(self) -> str:
        pass


class StaticScanner(WifiScanner):
    """Serves a fixed, in-memory list of observations"""

    def __init__(self, observations: Iterable[NetworkObservation]):
        self._observations = list(observations)

    def scan(self) -> List[NetworkObservation]:
        return list(self._observations)

    def is_supported(self) -> bool:
        return True

    @property
    def platform_name(self) -> str:
        return "static"


class FileScanner(WifiScanner):
    """Reads observation records from a JSON file.

    The file holds either a list of records or an object with a ``networks``
    list. Each record is normalized, then validated into a
    NetworkObservation. Malformed records are skipped with a warning, or
    abort the scan when ``strict`` is set.
    """

    def __init__(self, path: Union[str, Path], strict: bool = False):
        self.path = Path(path)
        self.strict = strict

    def is_supported(self) -> bool:
        return self.path.is_file()

    @property
    def platform_name(self) -> str:
        return f"file:{self.path.name}"

    def _load_records(self) -> List[Any]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading observations from {self.path}: {e}")
            raise ScanError(f"Failed to read observations: {e}",
                            details={'path': str(self.path)}, cause=e)

        if isinstance(data, dict):
            data = data.get('networks')
        if not isinstance(data, list):
            raise ScanError("Observation file must contain a list of networks",
                            details={'path': str(self.path)})
        return data

    def _parse_record(self, index: int, record: Any) -> NetworkObservation:
        if not isinstance(record, dict):
            raise DataValidationError(f"Record {index} is not an object",
                                      details={'index': index})
        try:
            return NetworkObservation.model_validate(normalize_record(record))
        except ValidationError as e:
            raise DataValidationError(
                f"Record {index} is invalid: {e.error_count()} error(s)",
                details={'index': index, 'errors': e.errors(include_url=False)},
                cause=e,
            )

    def scan(self) -> List[NetworkObservation]:
        observations = []
        skipped = 0

        for index, record in enumerate(self._load_records()):
            try:
                observations.append(self._parse_record(index, record))
            except DataValidationError as e:
                if self.strict:
                    logger.error(f"Rejecting {self.path}: {e}")
                    raise
                skipped += 1
                logger.warning(f"Skipping malformed record: {e}")

        logger.info(f"Loaded {len(observations)} observations from {self.path}"
                    + (f" ({skipped} skipped)" if skipped else ""))
        return observations


class UnsupportedScanner(WifiScanner):
    """Placeholder source used when no observation source is configured"""

    def scan(self) -> List[NetworkObservation]:
        raise ScanError("No observation source configured; "
                        "set scanner.observations_path or pass an input file")

    def is_supported(self) -> bool:
        return False

    @property
    def platform_name(self) -> str:
        return "unsupported"


def create_scanner(settings: Optional[ScannerSettings] = None) -> WifiScanner:
    """Build the observation source described by the scanner settings"""
    settings = settings or ScannerSettings()

    if settings.observations_path is not None:
        return FileScanner(settings.observations_path, strict=settings.strict)
    if settings.source == 'file':
        logger.warning("scanner.source is 'file' but no observations_path is set")
    else:
        logger.debug("No observation file configured")
    return UnsupportedScanner()
