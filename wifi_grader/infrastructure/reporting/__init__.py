"""
Report export for WiFi Grader
"""

import csv
import json
import logging
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from wifi_grader.core.domain.models import GradedNetwork, SecurityGrade
from wifi_grader.core.exceptions import StorageError

logger = logging.getLogger(__name__)

REPORT_FIELDS = [
    'rank', 'ssid', 'bssid', 'security', 'score', 'grade',
    'signal_strength', 'frequency', 'channel', 'band', 'vendor',
]


def graded_row(graded: GradedNetwork) -> Dict[str, Any]:
    """Flatten a graded network into one report row"""
    observation = graded.observation
    return {
        'rank': graded.rank,
        'ssid': observation.ssid,
        'bssid': observation.bssid,
        'security': observation.security.display_name,
        'score': graded.score,
        'grade': graded.grade.value,
        'signal_strength': observation.signal_strength,
        'frequency': observation.frequency,
        'channel': observation.channel,
        'band': observation.band,
        'vendor': observation.vendor,
    }


class ReportWriter:
    """Writes graded networks as machine-readable JSON or CSV reports"""

    def __init__(self, output_directory: Union[str, Path] = "reports", report_format: str = "json"):
        self.output_directory = Path(output_directory)
        self.report_format = report_format.lower()
        if self.report_format not in ('json', 'csv'):
            raise StorageError(f"Unsupported report format: {report_format}")

    def build_report(self, graded: Sequence[GradedNetwork]) -> Dict[str, Any]:
        """Report document: rows in rank order plus a per-grade summary"""
        counts = Counter(item.grade for item in graded)
        return {
            'generated_at': datetime.now().isoformat(),
            'count': len(graded),
            'summary': {grade.value: counts.get(grade, 0) for grade in reversed(SecurityGrade)},
            'networks': [graded_row(item) for item in graded],
        }

    def to_json(self, graded: Sequence[GradedNetwork]) -> str:
        return json.dumps(self.build_report(graded), indent=2)

    def _default_path(self) -> Path:
        filename = f"wifi_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.{self.report_format}"
        return self.output_directory / filename

    def write(self, graded: Sequence[GradedNetwork], path: Optional[Union[str, Path]] = None) -> Path:
        """Write a report and return its path.

        The format follows the file suffix when a path is given, otherwise
        the configured format.
        """
        filepath = Path(path) if path else self._default_path()
        report_format = filepath.suffix.lstrip('.').lower() or self.report_format
        if report_format not in ('json', 'csv'):
            report_format = self.report_format

        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            if report_format == 'csv':
                self._write_csv(graded, filepath)
            else:
                with open(filepath, 'w', encoding='utf-8') as f:
                    f.write(self.to_json(graded))
        except OSError as e:
            logger.error(f"Error writing report: {e}")
            raise StorageError(f"Failed to write report: {e}",
                               details={'path': str(filepath)}, cause=e)

        logger.info(f"Report with {len(graded)} networks saved to {filepath}")
        return filepath

    def _write_csv(self, graded: Sequence[GradedNetwork], filepath: Path) -> None:
        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=REPORT_FIELDS)
            writer.writeheader()
            for item in graded:
                writer.writerow(graded_row(item))

    @staticmethod
    def load_rows(path: Union[str, Path]) -> List[Dict[str, Any]]:
        """Read back the network rows of a JSON or CSV report"""
        filepath = Path(path)
        try:
            with open(filepath, 'r', newline='', encoding='utf-8') as f:
                if filepath.suffix.lower() == '.csv':
                    return list(csv.DictReader(f))
                return json.load(f)['networks']
        except (OSError, ValueError, KeyError) as e:
            logger.error(f"Error loading report {filepath}: {e}")
            raise StorageError(f"Failed to load report: {e}", cause=e)
