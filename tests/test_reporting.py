"""
Tests for report export.

These tests verify:
1. JSON and CSV reports carry every graded network in rank order
2. Write failures surface as StorageError
"""

import json

import pytest

from wifi_grader.core.domain.models import GradedNetwork, NetworkObservation, SecurityGrade
from wifi_grader.core.exceptions import StorageError
from wifi_grader.infrastructure.reporting import REPORT_FIELDS, ReportWriter, graded_row


# =============================================================================
# TEST FIXTURES
# =============================================================================

def make_graded(rank: int, ssid: str, score: int, grade: SecurityGrade) -> GradedNetwork:
    """Helper to create a graded network."""
    observation = NetworkObservation(
        ssid=ssid,
        bssid=f"AA:BB:CC:DD:EE:0{rank}",
        security="WPA2-Personal",
        frequency=5180,
        signal_strength=-60,
    )
    return GradedNetwork(rank=rank, observation=observation, score=score, grade=grade)


GRADED = [
    make_graded(1, "Corp", 56, SecurityGrade.GOOD),
    make_graded(2, "HomeNet", 33, SecurityGrade.BAD),
    make_graded(3, "Cafe", 11, SecurityGrade.VERY_BAD),
]


# =============================================================================
# REPORT TESTS
# =============================================================================

class TestGradedRow:
    """Test row flattening."""

    def test_row_fields(self):
        row = graded_row(GRADED[1])
        assert list(row) == REPORT_FIELDS
        assert row["security"] == "WPA2-Personal"
        assert row["grade"] == "Bad"
        assert row["channel"] == 36
        assert row["band"] == "5 GHz"


class TestReportWriter:
    """Test JSON and CSV output."""

    def test_build_report(self):
        report = ReportWriter().build_report(GRADED)
        assert report["count"] == 3
        assert report["summary"] == {
            "Excellent": 0, "Good": 1, "Okay": 0, "Bad": 1, "Very Bad": 1,
        }
        assert [row["ssid"] for row in report["networks"]] == ["Corp", "HomeNet", "Cafe"]

    def test_to_json_parses(self):
        data = json.loads(ReportWriter().to_json(GRADED))
        assert data["networks"][0]["score"] == 56

    def test_write_json(self, tmp_path):
        path = ReportWriter(tmp_path).write(GRADED, tmp_path / "out" / "report.json")
        assert path.exists()
        rows = ReportWriter.load_rows(path)
        assert [row["rank"] for row in rows] == [1, 2, 3]

    def test_write_csv(self, tmp_path):
        path = ReportWriter(tmp_path).write(GRADED, tmp_path / "report.csv")
        rows = ReportWriter.load_rows(path)
        assert [row["ssid"] for row in rows] == ["Corp", "HomeNet", "Cafe"]
        assert rows[2]["grade"] == "Very Bad"

    def test_default_path_uses_format(self, tmp_path):
        path = ReportWriter(tmp_path, "csv").write(GRADED)
        assert path.parent == tmp_path
        assert path.suffix == ".csv"

    def test_unknown_suffix_uses_format(self, tmp_path):
        path = ReportWriter(tmp_path, "csv").write(GRADED, tmp_path / "report.txt")
        assert path.read_text().startswith(",".join(REPORT_FIELDS))

    def test_unsupported_format(self):
        with pytest.raises(StorageError):
            ReportWriter(report_format="xml")

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(StorageError):
            ReportWriter(tmp_path).write(GRADED, blocker / "report.json")

    def test_load_missing_report(self, tmp_path):
        with pytest.raises(StorageError):
            ReportWriter.load_rows(tmp_path / "absent.json")


# =============================================================================
# RUN TESTS
# =============================================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
