"""Tests for collecting map load outcomes into reports."""

from src.mapfile import MapReport, inspect_map


class TestValidReport:
    """Test reports for maps that load."""

    def test_summary(self, sample_map):
        """A valid map reports its builder, tiles and start."""
        report = inspect_map(sample_map)
        assert isinstance(report, MapReport)
        assert report.valid is True
        assert report.errors == []
        assert report.tiles == 3
        assert report.builder == "Bob"
        assert report.inventory == ["wood", "soil"]
        assert report.start == (0, 0)

    def test_grid(self, sample_map):
        """The report includes the rendered height grid."""
        assert inspect_map(sample_map).grid == "1.\n23"


class TestInvalidReport:
    """Test that each failure phase is recorded, not raised."""

    def test_io_error(self, tmp_path):
        """A missing file is an io issue named after the exception."""
        report = inspect_map(tmp_path / "missing.map")
        assert report.valid is False
        assert report.errors[0].phase == "io"
        assert report.errors[0].code == "FILENOTFOUNDERROR"

    def test_format_error_has_line(self, write_map, sample_text):
        """Format issues keep their code and line number."""
        report = inspect_map(write_map(sample_text.replace("2 stone", "7 stone")))
        issue = report.errors[0]
        assert issue.phase == "format"
        assert issue.code == "TILE_ID_OUT_OF_RANGE"
        assert issue.line == 9
        assert report.grid is None

    def test_consistency_error(self, write_map):
        """Layout conflicts are consistency issues without a line."""
        text = "0\n0\nBob\n\n\ntotal:2\n0\n1\n\nexits\n0 north:1\n1 north:0\n"
        issue = inspect_map(write_map(text)).errors[0]
        assert issue.phase == "consistency"
        assert issue.code == "POSITION_CONFLICT"
        assert issue.line is None
