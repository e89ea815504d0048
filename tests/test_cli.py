"""Tests for the command line interface."""

import argparse

import pytest

from pace_table.cli import main, parse_pace, render_table
from pace_table.models.pace_table import PaceRangeConfig, TableMode
from pace_table.services.table_service import build_table


@pytest.fixture
def db(tmp_path):
    return str(tmp_path / "prefs.db")


class TestParsePace:
    """Tests for parse_pace function."""

    def test_minutes_seconds(self):
        assert parse_pace("4:30") == 270

    def test_plain_seconds(self):
        assert parse_pace("270") == 270

    def test_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_pace("fast")


class TestRenderTable:
    """Tests for render_table function."""

    def test_plain_table(self):
        config = PaceRangeConfig(max_seconds=300, min_seconds=240, interval_seconds=30)
        text = render_table(build_table(TableMode.OFFICIAL, config), use_color=False)
        lines = text.splitlines()
        assert lines[0] == "Pace table (official distances)"
        assert "Marathon" in text
        assert "\033[" not in text
        # title, blank, header, rule, 3 paces
        assert len(lines) == 7

    def test_colored_cells(self):
        config = PaceRangeConfig(max_seconds=300, min_seconds=240, interval_seconds=15)
        table = build_table(TableMode.OFFICIAL, config, vma=15, color_enabled=True)
        assert "\033[48;2;" in render_table(table)

    def test_message_when_not_ready(self):
        config = PaceRangeConfig(max_seconds=180, min_seconds=420, interval_seconds=15)
        text = render_table(build_table(TableMode.OFFICIAL, config), use_color=False)
        assert "Invalid pace configuration" in text


class TestMain:
    """Tests for CLI commands."""

    def test_table_command(self, db, capsys):
        assert main(["--db", db, "table", "--no-ansi"]) == 0
        out = capsys.readouterr().out
        assert "Pace table (official distances)" in out
        assert "50:00" in out

    def test_table_with_pace_options(self, db, capsys):
        args = ["--db", db, "table", "--no-ansi", "--max-pace", "5:00", "--min-pace", "4:00", "--interval", "30"]
        assert main(args) == 0
        lines = capsys.readouterr().out.splitlines()
        # title, VMA pace from default preferences, blank, header, rule
        assert lines[1] == "VMA pace: 04:00/km"
        assert [line.split()[0] for line in lines[5:]] == ["5:00", "4:30", "4:00"]

    def test_intermediate_requires_race(self, db, capsys):
        assert main(["--db", db, "table", "--no-ansi", "--mode", "intermediate"]) == 0
        assert "Select a race distance" in capsys.readouterr().out

    def test_intermediate_with_race(self, db, capsys):
        args = ["--db", db, "table", "--no-ansi", "--mode", "intermediate", "--race", "5km"]
        assert main(args) == 0
        assert "Split times (5km)" in capsys.readouterr().out

    def test_unknown_race(self, db, capsys):
        assert main(["--db", db, "table", "--mode", "intermediate", "--race", "ultra"]) == 1
        assert "Unknown race" in capsys.readouterr().out

    def test_bad_pace_option(self, db):
        with pytest.raises(SystemExit):
            main(["--db", db, "table", "--max-pace", "slow"])

    def test_distances_command(self, db, capsys):
        assert main(["--db", db, "distances", "--mode", "interval"]) == 0
        out = capsys.readouterr().out
        assert "400m" in out
        assert "VMA" not in out

    def test_prefs_persist(self, db, capsys):
        assert main(["--db", db, "prefs", "--set", "vma=16", "--set", "max_pace_seconds=6:30"]) == 0
        capsys.readouterr()
        assert main(["--db", db, "prefs"]) == 0
        out = capsys.readouterr().out
        assert "16 km/h" in out
        assert "6:30/km" in out

    def test_prefs_invalid(self, db, capsys):
        assert main(["--db", db, "prefs", "--set", "theme=purple"]) == 1
        assert "Error" in capsys.readouterr().out
