# File: tests/integration/test_cli.py
"""
Integration tests for the command-line surface.
"""

import json
import pytest

from day_planner import cli
from day_planner.core.calendar_grid import CalendarGrid


@pytest.fixture
def storage_file(tmp_path):
    return str(tmp_path / "events.json")


def _stored_ids(storage_file, date_key):
    with open(storage_file, encoding="utf-8") as f:
        return [e['id'] for e in json.loads(json.load(f)[date_key])]


class TestCli:
    """Tests for cli.main."""

    def test_add_and_list(self, storage_file, capsys):
        assert cli.main(["--storage", storage_file, "add", "2024-03-15",
                         "Standup", "9:00", "09:30", "--description", "Daily sync"]) == 0
        assert cli.main(["--storage", storage_file, "events", "2024-03-15"]) == 0

        out = capsys.readouterr().out
        assert "09:00-09:30  Standup" in out
        assert "Daily sync" in out

    def test_overlap_reports_error(self, storage_file, capsys):
        cli.main(["--storage", storage_file, "add", "2024-03-15", "A", "09:00", "10:00"])

        exit_code = cli.main(["--storage", storage_file, "add", "2024-03-15", "B", "09:30", "10:30"])

        assert exit_code == 1
        assert "overlaps" in capsys.readouterr().out
        assert len(_stored_ids(storage_file, "2024-03-15")) == 1

    def test_invalid_range_reports_error(self, storage_file):
        assert cli.main(["--storage", storage_file, "add", "2024-03-15", "A", "10:00", "09:00"]) == 1

    def test_edit_and_delete(self, storage_file):
        cli.main(["--storage", storage_file, "add", "2024-03-15", "A", "09:00", "10:00"])
        event_id = _stored_ids(storage_file, "2024-03-15")[0]

        assert cli.main(["--storage", storage_file, "edit", "2024-03-15", event_id,
                         "A2", "09:00", "10:00"]) == 0
        assert cli.main(["--storage", storage_file, "delete", "2024-03-15", event_id]) == 0
        assert _stored_ids(storage_file, "2024-03-15") == []

    def test_delete_unknown_id(self, storage_file, capsys):
        assert cli.main(["--storage", storage_file, "delete", "2024-03-15", "nope"]) == 1
        assert "Event not found: nope" in capsys.readouterr().out

    def test_search_without_match(self, storage_file, capsys):
        cli.main(["--storage", storage_file, "add", "2024-03-15", "Gym", "07:00", "08:00"])
        cli.main(["--storage", storage_file, "events", "2024-03-15", "--search", "dentist"])

        assert "No events found for this search." in capsys.readouterr().out

    def test_invalid_date(self, storage_file):
        assert cli.main(["--storage", storage_file, "events", "2024-02-30"]) == 1

    def test_month_view(self, capsys):
        assert cli.main(["month", "--year", "2024", "--month", "2"]) == 0

        out = capsys.readouterr().out
        assert "February 2024" in out
        assert "  Sun  Mon  Tue  Wed  Thu  Fri  Sat" in out
        assert "29" in out

    def test_month_out_of_range(self):
        assert cli.main(["month", "--year", "2024", "--month", "13"]) == 1


class TestRenderMonth:
    """Tests for the text month grid."""

    def test_today_is_marked(self, fixed_clock):
        grid = CalendarGrid(clock=fixed_clock, offset_minutes=330)

        rendered = cli.render_month(grid)

        assert "March 2024" in rendered
        assert "15*" in rendered
        assert "14*" not in rendered

    def test_first_row_is_padded(self, fixed_clock):
        grid = CalendarGrid(clock=fixed_clock, offset_minutes=330)

        first_week = cli.render_month(grid).splitlines()[2]

        # March 2024 starts on a Friday
        assert first_week == " " * 25 + "    1    2"
