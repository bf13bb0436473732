# File: tests/unit/test_config.py
"""
Unit tests for configuration loading and validation.
"""

import pytest

from day_planner import cli
from day_planner.core.config_manager import Config, _env_flag


# ==================== Environment Parsing Tests ====================

class TestEnvFlag:
    """Tests for yes/no environment variables."""

    @pytest.mark.parametrize("value", ["yes", "TRUE", "1", "on", "y", " t "])
    def test_truthy_values(self, monkeypatch, value):
        monkeypatch.setenv("PLANNER_TEST_FLAG", value)
        assert _env_flag("PLANNER_TEST_FLAG") is True

    @pytest.mark.parametrize("value", ["no", "false", "0", "off", ""])
    def test_falsy_values(self, monkeypatch, value):
        monkeypatch.setenv("PLANNER_TEST_FLAG", value)
        assert _env_flag("PLANNER_TEST_FLAG", default=True) is False

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("PLANNER_TEST_FLAG", raising=False)

        assert _env_flag("PLANNER_TEST_FLAG") is False
        assert _env_flag("PLANNER_TEST_FLAG", default=True) is True


# ==================== Validation Tests ====================

class TestConfigValidate:
    """Tests for Config.validate."""

    def test_defaults_are_valid(self, monkeypatch, tmp_path):
        monkeypatch.setattr(Config, "STORAGE_FILE", tmp_path / "events.json")
        assert Config.validate() is True

    @pytest.mark.parametrize("offset", [14 * 60 + 1, -(14 * 60 + 1), 2000])
    def test_offset_out_of_range(self, monkeypatch, capsys, offset):
        monkeypatch.setattr(Config, "UTC_OFFSET_MINUTES", offset)

        assert Config.validate() is False
        assert "PLANNER_UTC_OFFSET_MINUTES out of range" in capsys.readouterr().out

    def test_offset_at_limit_is_valid(self, monkeypatch, tmp_path):
        monkeypatch.setattr(Config, "UTC_OFFSET_MINUTES", -14 * 60)
        monkeypatch.setattr(Config, "STORAGE_FILE", tmp_path / "events.json")
        assert Config.validate() is True

    def test_storage_parent_is_a_file(self, monkeypatch, tmp_path, capsys):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("", encoding="utf-8")
        monkeypatch.setattr(Config, "STORAGE_FILE", blocker / "events.json")

        assert Config.validate() is False
        assert "not a directory" in capsys.readouterr().out

    def test_cli_fails_when_config_invalid(self, monkeypatch, tmp_path):
        monkeypatch.setattr(Config, "UTC_OFFSET_MINUTES", 24 * 60)

        exit_code = cli.main(["--storage", str(tmp_path / "events.json"),
                              "events", "2024-03-15"])

        assert exit_code == 1
        assert not (tmp_path / "events.json").exists()
