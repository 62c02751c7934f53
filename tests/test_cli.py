"""
Tests for the command line entry point

The demo must write exactly the two operation blocks to stdout, separated
by one blank line, and exit 0 whatever logging options are chosen.
"""
import argparse

import pytest

import cli
from conftest import EXPECTED_OPERATION

EXPECTED_DEMO = EXPECTED_OPERATION + "\n" + EXPECTED_OPERATION


class TestDemo:

    def test_no_arguments_runs_demo(self, capsys):
        assert cli.main([]) == 0
        assert capsys.readouterr().out == EXPECTED_DEMO

    def test_demo_subcommand(self, capsys):
        assert cli.main(["demo"]) == 0
        assert capsys.readouterr().out == EXPECTED_DEMO

    def test_verbose_keeps_stdout_clean(self, capsys):
        assert cli.main(["demo", "-v"]) == 0
        assert capsys.readouterr().out == EXPECTED_DEMO

    def test_verbose_logs_lifecycle_to_stderr(self, capsys):
        assert cli.main(["demo", "-v"]) == 0
        captured = capsys.readouterr()
        assert captured.out == EXPECTED_DEMO
        assert "Facade created" in captured.err
        assert "Facade closed" in captured.err

    def test_default_run_keeps_stderr_quiet(self, capsys):
        assert cli.main([]) == 0
        assert "Facade created" not in capsys.readouterr().err

    def test_log_level_override_keeps_stdout_clean(self, capsys):
        assert cli.main(["demo", "--log-level", "debug"]) == 0
        assert capsys.readouterr().out == EXPECTED_DEMO

    def test_invalid_log_level_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["demo", "--log-level", "LOUD"])
        assert exc.value.code == 2
        assert "invalid level" in capsys.readouterr().err

    def test_client_code_prints_operation(self, capsys):
        from facades import get_subsystem_facade

        with get_subsystem_facade() as facade:
            cli.client_code(facade)
        assert capsys.readouterr().out == EXPECTED_OPERATION

    def test_run_demo_releases_subsystems(self, counting_subsystems, capsys):
        _, _, counts = counting_subsystems
        # One supplied pair in scenario 1, one default pair in scenario 2
        cli.run_demo()
        assert capsys.readouterr().out == EXPECTED_DEMO
        assert counts["a_created"] == counts["a_released"] == 2
        assert counts["b_created"] == counts["b_released"] == 2


class TestLogLevelCommand:

    @pytest.fixture
    def settings_file(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.toml"
        path.write_text('[env]\nlog_level = "INFO"\n')
        monkeypatch.setattr(cli, "SETTINGS_PATH", path)
        monkeypatch.setattr(cli, "_load_settings", lambda: {"env": {"log_level": "INFO"}})
        return path

    def test_prints_current_level(self, settings_file, capsys):
        assert cli.main(["log-level"]) == 0
        assert capsys.readouterr().out.strip() == "INFO"

    def test_same_level_is_noop(self, settings_file, capsys):
        assert cli.main(["log-level", "info"]) == 0
        assert capsys.readouterr().out.strip() == "already INFO"
        assert 'log_level = "INFO"' in settings_file.read_text()

    def test_sets_new_level(self, settings_file, capsys):
        assert cli.main(["log-level", "DEBUG"]) == 0
        assert capsys.readouterr().out.strip() == "INFO → DEBUG"
        assert 'log_level = "DEBUG"' in settings_file.read_text()


class TestParser:

    def test_log_level_name_normalizes_case(self):
        assert cli._log_level_name("warning") == "WARNING"

    def test_log_level_name_rejects_unknown(self):
        with pytest.raises(argparse.ArgumentTypeError):
            cli._log_level_name("verbose")
