"""Tests for the command line entry point."""

from types import SimpleNamespace

import pytest

from termsnake import cli, terminal
from termsnake.errors import BoardFullError


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TERMSNAKE_LOG_DIR", str(tmp_path / "logs"))


def test_prints_final_score(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr(terminal, "play", lambda config: SimpleNamespace(score=3))

    assert cli.main([]) == 0

    assert "Game over! Score: 3" in capsys.readouterr().out
    assert list((tmp_path / "logs").glob("termsnake_*.log"))


def test_snake_error_exit_code(monkeypatch, capsys):
    def full(config):
        raise BoardFullError("no room left")

    monkeypatch.setattr(terminal, "play", full)

    assert cli.main([]) == 1
    assert "no room left" in capsys.readouterr().err


def test_ctrl_c_is_a_clean_exit(monkeypatch):
    def interrupted(config):
        raise KeyboardInterrupt

    monkeypatch.setattr(terminal, "play", interrupted)
    assert cli.main([]) == 0


def test_unexpected_errors_propagate(monkeypatch):
    def broken(config):
        raise OSError("terminal gone")

    monkeypatch.setattr(terminal, "play", broken)
    with pytest.raises(OSError):
        cli.main([])


def test_bad_config(monkeypatch, capsys):
    monkeypatch.setenv("TERMSNAKE_TIME_STEP_MS", "fast")
    assert cli.main([]) == 1
    assert "TERMSNAKE_TIME_STEP_MS" in capsys.readouterr().err


def test_log_level_flag(monkeypatch):
    seen = {}

    def play(config):
        seen["level"] = config.log_level
        return SimpleNamespace(score=0)

    monkeypatch.setattr(terminal, "play", play)
    cli.main(["--log-level", "debug"])
    assert seen["level"] == "DEBUG"


def test_unknown_log_level_in_env(monkeypatch, capsys):
    monkeypatch.setenv("TERMSNAKE_LOG_LEVEL", "loud")
    monkeypatch.setattr(terminal, "play", lambda config: SimpleNamespace(score=0))
    assert cli.main([]) == 1
    assert "unknown log level 'LOUD'" in capsys.readouterr().err


def test_unknown_log_level_flag(monkeypatch, capsys):
    monkeypatch.setattr(terminal, "play", lambda config: SimpleNamespace(score=0))
    assert cli.main(["--log-level", "loud"]) == 1
    assert "unknown log level 'LOUD'" in capsys.readouterr().err
