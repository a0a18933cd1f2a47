"""Tests for environment settings."""

from pathlib import Path

import pytest

from contactbook import config


def test_defaults(monkeypatch) -> None:
    for name in (
        "CONTACTBOOK_UNDO_WINDOW_MS",
        "CONTACTBOOK_NOTIFICATION_MS",
        "CONTACTBOOK_SEED_PATH",
        "CONTACTBOOK_PHONE_REGION",
    ):
        monkeypatch.delenv(name, raising=False)
    assert config.get_undo_window_ms() == 5000
    assert config.get_notification_ms() == 5000
    assert config.get_seed_path() is None
    assert config.get_phone_region() is None


def test_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("CONTACTBOOK_UNDO_WINDOW_MS", " 8000 ")
    monkeypatch.setenv("CONTACTBOOK_NOTIFICATION_MS", "1200")
    monkeypatch.setenv("CONTACTBOOK_SEED_PATH", str(tmp_path / "seed.json"))
    monkeypatch.setenv("CONTACTBOOK_PHONE_REGION", "it")
    assert config.get_undo_window_ms() == 8000
    assert config.get_notification_ms() == 1200
    assert config.get_seed_path() == (tmp_path / "seed.json").resolve()
    assert config.get_phone_region() == "IT"


def test_bad_duration_raises(monkeypatch) -> None:
    monkeypatch.setenv("CONTACTBOOK_UNDO_WINDOW_MS", "five seconds")
    with pytest.raises(ValueError, match="CONTACTBOOK_UNDO_WINDOW_MS") as excinfo:
        config.get_undo_window_ms()
    assert excinfo.value.__suppress_context__
    monkeypatch.setenv("CONTACTBOOK_UNDO_WINDOW_MS", "-1")
    with pytest.raises(ValueError):
        config.get_undo_window_ms()


def test_load_environment_reads_dotenv_from_cwd(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("CONTACTBOOK_NOTIFICATION_MS", raising=False)
    monkeypatch.setattr(config, "_repo_root", lambda: tmp_path / "missing")
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("CONTACTBOOK_NOTIFICATION_MS=750\n", encoding="utf-8")

    assert config.load_environment() == Path.cwd() / ".env"
    assert config.get_notification_ms() == 750
    monkeypatch.delenv("CONTACTBOOK_NOTIFICATION_MS")
