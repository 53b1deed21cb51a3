"""Tests for settings and logging configuration."""

import pytest
import structlog

from dualpush.config.logging import configure_logging
from dualpush.config.settings import Settings


@pytest.mark.unit
class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.git_executable == "git"
        assert settings.remote_name == "origin"
        assert settings.identity_email is None
        assert settings.log_level == "WARNING"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DUALPUSH_REMOTE_NAME", "mirror")
        monkeypatch.setenv("DUALPUSH_IDENTITY_EMAIL", "me@example.com")
        settings = Settings()
        assert settings.remote_name == "mirror"
        assert settings.identity_email == "me@example.com"

    def test_env_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("DUALPUSH_GIT_EXECUTABLE=/usr/local/bin/git\n")
        assert Settings().git_executable == "/usr/local/bin/git"


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_filters_below_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("WARNING")
        logger = structlog.get_logger("test")
        logger.info("hidden event")
        logger.warning("shown event", key="value")

        err = capsys.readouterr().err
        assert "hidden event" not in err
        assert "shown event" in err
        assert "key=value" in err

    def test_unknown_level_falls_back_to_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("chatty")
        structlog.get_logger("test").info("info event")
        assert "info event" in capsys.readouterr().err
