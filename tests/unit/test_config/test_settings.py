"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from covserve.config.settings import (
    RunnerConfig,
    ServerConfig,
    Settings,
    load_settings,
)


class TestSettings:
    def test_default_settings(self) -> None:
        """Defaults reproduce the fixed behavior."""
        settings = Settings()
        assert settings.server.port == 8080
        assert settings.server.directory == "htmlcov"
        assert settings.server.placeholder_index is False
        assert settings.runner.default_test_path == "."
        assert settings.runner.exit_keyword == "exit"
        assert settings.logging.level == "INFO"

    def test_server_config_rejects_bad_port(self) -> None:
        with pytest.raises(ValidationError):
            ServerConfig(port=70000)

    def test_runner_config_rejects_empty_exit_keyword(self) -> None:
        with pytest.raises(ValidationError):
            RunnerConfig(exit_keyword="")

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COVSERVE_SERVER__PORT", "9090")
        settings = Settings()
        assert settings.server.port == 9090


class TestLoadSettings:
    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path / "nonexistent.yaml")
        assert settings.server.port == 8080
        assert settings.runner.python == "python"

    def test_yaml_file_populates_sections(self, tmp_path: Path) -> None:
        config = tmp_path / "covserve.yaml"
        config.write_text(
            "server:\n"
            "  port: 8123\n"
            "  directory: reports\n"
            "runner:\n"
            "  default_test_path: tests/unit\n"
        )
        settings = load_settings(config)
        assert settings.server.port == 8123
        assert settings.server.directory == "reports"
        assert settings.runner.default_test_path == "tests/unit"
        assert settings.runner.exit_keyword == "exit"

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        config = tmp_path / "covserve.yaml"
        config.write_text("")
        settings = load_settings(config)
        assert settings.server.host == "127.0.0.1"
