"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError
from terminal_commands.core.common.exceptions import ConfigurationError
from terminal_commands.core.config.app_config import (
    AppConfig,
    LoggingConfig,
    LogLevel,
    load_config,
)


def test_defaults() -> None:
    config = AppConfig()

    assert config.debug is False
    assert config.propagate_command_errors is True
    assert config.case_sensitive_names is False
    assert config.prompt == "> "
    assert config.logging.level is LogLevel.INFO
    assert config.logging.log_file is None


def test_from_env() -> None:
    config = AppConfig.from_env(
        environ={
            "TERMINAL_COMMANDS_DEBUG": "true",
            "TERMINAL_COMMANDS_PROPAGATE_ERRORS": "0",
            "TERMINAL_COMMANDS_CASE_SENSITIVE": "yes",
            "TERMINAL_COMMANDS_PROMPT": "$ ",
            "LOG_LEVEL": "debug",
            "LOG_FILE": "out.log",
        }
    )

    assert config.debug is True
    assert config.propagate_command_errors is False
    assert config.case_sensitive_names is True
    assert config.prompt == "$ "
    assert config.logging == LoggingConfig(level=LogLevel.DEBUG, log_file="out.log")


def test_invalid_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        LoggingConfig(level="chatty")


class TestLoadConfig:
    def test_file_values_are_applied(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "debug: true\nprompt: 'ship> '\nlogging:\n  level: warning\n", encoding="utf-8"
        )

        config = load_config(path, environ={})

        assert config.debug is True
        assert config.prompt == "ship> "
        assert config.logging.level is LogLevel.WARNING

    def test_environment_overrides_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yml"
        path.write_text("debug: true\nlogging:\n  log_file: a.log\n", encoding="utf-8")

        config = load_config(path, environ={"TERMINAL_COMMANDS_DEBUG": "false", "LOG_LEVEL": "ERROR"})

        assert config.debug is False
        assert config.logging.level is LogLevel.ERROR
        assert config.logging.log_file == "a.log"

    def test_missing_file_uses_defaults(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("WARNING"):
            config = load_config(tmp_path / "absent.yaml", environ={})

        assert config == AppConfig()
        assert "Configuration file not found" in caplog.text

    def test_non_yaml_file_is_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{}", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path, environ={})

        assert exc_info.value.details == {"path": str(path)}

    @pytest.mark.parametrize("content", ["debug: [unclosed", "- a\n- b\n"])
    def test_malformed_file_is_rejected(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(path, environ={})

    def test_round_trip_through_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "saved.yaml"
        AppConfig(case_sensitive_names=True, logging=LoggingConfig(level=LogLevel.DEBUG)).to_yaml(path)

        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        config = load_config(path, environ={})

        assert data["logging"]["level"] == "DEBUG"
        assert config.case_sensitive_names is True
