from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from terminal_commands.core.common.exceptions import ConfigurationError
from terminal_commands.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)


def _env_to_bool(name: str, default: bool, env: Mapping[str, str]) -> bool:
    """Return an environment variable parsed as a boolean flag."""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v


class AppConfig(DomainModel):
    """Complete application configuration."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Emit full tracebacks for recovered interaction/command failures
    debug: bool = False
    # When False, binder/action exceptions are logged and the candidate skipped
    propagate_command_errors: bool = True
    case_sensitive_names: bool = False
    prompt: str = "> "

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create AppConfig from environment variables.

        Returns:
            AppConfig instance
        """
        env: Mapping[str, str] = environ if environ is not None else os.environ
        return cls(**_config_from_env(env))

    def to_yaml(self, path: str | Path) -> None:
        """Save the current configuration to a YAML file."""
        import yaml

        p = Path(path)
        data = self.model_dump(mode="json", exclude_none=True)
        with p.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)


def _config_from_env(env: Mapping[str, str]) -> dict[str, Any]:
    config: dict[str, Any] = {}

    if "TERMINAL_COMMANDS_DEBUG" in env:
        config["debug"] = _env_to_bool("TERMINAL_COMMANDS_DEBUG", False, env)
    if "TERMINAL_COMMANDS_PROPAGATE_ERRORS" in env:
        config["propagate_command_errors"] = _env_to_bool(
            "TERMINAL_COMMANDS_PROPAGATE_ERRORS", True, env
        )
    if "TERMINAL_COMMANDS_CASE_SENSITIVE" in env:
        config["case_sensitive_names"] = _env_to_bool(
            "TERMINAL_COMMANDS_CASE_SENSITIVE", False, env
        )
    if "TERMINAL_COMMANDS_PROMPT" in env:
        config["prompt"] = env["TERMINAL_COMMANDS_PROMPT"]

    logging_section: dict[str, Any] = {}
    if env.get("LOG_LEVEL"):
        logging_section["level"] = env["LOG_LEVEL"]
    if env.get("LOG_FILE"):
        logging_section["log_file"] = env["LOG_FILE"]
    if logging_section:
        config["logging"] = logging_section

    return config


def _merge_dicts(d1: dict[str, Any], d2: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge d2 into d1."""
    for key, value in d2.items():
        if isinstance(value, dict) and isinstance(d1.get(key), dict):
            _merge_dicts(d1[key], value)
        else:
            d1[key] = value
    return d1


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from file and environment.

    Environment variables take precedence over values from the file.

    Args:
        config_path: Optional path to a YAML configuration file

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If the file is not YAML or cannot be parsed
    """
    env: Mapping[str, str] = environ if environ is not None else os.environ

    config_data: dict[str, Any] = AppConfig().model_dump()

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
        else:
            if path.suffix.lower() not in [".yaml", ".yml"]:
                raise ConfigurationError(
                    f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
                    details={"path": str(path)},
                )

            import yaml

            try:
                with open(path, encoding="utf-8") as f:
                    file_config: Any = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(
                    f"Invalid configuration file format: {exc}",
                    details={"path": str(path)},
                ) from exc

            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    "Configuration file must contain a mapping at the top level",
                    details={"path": str(path)},
                )
            _merge_dicts(config_data, file_config)

    _merge_dicts(config_data, _config_from_env(env))
    return AppConfig(**config_data)
