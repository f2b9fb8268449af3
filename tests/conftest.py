from __future__ import annotations

import pytest
from terminal_commands.core.config.app_config import AppConfig
from terminal_commands.core.domain.commands.registry import CommandRegistry
from terminal_commands.core.domain.session import TerminalSession
from terminal_commands.core.services.command_dispatcher import CommandDispatcher


class RecordingTerminal:
    """Minimal terminal handle that records what was written to it."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, text: str) -> None:
        self.lines.append(text)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of config-driven tests."""
    for name in (
        "TERMINAL_COMMANDS_DEBUG",
        "TERMINAL_COMMANDS_PROPAGATE_ERRORS",
        "TERMINAL_COMMANDS_CASE_SENSITIVE",
        "TERMINAL_COMMANDS_PROMPT",
        "LOG_LEVEL",
        "LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def terminal() -> RecordingTerminal:
    return RecordingTerminal()


@pytest.fixture
def session(terminal: RecordingTerminal) -> TerminalSession:
    return TerminalSession(terminal, session_id="test-session")


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def dispatcher(registry: CommandRegistry, app_config: AppConfig) -> CommandDispatcher:
    return CommandDispatcher(registry, app_config)
