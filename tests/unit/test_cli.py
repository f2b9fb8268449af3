"""
Tests for the console host.
"""

import io
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from terminal_commands.core.cli import (
    ConsoleCommands,
    ConsoleTerminal,
    apply_cli_args,
    main,
    parse_cli_args,
    run_console,
)
from terminal_commands.core.config.app_config import AppConfig, LogLevel
from terminal_commands.core.domain.commands.overload import CommandOverload
from terminal_commands.core.domain.commands.registry import CommandRegistry
from terminal_commands.core.domain.session import TerminalSession
from terminal_commands.core.services.command_dispatcher import CommandDispatcher


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


def _run(*lines: str, argv: list[str] | None = None) -> tuple[int, str]:
    stdout = io.StringIO()
    code = main(argv or [], stdin=io.StringIO("\n".join(lines) + "\n"), stdout=stdout)
    return code, stdout.getvalue()


def test_echo_and_unknown_command() -> None:
    code, output = _run('echo "hello  there" friend', "warp 9")

    assert code == 0
    assert output.splitlines() == ["hello  there friend", "Unknown command: warp"]


def test_exit_stops_reading_input() -> None:
    code, output = _run("exit", "echo after")

    assert code == 0
    assert output.splitlines() == ["Goodbye."]


def test_help_lists_console_commands() -> None:
    _, output = _run("help")

    assert "- echo - Print the given text" in output
    assert "- exit - Leave the console" in output


def test_blank_lines_are_ignored() -> None:
    _, output = _run("", "   ", "echo x")

    assert output.splitlines() == ["x"]


def test_bad_config_file_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text("{}", encoding="utf-8")

    code, _ = _run("echo x", argv=["--config", str(config_file)])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_command_errors_are_reported(registry: CommandRegistry) -> None:
    def broken() -> str:
        raise RuntimeError("overheated")

    registry.register(CommandOverload("boom", broken))
    output = io.StringIO()
    session = TerminalSession(ConsoleTerminal(output))

    code = run_console(CommandDispatcher(registry), session, ["boom\n"])

    assert code == 0
    assert output.getvalue() == "Error: overheated\n"


def test_console_commands_registration(registry: CommandRegistry) -> None:
    registry.register_from(ConsoleCommands)

    assert sorted(registry.get_command_names()) == ["echo", "exit"]


class TestArguments:
    def test_overrides_are_applied(self, tmp_path: Path) -> None:
        args = parse_cli_args(
            [
                "--debug",
                "--case-sensitive",
                "--harden-errors",
                "--log-level",
                "DEBUG",
                "--log-file",
                str(tmp_path / "out.log"),
            ]
        )

        config = apply_cli_args(args)

        assert config.debug is True
        assert config.case_sensitive_names is True
        assert config.propagate_command_errors is False
        assert config.logging.level is LogLevel.DEBUG
        assert config.logging.log_file == str(tmp_path / "out.log")

    def test_no_flags_keep_loaded_config(self) -> None:
        assert apply_cli_args(parse_cli_args([])) == AppConfig()

    def test_unknown_log_level_is_rejected(self) -> None:
        with pytest.raises(SystemExit):
            parse_cli_args(["--log-level", "LOUD"])
