"""
Console host for the command dispatcher.

Reads lines from stdin, dispatches each one and prints the response. Input
no command handles falls through to an "unknown command" message, the way a
host application's own command handler would take over.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import Annotated, Any, TextIO

from pydantic import ValidationError

from terminal_commands.core.common.exceptions import TerminalCommandsError
from terminal_commands.core.common.logging_utils import (
    LogContext,
    configure_logging,
    get_logger,
)
from terminal_commands.core.config.app_config import AppConfig, LogLevel, load_config
from terminal_commands.core.di.services import build_service_provider
from terminal_commands.core.domain.commands.attributes import (
    RemainingText,
    command_info,
    terminal_command,
)
from terminal_commands.core.domain.commands.registry import CommandRegistry
from terminal_commands.core.domain.session import TerminalSession
from terminal_commands.core.services.command_dispatcher import CommandDispatcher


class ConsoleTerminal:
    """Terminal handle for the console host."""

    def __init__(self, output: TextIO) -> None:
        self.output = output
        self.running = True

    def write(self, text: str) -> None:
        if not text:
            return
        self.output.write(text if text.endswith("\n") else text + "\n")
        self.output.flush()


class ConsoleCommands:
    """Commands only available in the console host."""

    @terminal_command("exit")
    @command_info("Leave the console")
    def exit(self, terminal: ConsoleTerminal) -> str:
        terminal.running = False
        return "Goodbye."

    @terminal_command("echo")
    @command_info("Print the given text", "<text>")
    def echo(self, text: Annotated[str, RemainingText]) -> str:
        return text


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive terminal command console")
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="PATH",
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Log full tracebacks for recovered command and interaction failures",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        help="Set the logging level",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        metavar="PATH",
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--case-sensitive",
        dest="case_sensitive_names",
        action="store_true",
        default=None,
        help="Match command names case-sensitively",
    )
    parser.add_argument(
        "--harden-errors",
        dest="harden_errors",
        action="store_true",
        default=None,
        help="Log and skip failing commands instead of stopping on their errors",
    )
    return parser


def parse_cli_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_cli_parser().parse_args(argv)


def apply_cli_args(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command-line overrides."""
    config = load_config(args.config_file)

    updates: dict[str, object] = {}
    if args.debug is not None:
        updates["debug"] = args.debug
    if args.case_sensitive_names is not None:
        updates["case_sensitive_names"] = args.case_sensitive_names
    if args.harden_errors:
        updates["propagate_command_errors"] = False

    logging_updates: dict[str, object] = {}
    if args.log_level:
        logging_updates["level"] = LogLevel(args.log_level)
    if args.log_file:
        logging_updates["log_file"] = args.log_file
    if logging_updates:
        updates["logging"] = config.logging.model_copy(update=logging_updates)

    return config.model_copy(update=updates) if updates else config


def run_console(
    dispatcher: CommandDispatcher,
    session: TerminalSession,
    lines: Iterable[str],
    *,
    prompt: str = "",
) -> int:
    """Feed ``lines`` through the dispatcher until exhausted or exited.

    Returns:
        The process exit code
    """
    terminal = session.terminal
    logger = get_logger(__name__)

    with LogContext(logger, session_id=session.session_id) as log:
        for raw_line in lines:
            line = raw_line.rstrip("\r\n")
            if line.strip():
                _handle_line(dispatcher, session, line, log)
                if not getattr(terminal, "running", True):
                    break
            if prompt:
                terminal.output.write(prompt)
                terminal.output.flush()
    return 0


def _handle_line(
    dispatcher: CommandDispatcher,
    session: TerminalSession,
    line: str,
    log: Any,
) -> None:
    terminal = session.terminal
    try:
        response = dispatcher.try_execute(line, session)
    except TerminalCommandsError as e:
        log.warning("Command failed", **e.to_dict()["error"])
        terminal.write(f"Error: {e.message}")
        return
    except Exception as e:
        log.error("Unhandled command error", error=str(e), exc_info=True)
        terminal.write(f"Error: {e}")
        return

    if response is None:
        terminal.write(f"Unknown command: {line.split()[0]}")
    else:
        terminal.write(response.display_text)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = parse_cli_args(argv)
    try:
        config = apply_cli_args(args)
    except TerminalCommandsError as e:
        sys.stderr.write(f"Configuration error: {e.message}\n")
        return 2
    except ValidationError as e:
        sys.stderr.write(f"Configuration error: {e}\n")
        return 2

    configure_logging(config.logging)

    provider = build_service_provider(config)
    registry = provider.get_required_service(CommandRegistry)
    registry.register_from(ConsoleCommands())
    dispatcher = provider.get_required_service(CommandDispatcher)

    output = stdout or sys.stdout
    session = TerminalSession(ConsoleTerminal(output))

    interactive = stdin is None and sys.stdin.isatty()
    prompt = config.prompt if interactive else ""
    if prompt:
        output.write(prompt)
        output.flush()
    return run_console(dispatcher, session, stdin or sys.stdin, prompt=prompt)


if __name__ == "__main__":
    sys.exit(main())
