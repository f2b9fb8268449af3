"""
Common exception classes for the terminal command engine.

This module defines custom exception classes used throughout the package
for better error handling and categorization.
"""

from __future__ import annotations


class TerminalCommandsError(Exception):
    """Base exception class for all terminal command errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        return {
            "error": {
                "message": self.message,
                "type": self.__class__.__name__,
                "details": self.details,
            }
        }


class ArgumentStreamExhaustedError(TerminalCommandsError):
    """Raised when a binder reads past the end of an argument stream."""

    def __init__(
        self,
        message: str = "Argument stream exhausted",
        position: int | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        det = details.copy() if details else {}
        if position is not None:
            det.setdefault("position", position)
        super().__init__(message, det, **kwargs)
        self.position = position


class ServiceResolutionError(TerminalCommandsError):
    """Raised when service resolution fails in a service container."""

    def __init__(
        self,
        message: str = "Service resolution failed",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class CommandRegistrationError(TerminalCommandsError):
    def __init__(
        self,
        message: str = "Failed to register command",
        command_name: str | None = None,
        details: dict | None = None,
    ):
        det = details.copy() if details else {}
        if command_name:
            det.setdefault("command_name", command_name)
        super().__init__(message, det)
        self.command_name = command_name


class ConfigurationError(TerminalCommandsError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class InteractionError(TerminalCommandsError):
    """Raised by interactions to report a failed continuation."""

    def __init__(
        self,
        message: str = "Interaction failed",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
