from terminal_commands.core.config.app_config import (
    AppConfig,
    LoggingConfig,
    LogLevel,
    load_config,
)

__all__ = ["AppConfig", "LogLevel", "LoggingConfig", "load_config"]
