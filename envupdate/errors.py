"""Exception hierarchy for envupdate."""


class UpdateError(Exception):
    """Base exception for envupdate errors."""


class ConfigError(UpdateError):
    """Configuration error."""


class CommandNotFound(UpdateError):
    """An external executable is not installed."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Command not found: {command}")
