"""Error types shared across remotelaunch.

Configuration errors are fatal at startup. Resolution and spawn errors
are scoped to a single request and become HTTP responses. Post-spawn
errors only ever reach the log.
"""

from __future__ import annotations

from pathlib import Path


class RemoteLaunchError(Exception):
    """Base class for all remotelaunch errors."""


class ConfigurationError(RemoteLaunchError):
    """Raised when settings or the commands file cannot be loaded."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = path


class CommandNotFoundError(RemoteLaunchError):
    """Raised when a requested command name is not configured."""

    def __init__(self, name: str) -> None:
        super().__init__("Specified command was not found.")
        self.name = name


class SpawnError(RemoteLaunchError):
    """Raised when the OS refuses to start a command's process.

    The message is the operating system's own error text.
    """

    def __init__(self, message: str, command: str = "") -> None:
        super().__init__(message)
        self.command = command


class PostSpawnExecutionError(RemoteLaunchError):
    """A launched process exited unsuccessfully after it was acknowledged."""

    def __init__(self, command: str, returncode: int) -> None:
        if returncode < 0:
            detail = f"terminated by signal {-returncode}"
        else:
            detail = f"exited with status {returncode}"
        super().__init__(f"Command {command} {detail}")
        self.command = command
        self.returncode = returncode
