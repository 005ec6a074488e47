"""Abstract base class for launching configured commands.

The HTTP layer only depends on this interface, so tests can swap in a
mock launcher and never start a real process.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from remotelaunch.domain.models import CommandDefinition, LaunchAcknowledgement


class Launcher(ABC):
    """Starts commands without waiting for them to finish.

    Example usage::

        launcher = ProcessLauncher()
        ack = await launcher.launch(definition)
        print(ack.message)
    """

    @abstractmethod
    async def launch(self, definition: CommandDefinition) -> LaunchAcknowledgement:
        """Start the command's process and return once it is running.

        Completion is observed in the background and only logged; the
        caller is never told how the process finished.

        Args:
            definition: The command to start.

        Raises:
            SpawnError: If the operating system refuses to start the process.
        """
        ...

    @property
    @abstractmethod
    def active_count(self) -> int:
        """Number of launched processes still being watched."""
        ...

    @abstractmethod
    async def detach(self) -> None:
        """Stop watching in-flight processes without touching them.

        Called on server shutdown. Safe to call more than once.
        """
        ...
