"""Domain models for remotelaunch."""

from remotelaunch.domain.models import (
    CommandDefinition,
    CommandsFile,
    LaunchAcknowledgement,
    LaunchHandle,
)

__all__ = [
    "CommandDefinition",
    "CommandsFile",
    "LaunchAcknowledgement",
    "LaunchHandle",
]
