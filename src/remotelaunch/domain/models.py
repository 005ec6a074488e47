"""Core domain models for remotelaunch.

Command definitions come from the commands file and never change after
load. Launch acknowledgements and handles describe a single spawn.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class CommandDefinition(BaseModel):
    """A named executable plus arguments that may be started remotely.

    Field names in the commands file are accepted capitalized (``Name``)
    or lower case (``name``).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("Name", "name"),
        description="Unique, case-sensitive command name",
    )
    path: str = Field(
        min_length=1,
        validation_alias=AliasChoices("Path", "path"),
        description="Executable to run (resolved against PATH)",
    )
    args: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("Args", "args"),
        description="Arguments passed to the executable, in order",
    )


class CommandsFile(BaseModel):
    """Top-level document of the JSON commands file."""

    model_config = ConfigDict(extra="ignore")

    commands: list[CommandDefinition] = Field(
        default_factory=list,
        validation_alias=AliasChoices("Commands", "commands"),
    )

    @field_validator("commands", mode="before")
    @classmethod
    def _null_means_empty(cls, value: object) -> object:
        return [] if value is None else value


class LaunchAcknowledgement(BaseModel):
    """Confirms that a command's process was started."""

    model_config = ConfigDict(frozen=True)

    name: str
    pid: int

    @property
    def message(self) -> str:
        return f"Command {self.name} started successfully."


@dataclass
class LaunchHandle:
    """One in-flight process, owned by its completion watcher."""

    definition: CommandDefinition
    process: subprocess.Popen[bytes]
    started_at: datetime = field(default_factory=datetime.now)

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def elapsed(self) -> float:
        """Seconds since the process was started."""
        return (datetime.now() - self.started_at).total_seconds()
