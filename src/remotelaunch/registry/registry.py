"""Read-only registry of configured commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from remotelaunch.domain.models import CommandDefinition
from remotelaunch.registry.loader import load_commands

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Resolves command names to their definitions.

    Built once at startup and never modified afterwards, so it can be
    shared between concurrent requests without locking. When the same
    name is configured more than once the first definition wins.
    """

    def __init__(self, definitions: Iterable[CommandDefinition] = ()) -> None:
        self._definitions: tuple[CommandDefinition, ...] = tuple(definitions)
        by_name: dict[str, CommandDefinition] = {}
        for definition in self._definitions:
            if definition.name in by_name:
                logger.warning(
                    "Duplicate command name %r in configuration, keeping the first definition",
                    definition.name,
                )
                continue
            by_name[definition.name] = definition
        self._by_name = by_name

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> CommandRegistry:
        """Build a registry from a JSON commands file.

        Raises:
            ConfigurationError: If the file cannot be loaded.
        """
        return cls(load_commands(path))

    def resolve(self, name: str) -> CommandDefinition | None:
        """Return the definition configured under ``name``, or None."""
        return self._by_name.get(name)

    def list_names(self) -> list[str]:
        """All configured command names in ascending order."""
        return sorted(definition.name for definition in self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._definitions)
