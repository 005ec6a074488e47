"""Loading command definitions from the JSON commands file.

The file holds a single object with a ``Commands`` array::

    {
      "Commands": [
        {"Name": "greet", "Path": "echo", "Args": ["Hello", "Remote"]}
      ]
    }

An empty file is treated as an empty command list.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from remotelaunch.domain.models import CommandDefinition, CommandsFile
from remotelaunch.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_COMMANDS_PATH = Path("remote.config.json")


def load_commands(path: Path | str | None = None) -> list[CommandDefinition]:
    """Read and validate every command definition in the file, in file order.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not valid
            JSON, or contains an invalid command entry.
    """
    path = Path(path) if path else DEFAULT_COMMANDS_PATH

    if not path.exists():
        raise ConfigurationError(f"Config file does not exist at {path}", path=path)

    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Could not open config at {path}\n{e}", path=path) from e

    if not text.strip():
        logger.warning("Config file %s is empty, no commands loaded", path)
        return []

    try:
        raw = json.loads(text)
        # A null document means no commands, same as an empty file
        document = CommandsFile.model_validate({} if raw is None else raw)
    except (json.JSONDecodeError, ValidationError) as e:
        raise ConfigurationError(f"Error parsing config at {path}\n{e}", path=path) from e

    logger.info("Loaded %d command(s) from %s", len(document.commands), path)
    return document.commands
