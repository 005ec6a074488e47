"""Command registry for remotelaunch.

Public API:
    CommandRegistry -- Name to definition lookup, immutable after load
    load_commands -- Parse the JSON commands file
"""

from remotelaunch.registry.loader import DEFAULT_COMMANDS_PATH, load_commands
from remotelaunch.registry.registry import CommandRegistry

__all__ = ["CommandRegistry", "DEFAULT_COMMANDS_PATH", "load_commands"]
