"""remotelaunch -- Fire-and-forget HTTP command launcher.

Loads a fixed list of named commands from a JSON file and exposes a small
HTTP API that starts them on the host by name. Callers are told only that
a command started; how it finishes is recorded in the operational log.
"""

__version__ = "0.1.0"
