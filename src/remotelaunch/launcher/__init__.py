"""Launch controller for remotelaunch.

Public API:
    Launcher -- Abstract base class
    ProcessLauncher -- Starts real OS processes and watches them
"""

from remotelaunch.launcher.base import Launcher
from remotelaunch.launcher.process import ProcessLauncher

__all__ = ["Launcher", "ProcessLauncher"]
