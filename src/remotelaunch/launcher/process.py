"""Launcher backed by real OS processes.

Each command is started with ``subprocess.Popen`` using its argument
vector as-is, so no shell ever interprets the arguments. A watcher task
per process polls for the exit and logs the outcome.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess

from remotelaunch.domain.models import CommandDefinition, LaunchAcknowledgement, LaunchHandle
from remotelaunch.errors import PostSpawnExecutionError, SpawnError
from remotelaunch.launcher.base import Launcher

logger = logging.getLogger(__name__)

# Seconds between exit checks in a watcher
DEFAULT_POLL_INTERVAL = 0.25


class ProcessLauncher(Launcher):
    """Spawns command processes and watches them out of band.

    There is no limit on concurrent processes and no deduplication:
    launching the same command twice starts two processes. Launched
    processes are never cancelled or timed out, and they outlive the
    server if it stops first.
    """

    def __init__(self, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        self._poll_interval = poll_interval
        # Strong references so running watchers are not garbage-collected.
        self._watchers: set[asyncio.Task[None]] = set()

    @property
    def active_count(self) -> int:
        return len(self._watchers)

    async def launch(self, definition: CommandDefinition) -> LaunchAcknowledgement:
        try:
            process = subprocess.Popen(
                [definition.path, *definition.args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            logger.error("Failed to start command %s: %s", definition.name, e)
            raise SpawnError(str(e), command=definition.name) from e

        handle = LaunchHandle(definition=definition, process=process)
        logger.info("Started command %s (pid=%d)", handle.name, handle.pid)

        task = asyncio.create_task(
            self._watch(handle), name=f"watch-{handle.name}-{handle.pid}"
        )
        self._watchers.add(task)
        task.add_done_callback(self._watchers.discard)

        return LaunchAcknowledgement(name=handle.name, pid=handle.pid)

    async def detach(self) -> None:
        if not self._watchers:
            return
        logger.info(
            "Detaching from %d running command(s); they will keep running",
            len(self._watchers),
        )
        watchers = list(self._watchers)
        for task in watchers:
            task.cancel()
        await asyncio.gather(*watchers, return_exceptions=True)

    async def _watch(self, handle: LaunchHandle) -> None:
        """Wait for the process to exit and log how it ended."""
        try:
            await self._wait(handle)
        except PostSpawnExecutionError as e:
            logger.warning("%s (pid=%d, ran %.1fs)", e, handle.pid, handle.elapsed)
        else:
            logger.info(
                "Command %s (pid=%d) completed successfully in %.1fs",
                handle.name, handle.pid, handle.elapsed,
            )

    async def _wait(self, handle: LaunchHandle) -> None:
        """Block until the process exits.

        Raises:
            PostSpawnExecutionError: If the process exited with a non-zero
                status or was killed by a signal.
        """
        while (returncode := handle.process.poll()) is None:
            await asyncio.sleep(self._poll_interval)
        if returncode != 0:
            raise PostSpawnExecutionError(handle.name, returncode)
