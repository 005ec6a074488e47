"""Shared test fixtures for the remotelaunch test suite.

Provides command definitions, registries, commands files on disk, and a
mock launcher so HTTP tests never start real processes.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from remotelaunch.domain.models import CommandDefinition, LaunchAcknowledgement
from remotelaunch.launcher.process import ProcessLauncher
from remotelaunch.registry.registry import CommandRegistry


# ---------------------------------------------------------------------------
# Command Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def greet_definition() -> CommandDefinition:
    """The echo command used throughout the examples."""
    return CommandDefinition(name="greet", path="echo", args=("hello",))


@pytest.fixture
def registry(greet_definition: CommandDefinition) -> CommandRegistry:
    """A registry holding only the greet command."""
    return CommandRegistry([greet_definition])


@pytest.fixture
def python_command():
    """Build a definition that runs a Python snippet with this interpreter."""

    def _make(name: str, code: str) -> CommandDefinition:
        return CommandDefinition(name=name, path=sys.executable, args=("-c", code))

    return _make


@pytest.fixture
def write_commands_file(tmp_path: Path):
    """Write a commands document to a JSON file and return its path."""

    def _write(document: object, filename: str = "remote.config.json") -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Mock Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_launcher() -> AsyncMock:
    """A mock ProcessLauncher that acknowledges every launch."""
    launcher = AsyncMock(spec=ProcessLauncher)
    launcher.launch.side_effect = lambda definition: LaunchAcknowledgement(
        name=definition.name, pid=4242
    )
    return launcher
