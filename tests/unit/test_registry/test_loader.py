"""Tests for loading the JSON commands file."""

from __future__ import annotations

from pathlib import Path

import pytest

from remotelaunch.errors import ConfigurationError
from remotelaunch.registry.loader import load_commands


class TestLoadCommands:
    def test_loads_in_file_order(self, write_commands_file) -> None:
        path = write_commands_file(
            {
                "Commands": [
                    {"Name": "b", "Path": "echo", "Args": ["1", "2"]},
                    {"Name": "a", "Path": "true"},
                ]
            }
        )
        commands = load_commands(path)
        assert [c.name for c in commands] == ["b", "a"]
        assert commands[0].args == ("1", "2")
        assert commands[1].args == ()

    def test_lower_case_keys(self, write_commands_file) -> None:
        path = write_commands_file(
            {"commands": [{"name": "greet", "path": "echo", "args": ["hi"]}]}
        )
        commands = load_commands(path)
        assert commands[0].name == "greet"
        assert commands[0].args == ("hi",)

    def test_document_without_commands(self, write_commands_file) -> None:
        assert load_commands(write_commands_file({})) == []

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("", encoding="utf-8")
        assert load_commands(path) == []

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="does not exist") as exc_info:
            load_commands(tmp_path / "missing.json")
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"Commands": [', encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Error parsing config"):
            load_commands(path)

    def test_empty_name_rejected(self, write_commands_file) -> None:
        path = write_commands_file({"Commands": [{"Name": "", "Path": "echo"}]})
        with pytest.raises(ConfigurationError):
            load_commands(path)

    def test_missing_path_rejected(self, write_commands_file) -> None:
        path = write_commands_file({"Commands": [{"Name": "greet"}]})
        with pytest.raises(ConfigurationError):
            load_commands(path)

    def test_non_string_args_rejected(self, write_commands_file) -> None:
        path = write_commands_file({"Commands": [{"Name": "n", "Path": "echo", "Args": [1]}]})
        with pytest.raises(ConfigurationError):
            load_commands(path)

    def test_top_level_array_rejected(self, write_commands_file) -> None:
        path = write_commands_file([{"Name": "greet", "Path": "echo"}])
        with pytest.raises(ConfigurationError):
            load_commands(path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"Commands": [{"Name": "\xff\xfe", "Path": "echo"}]}')
        with pytest.raises(ConfigurationError, match="Could not open config"):
            load_commands(path)

    def test_unreadable_path(self, tmp_path: Path) -> None:
        directory = tmp_path / "commands.d"
        directory.mkdir()
        with pytest.raises(ConfigurationError, match="Could not open config"):
            load_commands(directory)

    def test_null_document(self, write_commands_file) -> None:
        assert load_commands(write_commands_file(None)) == []

    def test_null_commands(self, write_commands_file) -> None:
        assert load_commands(write_commands_file({"Commands": None})) == []
