"""Command-line interface for remotelaunch.

Provides the main entry point for serving the configured commands over
HTTP, or listing them without starting a server.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

EPILOG = """\
Commands file:

  The commands file contains an array of commands to expose.

  {
    "Commands": [
      {
        "Name": "command_name",
        "Path": "echo",
        "Args": ["Hello", "Remote"]
      }
    ]
  }

Command execution:

  Execute commands by sending a GET request to /run.
  http://localhost:5000/run?name=command_name
"""


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="remotelaunch",
        description="Expose an endpoint to run commands on the host machine.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-s", "--settings",
        type=Path,
        default=None,
        help="Path to YAML settings file (default: config/remotelaunch.yaml)",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to JSON commands file (default: remote.config.json)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP launcher server")
    serve_parser.add_argument(
        "--host", type=str, default=None,
        help="Host that the server should bind to (default: localhost)",
    )
    serve_parser.add_argument(
        "--port", type=int, default=None,
        help="Port that the server should bind to (default: 5000)",
    )

    subparsers.add_parser("list", help="Print the configured command names")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the remotelaunch CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from remotelaunch.config.settings import LoggingConfig, load_settings
    from remotelaunch.errors import ConfigurationError
    from remotelaunch.registry.registry import CommandRegistry
    from remotelaunch.utils.logging import setup_logging

    try:
        settings = load_settings(args.settings)
    except ConfigurationError as e:
        setup_logging(LoggingConfig())
        logger.critical("%s", e)
        sys.exit(1)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    commands_file = args.config or settings.commands_file
    try:
        registry = CommandRegistry.from_file(commands_file)
    except ConfigurationError as e:
        logger.critical("%s", e)
        sys.exit(1)

    if args.command == "serve":
        from remotelaunch.endpoint.server import main as serve

        host = args.host or settings.server.host
        port = args.port or settings.server.port
        serve(
            registry,
            host=host,
            port=port,
            gzip_minimum_size=settings.server.gzip_minimum_size,
        )

    elif args.command == "list":
        for name in registry.list_names():
            print(name)


if __name__ == "__main__":
    main()
