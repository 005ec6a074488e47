"""Configuration management for remotelaunch.

Loads and validates YAML-based server configuration with Pydantic
models. Supports environment variable overrides.
"""

from remotelaunch.config.settings import LoggingConfig, ServerConfig, Settings, load_settings

__all__ = ["LoggingConfig", "ServerConfig", "Settings", "load_settings"]
