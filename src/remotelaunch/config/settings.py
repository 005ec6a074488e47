"""Configuration management for remotelaunch.

Loads server settings from a YAML configuration file with environment
variable overrides. Supports .env files. The list of commands itself
lives in the separate JSON commands file (see ``remotelaunch.registry``).
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from remotelaunch.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/remotelaunch.yaml")


class ServerConfig(BaseModel):
    host: str = Field(default="localhost", description="Host that the server binds to")
    port: int = Field(default=5000, ge=1, le=65535)
    gzip_minimum_size: int = Field(
        default=500, ge=0, description="Smallest response body worth compressing, in bytes"
    )


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for remotelaunch.

    Loads from YAML file and supports environment variable overrides,
    e.g. ``REMOTELAUNCH_SERVER__PORT=8000``. Reads .env files
    automatically.
    """

    model_config = {
        "env_prefix": "REMOTELAUNCH_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    commands_file: Path = Field(default=Path("remote.config.json"))

    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: init values (YAML) > env vars > .env file > defaults

    Raises:
        ConfigurationError: If the YAML file is malformed or holds
            invalid values.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Could not open settings at {path}\n{e}", path=path) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing settings at {path}\n{e}", path=path) from e
        if not isinstance(yaml_data, dict):
            raise ConfigurationError(f"Settings at {path} must be a mapping", path=path)
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    try:
        return Settings(**yaml_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings in {path}\n{e}", path=path) from e
