"""Configuration management for covserve.

Loads settings from an optional YAML configuration file with
environment variable overrides. Every default reproduces the
tool's fixed behavior, so running without any configuration serves
``htmlcov`` on port 8080 and tests ``.``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/covserve.yaml")


class ServerConfig(BaseModel):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=0, le=65535, description="0 picks a free port")
    directory: str = Field(default="htmlcov", description="Directory served over HTTP")
    placeholder_index: bool = Field(
        default=False,
        description="Write a placeholder index.html until coverage produces one",
    )


class RunnerConfig(BaseModel):
    default_test_path: str = Field(default=".")
    python: str = Field(default="python", description="Interpreter used to launch coverage")
    exit_keyword: str = Field(default="exit", min_length=1)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for covserve.

    Nested values can be overridden from the environment, e.g.
    ``COVSERVE_SERVER__PORT=9000``. Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "COVSERVE_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    server: ServerConfig = Field(default_factory=ServerConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: YAML file > env vars > .env file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.debug("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)
