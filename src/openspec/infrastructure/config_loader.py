"""
Project Configuration Loader

Reads the optional `.openspec.yaml` file from the project root and
applies environment overrides.

Example .openspec.yaml:
    openspec_dir: openspec
    tools:
      - gemini
      - qwen
"""

import os
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from openspec.core.domain.config_schema import OpenSpecConfigSchema
from openspec.core.domain.errors import ConfigError

CONFIG_FILE_NAME = ".openspec.yaml"
OPENSPEC_DIR_ENV = "OPENSPEC_DIR"

logger = structlog.get_logger(__name__)


def load_openspec_config(project_path: str | Path) -> OpenSpecConfigSchema:
    """
    Load project configuration.

    Args:
        project_path: Project root directory

    Returns:
        Validated configuration; defaults when no config file exists

    Raises:
        ConfigError: If the file cannot be parsed or fails validation
    """
    config_path = Path(project_path) / CONFIG_FILE_NAME
    data: dict = {}

    if config_path.is_file():
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in {config_path}: {e}",
                details={"path": str(config_path)},
            ) from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"{config_path} must contain a mapping",
                details={"path": str(config_path)},
            )
        logger.debug(
            "config.loaded", component="config_loader", path=str(config_path)
        )

    env_dir = os.getenv(OPENSPEC_DIR_ENV)
    if env_dir:
        data = {**data, "openspec_dir": env_dir}

    try:
        return OpenSpecConfigSchema(**data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration in {config_path}: {e}",
            details={"path": str(config_path), "errors": e.errors()},
        ) from e
