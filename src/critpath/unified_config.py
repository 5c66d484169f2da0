"""Configuration file loading.

A single ``critpath_config.yaml`` holds all settings. Currently it has one
section, ``scheduler``, mapping onto SchedulingConfig.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from . import context
from .exceptions import ParseError
from .scheduler import SchedulingConfig

CONFIG_FILENAME = "critpath_config.yaml"


class UnifiedConfig(BaseModel):
    """Top-level configuration."""

    scheduler: SchedulingConfig = Field(default_factory=SchedulingConfig)


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ParseError: If the file is not valid YAML or fails validation
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse config YAML: {e}") from e

    # An empty file means all defaults
    if data is None:
        return UnifiedConfig()
    if not isinstance(data, dict):
        raise ParseError("Config must contain a dictionary at the root level")

    try:
        return UnifiedConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Invalid config in {config_path}: {e}") from e


def discover_config(
    project_path: Path | str | None = None,
    config_path: Path | None = None,
) -> UnifiedConfig | None:
    """Find and load the configuration file.

    Search order:
    1. Explicit config_path argument
    2. Global context (set via CLI --config)
    3. Project file directory / critpath_config.yaml
    4. Current directory / critpath_config.yaml
    """
    if config_path is not None:
        return load_unified_config(config_path)

    ctx_config = context.get_config_path()
    if ctx_config is not None:
        return load_unified_config(ctx_config)

    if project_path is not None:
        dir_config = Path(project_path).parent / CONFIG_FILENAME
        if dir_config.exists():
            return load_unified_config(dir_config)

    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return load_unified_config(cwd_config)

    return None
