"""Project configuration loaded from test-rig.config.yaml."""

from collections.abc import Sequence
from pathlib import Path
from typing import Literal

import yaml
from pydantic import Field, ValidationError

from testrig.models.base import Model

CONFIG_FILE_NAME = "test-rig.config.yaml"


class ConfigError(Exception):
    """Raised when the project configuration is invalid."""


class ConfigNotFoundError(ConfigError):
    """Raised when the project has no configuration file."""


class CoverageThreshold(Model):
    """Minimum coverage percentages per test type."""

    unit: int = Field(default=80, ge=0, le=100)
    integration: int = Field(default=60, ge=0, le=100)


class RigConfig(Model):
    """Project-level test-rig settings."""

    framework: Literal["vitest", "pytest"] = Field(
        ..., description="Runner key used for test execution"
    )
    parallel_agents: int = Field(default=4, ge=1, description="Default worker count")
    containers: Sequence[str] = Field(
        default_factory=list, description="Service containers as name:port"
    )
    coverage_threshold: CoverageThreshold = Field(default_factory=CoverageThreshold)


def load_config(project_path: Path) -> RigConfig:
    """Load the configuration of the project at ``project_path``.

    Raises:
        ConfigNotFoundError: If the configuration file is missing
        ConfigError: If the file is unreadable, not valid YAML or fails
            validation

    """
    config_path = project_path / CONFIG_FILE_NAME
    if not config_path.exists():
        raise ConfigNotFoundError(f"{CONFIG_FILE_NAME} not found in {project_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    try:
        return RigConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
