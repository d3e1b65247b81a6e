"""Configuration management for aotprobe."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import (
    AOT_CREATE_PREFIX,
    AOT_USE_PREFIX,
    CONFIG_FILENAME,
    LAUNCHER_HANDOFF_PROPERTY,
    LAUNCHER_START_PROPERTY,
)


class ConfigError(Exception):
    """Config file could not be read or validated."""


class ExternalConfig(BaseModel):
    """Where the launcher timestamps are looked up."""

    start_property: str = Field(
        default=LAUNCHER_START_PROPERTY, description="Property carrying launcher start (us)"
    )
    handoff_property: str = Field(
        default=LAUNCHER_HANDOFF_PROPERTY,
        description="Property carrying the pre-runtime handoff instant (us)",
    )


class FeatureConfig(BaseModel):
    """Runtime argument prefixes that select the AOT cache mode."""

    use_prefix: str = Field(default=AOT_USE_PREFIX, min_length=1)
    create_prefix: str = Field(default=AOT_CREATE_PREFIX, min_length=1)


class ReportConfig(BaseModel):
    """Report rendering options."""

    show_components: bool = True  # Per-library rows under library-init


class ProbeConfig(BaseModel):
    """Root configuration for aotprobe."""

    external: ExternalConfig = Field(default_factory=ExternalConfig)
    feature: FeatureConfig = Field(default_factory=FeatureConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)


def default_config_path(directory: Path | None = None) -> Path:
    """Path of the config file in ``directory`` (cwd by default)."""
    return (directory or Path.cwd()) / CONFIG_FILENAME


def load_config(config_path: Path) -> ProbeConfig:
    """Load config from a TOML file.

    Args:
        config_path: Path to aotprobe.toml

    Returns:
        Loaded configuration, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    if not config_path.exists():
        return ProbeConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return ProbeConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e


def write_config_template(config_path: Path) -> Path:
    """Write default config template.

    Args:
        config_path: Destination path (overwritten if present)

    Returns:
        Path to the written config file
    """
    template = {
        "external": {
            "start_property": LAUNCHER_START_PROPERTY,
            "handoff_property": LAUNCHER_HANDOFF_PROPERTY,
        },
        "feature": {"use_prefix": AOT_USE_PREFIX, "create_prefix": AOT_CREATE_PREFIX},
        "report": {"show_components": True},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
