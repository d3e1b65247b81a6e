"""Detect command: report the AOT cache mode for a set of runtime arguments."""

from pathlib import Path

import typer

from ..config import ConfigError, default_config_path, load_config
from ..core import detect_feature_mode
from ..output import get_output_context
from ..report import render_feature


def detect(
    runtime_arg: list[str] | None = typer.Option(
        None, "--runtime-arg", "-J", help="Runtime argument, in runtime order"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to aotprobe.toml"
    ),
) -> None:
    """Show which AOT cache mode the given runtime arguments select."""
    ctx = get_output_context()

    try:
        config = load_config(config_path or default_config_path())
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None

    mode = detect_feature_mode(
        runtime_arg or [],
        use_prefix=config.feature.use_prefix,
        create_prefix=config.feature.create_prefix,
    )
    ctx.emit(mode, render_feature(mode))
