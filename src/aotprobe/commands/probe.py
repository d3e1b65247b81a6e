"""Probe command: measure this process's startup and render the breakdown."""

import logging
from pathlib import Path

import typer

from .. import IMPORTED_AT_MS
from ..config import ConfigError, default_config_path, load_config
from ..constants import REPORT_PHASE
from ..core import PhaseTimer, SystemClock, interpreter_arguments, run_probe
from ..output import get_output_context
from ..report import build_report, render_footer

logger = logging.getLogger(__name__)


def parse_properties(definitions: list[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` definitions; a bare ``KEY`` maps to an empty string.

    Later definitions of the same key win.
    """
    properties = {}
    for definition in definitions:
        key, _, value = definition.partition("=")
        properties[key] = value
    return properties


def probe(
    args: list[str] | None = typer.Argument(None, help="Application arguments to pass through"),
    define: list[str] | None = typer.Option(
        None,
        "--define",
        "-D",
        help="Property KEY=VALUE (e.g. -D jarrunner.start.micros=1700000000000000)",
    ),
    runtime_arg: list[str] | None = typer.Option(
        None,
        "--runtime-arg",
        "-J",
        help="Runtime argument to scan for AOT mode (defaults to the interpreter options)",
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to aotprobe.toml"
    ),
) -> None:
    """Measure startup phases of this process and print the timeline."""
    ctx = get_output_context()

    try:
        config = load_config(config_path or default_config_path())
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None

    runtime_args = runtime_arg if runtime_arg is not None else interpreter_arguments()
    logger.debug(f"Scanning {len(runtime_args)} runtime arguments for AOT mode")

    clock = SystemClock()
    result = run_probe(
        clock,
        config=config,
        properties=parse_properties(define or []),
        runtime_args=runtime_args,
        app_args=args or [],
        imported_at_ms=IMPORTED_AT_MS,
    )

    with PhaseTimer(REPORT_PHASE, clock) as report_timer:
        ctx.emit(
            result.timeline,
            *build_report(
                result.timeline,
                result.argument_lines,
                show_components=config.report.show_components,
            ),
        )
    ctx.print(render_footer(report_timer.phase), style="dim")
