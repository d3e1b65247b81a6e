"""aotprobe CLI: startup timeline breakdown for launcher and AOT cache runs."""

import typer
from rich.console import Console

from aotprobe import __version__

from .commands.detect import detect
from .commands.init import init
from .commands.probe import probe
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"aotprobe {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="aotprobe",
    help="Reconstruct and break down process startup timing",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Debug logging with time and source",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """aotprobe - startup timeline breakdown."""
    configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
        debug=debug,
    )
    console = Console(no_color=no_color, highlight=not no_color)
    set_output_context(OutputContext(console=console, json_mode=json_output))


app.command()(init)
app.command()(probe)
app.command()(detect)


if __name__ == "__main__":
    app()
