"""Init command implementation."""

import typer

from ..config import default_config_path, write_config_template
from ..output import get_output_context


def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write an aotprobe.toml template in the current directory."""
    ctx = get_output_context()
    config_path = default_config_path()

    if config_path.exists() and not force:
        ctx.error(f"Config already exists: {config_path}", {"path": str(config_path)})
        raise typer.Exit(1)

    write_config_template(config_path)
    ctx.result(
        {"created": str(config_path)},
        f"[green]Created config template:[/green] {config_path}",
    )
