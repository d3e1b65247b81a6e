"""Output routing for aotprobe CLI: rich renderables or JSON."""

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from rich.console import Console, RenderableType
from rich.markup import escape


@dataclass
class OutputContext:
    """Where command output goes and in which format."""

    console: Console
    json_mode: bool = False

    def print(self, message: RenderableType, style: str | None = None) -> None:
        """Print a message or renderable; suppressed in JSON mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_json(self, data: dict[str, Any]) -> None:
        """Print JSON data to stdout; only in JSON mode."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def emit(self, model: BaseModel, *renderables: RenderableType) -> None:
        """Emit a model as JSON, or its human-readable renderables."""
        if self.json_mode:
            self.print_json(model.model_dump(mode="json"))
            return
        for renderable in renderables:
            self.console.print(renderable)

    def result(self, data: dict[str, Any], message: str = "") -> None:
        """Print a result as JSON data or as a message."""
        if self.json_mode:
            self.print_json(data)
        elif message:
            self.console.print(message)

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print an error as JSON or in red."""
        if self.json_mode:
            self.print_json({"error": message, **(data or {})})
        else:
            self.console.print(f"[red]Error: {escape(message)}[/red]")


# Set by the cli.py main callback
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Current output context, or a plain stdout one before CLI setup."""
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext) -> None:
    global _ctx
    _ctx = ctx
