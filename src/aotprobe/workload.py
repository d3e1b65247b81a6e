"""Synthetic work executed inside the measured phases.

The library workloads touch a third-party library just enough to force its
import-time and first-use initialization; their results are discarded. Each
workload is timed as one component of the library-init phase.
"""

import io
from collections.abc import Callable, Sequence

import tomli_w
from pydantic import BaseModel
from rich.console import Console
from rich.panel import Panel


def exercise_pydantic() -> str:
    """Build and validate a throwaway model."""

    class Sample(BaseModel):
        name: str
        value: int
        tags: list[str] = []

    sample = Sample.model_validate({"name": "test", "value": "123", "tags": ["a", "b"]})
    return sample.model_dump_json()


def exercise_rich() -> str:
    """Render a panel into an in-memory console."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=40, force_terminal=False)
    console.print(Panel("one, two, three, four, five", title="sample"))
    return buffer.getvalue()


def exercise_tomli_w() -> str:
    """Serialize a small document."""
    return tomli_w.dumps({"sample": {"a": 1, "b": 2, "c": 3, "joined": "one, two, three"}})


# Executed in this order; names appear as component rows in the report
LIBRARY_WORKLOADS: tuple[tuple[str, Callable[[], str]], ...] = (
    ("pydantic", exercise_pydantic),
    ("rich", exercise_rich),
    ("tomli_w", exercise_tomli_w),
)


def format_arguments(args: Sequence[str]) -> list[str]:
    """Format pass-through application arguments for display."""
    if not args:
        return ["(no arguments)"]
    return [f"args[{i}]: {arg}" for i, arg in enumerate(args)]
