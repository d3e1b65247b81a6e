"""Rich rendering of an assembled Timeline."""

from collections.abc import Sequence

from rich.console import Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import FeatureMode, FeatureState, Phase, Timeline


def _offset(ms: int) -> str:
    return f"T+{ms}"


def render_feature(feature: FeatureMode) -> Panel:
    """AOT cache status block."""
    lines = [
        f"[bold]Enabled:[/bold] {feature.enabled}",
        f"[bold]Mode:[/bold]    {feature.label}",
    ]
    if feature.path is not None:
        lines.append(f"[bold]Path:[/bold]    {escape(feature.path)}")
    return Panel("\n".join(lines), title="AOT Status", expand=False)


def render_timeline(timeline: Timeline) -> Table:
    """Chronological events, all offsets from the runtime start."""
    table = Table(title="Timeline (all times in milliseconds)", show_header=True)
    table.add_column("Offset", justify="right", style="cyan")
    table.add_column("Event")

    overhead = timeline.launcher_overhead_ms
    if overhead is not None:
        table.add_row("T+0", "Launcher starts")
        table.add_row(_offset(overhead), f"Runtime invoked (launcher overhead: {overhead} ms)")

    table.add_row("T+0", "Runtime process starts (reference point)")
    for checkpoint in timeline.checkpoints:
        table.add_row(
            _offset(checkpoint.offset_ms),
            f"{checkpoint.name} (+{checkpoint.since_previous_ms} ms)",
        )
    for span in timeline.phases:
        table.add_row(_offset(span.start_offset_ms), f"{span.name} starts")
        table.add_row(
            _offset(span.end_offset_ms), f"{span.name} complete ({span.duration_ms} ms)"
        )
    table.add_row(_offset(timeline.total_elapsed_ms), "Preparing to exit")
    return table


def render_breakdown(timeline: Timeline, show_components: bool = True) -> Table:
    """Per-stage durations with totals."""
    table = Table(title="Performance Breakdown", show_header=True)
    table.add_column("Stage")
    table.add_column("ms", justify="right", style="bold")

    if timeline.launcher_overhead_ms is not None:
        table.add_row("Launcher", str(timeline.launcher_overhead_ms))

    previous = "runtime start"
    for checkpoint in timeline.checkpoints:
        table.add_row(f"{previous} -> {checkpoint.name}", str(checkpoint.since_previous_ms))
        previous = checkpoint.name

    for span in timeline.phases:
        table.add_row(span.name, str(span.duration_ms))
        if show_components:
            for component in span.components:
                table.add_row(f"  {component.name}", str(component.duration_ms), style="dim")

    table.add_section()
    table.add_row("TOTAL (runtime start -> exit)", str(timeline.total_elapsed_ms))
    if timeline.grand_total_ms is not None:
        table.add_row("GRAND TOTAL (launcher -> exit)", str(timeline.grand_total_ms))
    return table


def render_aot_analysis(feature: FeatureMode) -> Panel | None:
    """Guidance for the detected AOT mode, None when disabled."""
    if feature.state is FeatureState.CREATE:
        body = (
            "This is the FIRST RUN - creating the AOT cache.\n"
            "Run again to see the effect of reusing it."
        )
    elif feature.state is FeatureState.USE:
        body = (
            "Using the AOT cache - startup should be significantly faster.\n"
            "Compare with a run without the cache."
        )
    else:
        return None
    return Panel(body, title=f"AOT Analysis: {feature.label}", expand=False)


def build_report(
    timeline: Timeline,
    argument_lines: Sequence[str] = (),
    show_components: bool = True,
) -> list[RenderableType]:
    """All report sections in display order."""
    sections: list[RenderableType] = [render_feature(timeline.feature)]
    if argument_lines:
        # Arguments are user input; render as plain text, not markup
        arguments = Group(*(Text(line) for line in argument_lines))
        sections.append(Panel(arguments, title="Application arguments", expand=False))
    sections.append(render_timeline(timeline))
    sections.append(render_breakdown(timeline, show_components=show_components))
    analysis = render_aot_analysis(timeline.feature)
    if analysis is not None:
        sections.append(analysis)
    return sections


def render_footer(report_phase: Phase) -> str:
    return f"Report generated in {report_phase.duration_ms} ms"
