"""Probe run: measure this process's startup phases and build its timeline.

The sequence mirrors a launcher-started application:
1. Record the import and main-start checkpoints
2. Read launcher timing and detect the AOT cache mode
3. Library initialization, timed per library
4. Application work on the pass-through arguments
5. Assemble the timeline
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from ..config import ProbeConfig
from ..constants import (
    APPLICATION_WORK_PHASE,
    IMPORT_CHECKPOINT,
    LIBRARY_INIT_PHASE,
    MAIN_START_CHECKPOINT,
)
from ..models import Checkpoint, Timeline
from ..workload import LIBRARY_WORKLOADS, format_arguments
from .assembler import TimelineAssembler
from .clock import Clock
from .external_parser import parse_external_timing, resolve_timing_sources
from .feature_detector import detect_feature_mode
from .phase_timer import PhaseTimer


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a probe run.

    Attributes:
        timeline: Assembled startup timeline
        argument_lines: Pass-through arguments formatted by the application phase
    """

    timeline: Timeline
    argument_lines: list[str] = field(default_factory=list)


def run_probe(
    clock: Clock,
    *,
    config: ProbeConfig,
    properties: Mapping[str, str],
    runtime_args: Sequence[str],
    app_args: Sequence[str] = (),
    imported_at_ms: int | None = None,
    environ: Mapping[str, str] | None = None,
) -> ProbeResult:
    """Run the measured phases and assemble the timeline.

    Args:
        clock: Clock for all instants and the reference
        config: Lookup names and prefixes
        properties: -D style properties carrying launcher timing
        runtime_args: Runtime arguments scanned for the AOT cache mode
        app_args: Pass-through application arguments
        imported_at_ms: Instant the package was imported, if known
        environ: Environment for property fallback (defaults to os.environ)

    Returns:
        ProbeResult with the timeline and formatted arguments
    """
    checkpoints = []
    if imported_at_ms is not None:
        checkpoints.append(Checkpoint(name=IMPORT_CHECKPOINT, at_ms=imported_at_ms))
    checkpoints.append(Checkpoint(name=MAIN_START_CHECKPOINT, at_ms=clock.now_ms()))

    start, handoff = resolve_timing_sources(config.external, properties, environ)
    external = parse_external_timing(start, handoff)
    feature = detect_feature_mode(
        runtime_args,
        use_prefix=config.feature.use_prefix,
        create_prefix=config.feature.create_prefix,
    )

    with PhaseTimer(LIBRARY_INIT_PHASE, clock) as library_timer:
        for name, workload in LIBRARY_WORKLOADS:
            with PhaseTimer(name, clock) as component:
                workload()
            library_timer.add_component(component.phase)

    with PhaseTimer(APPLICATION_WORK_PHASE, clock) as work_timer:
        argument_lines = format_arguments(app_args)

    timeline = TimelineAssembler(clock).assemble(
        external=external,
        feature=feature,
        phases=[library_timer.phase, work_timer.phase],
        checkpoints=checkpoints,
    )
    return ProbeResult(timeline=timeline, argument_lines=argument_lines)
