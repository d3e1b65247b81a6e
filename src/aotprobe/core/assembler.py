"""Timeline assembly from finalized timing inputs.

All offsets are plain integer differences against the reference instant;
nothing is rounded, clamped or validated. ``assemble_timeline`` is a pure
function of its arguments; ``TimelineAssembler`` binds it to a clock for
the reference and assembly instants.
"""

import logging
from collections.abc import Sequence

from ..models import (
    Checkpoint,
    CheckpointOffset,
    ExternalTiming,
    FeatureMode,
    Phase,
    PhaseSpan,
    Timeline,
)
from .clock import Clock

logger = logging.getLogger(__name__)


def _span(phase: Phase, reference_ms: int) -> PhaseSpan:
    return PhaseSpan(
        name=phase.name,
        start_ms=phase.start_ms,
        end_ms=phase.end_ms,
        duration_ms=phase.end_ms - phase.start_ms,
        start_offset_ms=phase.start_ms - reference_ms,
        end_offset_ms=phase.end_ms - reference_ms,
        components=tuple(_span(c, reference_ms) for c in phase.components),
    )


def _checkpoint_offsets(
    checkpoints: Sequence[Checkpoint], reference_ms: int
) -> tuple[CheckpointOffset, ...]:
    offsets = []
    previous_ms = reference_ms
    for checkpoint in checkpoints:
        offsets.append(
            CheckpointOffset(
                name=checkpoint.name,
                at_ms=checkpoint.at_ms,
                offset_ms=checkpoint.at_ms - reference_ms,
                since_previous_ms=checkpoint.at_ms - previous_ms,
            )
        )
        previous_ms = checkpoint.at_ms
    return tuple(offsets)


def assemble_timeline(
    *,
    reference_ms: int,
    assembled_at_ms: int,
    external: ExternalTiming,
    feature: FeatureMode,
    phases: Sequence[Phase],
    checkpoints: Sequence[Checkpoint] = (),
) -> Timeline:
    """Build the timeline for a single run.

    Args:
        reference_ms: Zero point for offsets (runtime start)
        assembled_at_ms: Instant of assembly, end of the measured run
        external: Launcher timing (may be unavailable)
        feature: Detected AOT cache mode
        phases: Completed phases in execution order
        checkpoints: Recorded instants in order

    Returns:
        Immutable Timeline
    """
    total_elapsed_ms = assembled_at_ms - reference_ms
    overhead_ms = external.overhead_ms
    grand_total_ms = None if overhead_ms is None else overhead_ms + total_elapsed_ms

    return Timeline(
        reference_ms=reference_ms,
        assembled_at_ms=assembled_at_ms,
        external=external,
        feature=feature,
        checkpoints=_checkpoint_offsets(checkpoints, reference_ms),
        phases=tuple(_span(p, reference_ms) for p in phases),
        total_elapsed_ms=total_elapsed_ms,
        grand_total_ms=grand_total_ms,
    )


class TimelineAssembler:
    """Assembles timelines against the runtime start reported by a clock."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    def assemble(
        self,
        external: ExternalTiming,
        feature: FeatureMode,
        phases: Sequence[Phase],
        checkpoints: Sequence[Checkpoint] = (),
    ) -> Timeline:
        """Assemble a timeline ending now."""
        reference_ms = self._clock.start_ms()
        assembled_at_ms = self._clock.now_ms()
        timeline = assemble_timeline(
            reference_ms=reference_ms,
            assembled_at_ms=assembled_at_ms,
            external=external,
            feature=feature,
            phases=phases,
            checkpoints=checkpoints,
        )
        logger.debug(
            f"Assembled timeline: {len(timeline.phases)} phases, "
            f"total {timeline.total_elapsed_ms} ms"
        )
        return timeline
