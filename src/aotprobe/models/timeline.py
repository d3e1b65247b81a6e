"""Assembled startup timeline.

A Timeline is built once per run from finalized inputs and expresses every
phase and checkpoint relative to a single reference instant (the runtime's
own start). It is frozen and handed as-is to the report renderer or the
JSON output.
"""

from pydantic import BaseModel, ConfigDict, Field

from .external import ExternalTiming
from .feature import FeatureMode


class PhaseSpan(BaseModel):
    """A phase with its offsets from the reference instant."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Phase name")
    start_ms: int = Field(description="Start instant in ms")
    end_ms: int = Field(description="End instant in ms")
    duration_ms: int = Field(description="end_ms - start_ms")
    start_offset_ms: int = Field(description="start_ms - reference")
    end_offset_ms: int = Field(description="end_ms - reference")
    components: tuple["PhaseSpan", ...] = Field(default=(), description="Sub-phase spans")


class CheckpointOffset(BaseModel):
    """A checkpoint with its offset from the reference instant."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Checkpoint name")
    at_ms: int = Field(description="Recorded instant in ms")
    offset_ms: int = Field(description="at_ms - reference")
    since_previous_ms: int = Field(
        description="Gap from the previous checkpoint (from the reference for the first)"
    )


class Timeline(BaseModel):
    """Single-run startup timeline.

    Attributes:
        reference_ms: Zero point for all offsets (runtime start)
        assembled_at_ms: Instant the timeline was assembled
        external: Launcher timing, possibly unavailable
        feature: Detected AOT cache mode
        checkpoints: Checkpoints in recorded order
        phases: Phases in execution order
        total_elapsed_ms: assembled_at_ms - reference_ms
        grand_total_ms: Launcher overhead + total elapsed, None without launcher timing
    """

    model_config = ConfigDict(frozen=True)

    reference_ms: int
    assembled_at_ms: int
    external: ExternalTiming
    feature: FeatureMode
    checkpoints: tuple[CheckpointOffset, ...] = ()
    phases: tuple[PhaseSpan, ...] = ()
    total_elapsed_ms: int
    grand_total_ms: int | None = None

    @property
    def launcher_overhead_ms(self) -> int | None:
        return self.external.overhead_ms

    def get_phase(self, name: str) -> PhaseSpan | None:
        """Return the first top-level phase with the given name."""
        return next((p for p in self.phases if p.name == name), None)

    def get_checkpoint(self, name: str) -> CheckpointOffset | None:
        """Return the first checkpoint with the given name."""
        return next((c for c in self.checkpoints if c.name == name), None)
