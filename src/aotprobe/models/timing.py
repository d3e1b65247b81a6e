"""Timing models for measured phases and checkpoints."""

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Phase(BaseModel):
    """A completed, named span of work.

    Instants are milliseconds since the epoch. ``end_ms >= start_ms`` is
    expected from correct instrumentation but not enforced; a negative
    duration is reported as computed.

    Attributes:
        name: Phase name (e.g. "library-init")
        start_ms: Instant the phase began
        end_ms: Instant the phase ended
        components: Completed sub-phases, in execution order
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Phase name")
    start_ms: int = Field(description="Start instant in ms")
    end_ms: int = Field(description="End instant in ms")
    components: tuple["Phase", ...] = Field(default=(), description="Sub-phases")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms


class Checkpoint(BaseModel):
    """A single named instant recorded during startup."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Checkpoint name")
    at_ms: int = Field(description="Recorded instant in ms")
