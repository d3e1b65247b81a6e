"""External launcher timing model."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class ExternalTiming(BaseModel):
    """Launcher timestamps converted to milliseconds.

    Both instants are present or both are absent. A negative overhead
    (handoff before launcher start) is kept as observed.

    Attributes:
        launcher_start_ms: Instant the external launcher started
        handoff_ms: Instant the launcher handed control to the runtime
    """

    model_config = ConfigDict(frozen=True)

    launcher_start_ms: int | None = Field(default=None, description="Launcher start in ms")
    handoff_ms: int | None = Field(default=None, description="Pre-runtime handoff in ms")

    @model_validator(mode="after")
    def validate_both_or_neither(self) -> Self:
        """Reject a half-populated timing."""
        if (self.launcher_start_ms is None) != (self.handoff_ms is None):
            raise ValueError("launcher_start_ms and handoff_ms must both be set or both be None")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overhead_ms(self) -> int | None:
        """Time spent in the launcher before the runtime was invoked."""
        if self.launcher_start_ms is None or self.handoff_ms is None:
            return None
        return self.handoff_ms - self.launcher_start_ms

    @property
    def available(self) -> bool:
        """True if launcher timing was supplied and parsed."""
        return self.launcher_start_ms is not None

    @classmethod
    def unavailable(cls) -> "ExternalTiming":
        """Timing for a run without (usable) launcher timestamps."""
        return cls()
