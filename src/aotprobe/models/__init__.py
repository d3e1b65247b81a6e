"""Pydantic data models for aotprobe timelines.

This package defines the values that flow through the timing engine:
- Launcher timing parsed from external timestamps (ExternalTiming)
- AOT cache mode detected from runtime arguments (FeatureMode, FeatureState)
- Measured spans and instants (Phase, Checkpoint)
- The assembled report value (Timeline, PhaseSpan, CheckpointOffset)

All models are frozen Pydantic BaseModel subclasses, enabling:
- Immutability once constructed
- JSON serialization for --json output

Example:
    >>> from aotprobe.models import Phase
    >>> Phase(name="library-init", start_ms=1010, end_ms=1035).duration_ms
    25
"""

from .external import ExternalTiming
from .feature import FeatureMode, FeatureState
from .timeline import CheckpointOffset, PhaseSpan, Timeline
from .timing import Checkpoint, Phase

__all__ = [
    "Checkpoint",
    "CheckpointOffset",
    "ExternalTiming",
    "FeatureMode",
    "FeatureState",
    "Phase",
    "PhaseSpan",
    "Timeline",
]
