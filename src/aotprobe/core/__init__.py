"""Timing engine for aotprobe.

This package contains the timeline logic, free of rendering:
- clock: Clock protocol and the system clock
- external_parser: Launcher timestamp parsing
- feature_detector: AOT cache mode detection
- phase_timer: Begin/end phase timer
- assembler: Timeline assembly
- probe: In-process probe run driving the above
"""

from .assembler import TimelineAssembler, assemble_timeline
from .clock import Clock, SystemClock
from .external_parser import (
    micros_to_millis,
    parse_external_timing,
    property_env_var,
    resolve_timing_sources,
)
from .feature_detector import detect_feature_mode, interpreter_arguments
from .phase_timer import PhaseTimer, PhaseTimerError
from .probe import ProbeResult, run_probe

__all__ = [
    "Clock",
    "PhaseTimer",
    "PhaseTimerError",
    "ProbeResult",
    "SystemClock",
    "TimelineAssembler",
    "assemble_timeline",
    "detect_feature_mode",
    "interpreter_arguments",
    "micros_to_millis",
    "parse_external_timing",
    "property_env_var",
    "resolve_timing_sources",
    "run_probe",
]
