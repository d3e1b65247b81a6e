"""Begin/end timer for a single named phase."""

from types import TracebackType
from typing import Self

from ..models import Phase
from .clock import Clock


class PhaseTimerError(Exception):
    """Timer used out of order (end before begin, reuse after end)."""


class PhaseTimer:
    """Single-use timer that records one Phase.

    Usage:
        timer = PhaseTimer("library-init", clock)
        timer.begin()
        ...
        phase = timer.end()

    or as a context manager, which begins on entry and ends on exit.
    """

    def __init__(self, name: str, clock: Clock) -> None:
        self.name = name
        self._clock = clock
        self._start_ms: int | None = None
        self._phase: Phase | None = None
        self._components: list[Phase] = []

    @property
    def started(self) -> bool:
        return self._start_ms is not None

    @property
    def finished(self) -> bool:
        return self._phase is not None

    def begin(self) -> None:
        """Record the start instant."""
        if self.started:
            raise PhaseTimerError(f"Phase {self.name!r} already started")
        self._start_ms = self._clock.now_ms()

    def add_component(self, phase: Phase) -> None:
        """Attach a completed sub-phase."""
        if self.finished:
            raise PhaseTimerError(f"Phase {self.name!r} already ended")
        self._components.append(phase)

    def end(self) -> Phase:
        """Record the end instant and return the completed phase."""
        if self._start_ms is None:
            raise PhaseTimerError(f"Phase {self.name!r} ended before it was started")
        if self.finished:
            raise PhaseTimerError(f"Phase {self.name!r} already ended")
        self._phase = Phase(
            name=self.name,
            start_ms=self._start_ms,
            end_ms=self._clock.now_ms(),
            components=tuple(self._components),
        )
        return self._phase

    @property
    def phase(self) -> Phase:
        """The completed phase."""
        if self._phase is None:
            raise PhaseTimerError(f"Phase {self.name!r} has not ended")
        return self._phase

    @property
    def duration_ms(self) -> int:
        return self.phase.duration_ms

    def __enter__(self) -> Self:
        self.begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        # Only record the phase if the measured work completed
        if exc_type is None:
            self.end()
