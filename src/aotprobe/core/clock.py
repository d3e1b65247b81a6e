"""Clock sources for the timing engine.

All instants are integer milliseconds since the Unix epoch. The engine only
talks to the ``Clock`` protocol, so tests can inject a scripted clock.
"""

import time
from typing import Protocol

import psutil


class Clock(Protocol):
    """Source of the current instant and the runtime's own start."""

    def now_ms(self) -> int:
        """Current instant in ms."""
        ...

    def start_ms(self) -> int:
        """Instant the runtime (this process) started, in ms."""
        ...

    def uptime_ms(self) -> int:
        """Elapsed time since the runtime started, in ms.

        Part of the clock interface only; the timeline derives offsets from
        ``start_ms`` and ``now_ms`` directly.
        """
        ...


class SystemClock:
    """Wall clock plus the OS-reported creation time of this process."""

    def __init__(self, pid: int | None = None) -> None:
        self._process = psutil.Process(pid)
        # create_time() is seconds as a float; fixed for the life of the process
        self._start_ms = int(self._process.create_time() * 1000)

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000

    def start_ms(self) -> int:
        return self._start_ms

    def uptime_ms(self) -> int:
        return self.now_ms() - self._start_ms
