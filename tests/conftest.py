"""Shared test fixtures for aotprobe tests."""

import os
from collections.abc import Generator, Iterable
from pathlib import Path

import pytest
from typer.testing import CliRunner


class FakeClock:
    """Clock returning a prescribed sequence of instants.

    ``now_ms`` pops the next scripted instant and fails the test when the
    script runs out, so a test also pins how often the clock is read.
    """

    def __init__(self, start_ms: int = 1000, instants: Iterable[int] = ()) -> None:
        self._start_ms = start_ms
        self._instants = list(instants)
        self.reads = 0

    def now_ms(self) -> int:
        if not self._instants:
            raise AssertionError("FakeClock ran out of scripted instants")
        self.reads += 1
        return self._instants.pop(0)

    def start_ms(self) -> int:
        return self._start_ms

    def uptime_ms(self) -> int:
        return self.now_ms() - self._start_ms


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_clock_factory() -> type[FakeClock]:
    """FakeClock class, for tests that script their own instants."""
    return FakeClock


@pytest.fixture
def in_tmp_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Change cwd to a temporary directory for the duration of the test."""
    original_cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def clean_launcher_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove launcher timing variables inherited from the environment."""
    monkeypatch.delenv("JARRUNNER_START_MICROS", raising=False)
    monkeypatch.delenv("JARRUNNER_BEFOREJVM_MICROS", raising=False)


@pytest.fixture
def probe_clock() -> FakeClock:
    """Clock scripted for exactly one probe run.

    Reads in order: main-start, library-init begin, pydantic/rich/tomli_w
    begin+end, library-init end, application-work begin+end, assembly.
    """
    return FakeClock(
        start_ms=1000,
        instants=[1005, 1010, 1010, 1015, 1015, 1020, 1020, 1030, 1035, 1040, 1042, 1050],
    )
