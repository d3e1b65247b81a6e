"""Tests for the in-process probe run."""

from unittest.mock import patch

from aotprobe.config import FeatureConfig, ProbeConfig
from aotprobe.core.probe import run_probe
from aotprobe.models import FeatureState

LAUNCHER_PROPERTIES = {
    "jarrunner.start.micros": "500000",
    "jarrunner.beforejvm.micros": "600000",
}


class TestRunProbe:
    """Tests for run_probe with a scripted clock."""

    def test_phases_and_offsets(self, probe_clock) -> None:
        result = run_probe(
            probe_clock,
            config=ProbeConfig(),
            properties={},
            runtime_args=[],
            environ={},
        )
        timeline = result.timeline

        assert timeline.reference_ms == 1000
        assert timeline.total_elapsed_ms == 50
        assert [p.name for p in timeline.phases] == ["library-init", "application-work"]

        library = timeline.get_phase("library-init")
        assert (library.start_offset_ms, library.end_offset_ms, library.duration_ms) == (10, 35, 25)
        assert [(c.name, c.duration_ms) for c in library.components] == [
            ("pydantic", 5),
            ("rich", 5),
            ("tomli_w", 10),
        ]

        work = timeline.get_phase("application-work")
        assert (work.start_offset_ms, work.end_offset_ms, work.duration_ms) == (40, 42, 2)
        assert probe_clock.reads == 12

    def test_main_start_checkpoint_only_without_import_instant(self, probe_clock) -> None:
        result = run_probe(
            probe_clock, config=ProbeConfig(), properties={}, runtime_args=[], environ={}
        )
        assert [(c.name, c.offset_ms) for c in result.timeline.checkpoints] == [
            ("main-start", 5)
        ]

    def test_import_checkpoint_precedes_main_start(self, probe_clock) -> None:
        result = run_probe(
            probe_clock,
            config=ProbeConfig(),
            properties={},
            runtime_args=[],
            imported_at_ms=1002,
            environ={},
        )
        assert [
            (c.name, c.offset_ms, c.since_previous_ms) for c in result.timeline.checkpoints
        ] == [("import", 2, 2), ("main-start", 5, 3)]

    def test_launcher_timing_from_properties(self, probe_clock) -> None:
        result = run_probe(
            probe_clock,
            config=ProbeConfig(),
            properties=LAUNCHER_PROPERTIES,
            runtime_args=[],
            environ={},
        )
        assert result.timeline.launcher_overhead_ms == 100
        assert result.timeline.grand_total_ms == 150

    def test_launcher_timing_from_environment(self, probe_clock) -> None:
        environ = {"JARRUNNER_START_MICROS": "500000", "JARRUNNER_BEFOREJVM_MICROS": "600000"}
        result = run_probe(
            probe_clock, config=ProbeConfig(), properties={}, runtime_args=[], environ=environ
        )
        assert result.timeline.grand_total_ms == 150

    def test_malformed_launcher_timing_degrades(self, probe_clock) -> None:
        properties = {"jarrunner.start.micros": "soon", "jarrunner.beforejvm.micros": "600000"}
        result = run_probe(
            probe_clock, config=ProbeConfig(), properties=properties, runtime_args=[], environ={}
        )
        assert not result.timeline.external.available
        assert result.timeline.grand_total_ms is None

    def test_feature_mode_detected(self, probe_clock) -> None:
        result = run_probe(
            probe_clock,
            config=ProbeConfig(),
            properties={},
            runtime_args=["-Xmx1g", "-XX:AOTCacheOutput=/tmp/app.aot"],
            environ={},
        )
        assert result.timeline.feature.state is FeatureState.CREATE
        assert result.timeline.feature.path == "/tmp/app.aot"

    def test_feature_prefixes_from_config(self, probe_clock) -> None:
        config = ProbeConfig(feature=FeatureConfig(use_prefix="--cache="))
        result = run_probe(
            probe_clock, config=config, properties={}, runtime_args=["--cache=/c"], environ={}
        )
        assert result.timeline.feature.state is FeatureState.USE
        assert result.timeline.feature.path == "/c"

    def test_argument_lines(self, probe_clock) -> None:
        result = run_probe(
            probe_clock,
            config=ProbeConfig(),
            properties={},
            runtime_args=[],
            app_args=["one", "two"],
            environ={},
        )
        assert result.argument_lines == ["args[0]: one", "args[1]: two"]

    def test_workloads_run_inside_library_phase(self, fake_clock_factory) -> None:
        calls = []
        workloads = (
            ("first", lambda: calls.append("first")),
            ("second", lambda: calls.append("second")),
        )
        clock = fake_clock_factory(
            instants=[1005, 1010, 1010, 1012, 1012, 1020, 1021, 1030, 1031, 1040]
        )
        with patch("aotprobe.core.probe.LIBRARY_WORKLOADS", workloads):
            result = run_probe(
                clock, config=ProbeConfig(), properties={}, runtime_args=[], environ={}
            )
        assert calls == ["first", "second"]
        library = result.timeline.get_phase("library-init")
        assert [c.name for c in library.components] == ["first", "second"]
        assert library.duration_ms == 11
