"""Tests for launcher timestamp parsing."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from aotprobe.config import ExternalConfig
from aotprobe.core.external_parser import (
    micros_to_millis,
    parse_external_timing,
    property_env_var,
    resolve_timing_sources,
)
from aotprobe.models import ExternalTiming

micros = st.integers(min_value=0, max_value=10**17)
non_numeric = st.text(min_size=1).filter(lambda s: not s.strip().lstrip("+-").isdigit())


class TestParseExternalTiming:
    """Tests for parse_external_timing."""

    def test_example_values(self) -> None:
        """500000/600000 us should give 500/600 ms and 100 ms overhead."""
        timing = parse_external_timing("500000", "600000")
        assert timing.launcher_start_ms == 500
        assert timing.handoff_ms == 600
        assert timing.overhead_ms == 100

    @pytest.mark.parametrize(
        ("start", "handoff"),
        [(None, None), ("500000", None), (None, "600000")],
    )
    def test_missing_value_gives_unavailable(self, start: str | None, handoff: str | None) -> None:
        """Either value missing should make both absent."""
        assert parse_external_timing(start, handoff) == ExternalTiming.unavailable()

    @pytest.mark.parametrize(
        "bad",
        ["", "abc", "12.5", "1e6", " 500000", "500000 ", "500_000", "0x10", "+", "-"],
    )
    def test_malformed_value_gives_unavailable(self, bad: str) -> None:
        """Anything but a plain base-10 integer should make both absent."""
        assert not parse_external_timing(bad, "600000").available
        assert not parse_external_timing("500000", bad).available

    def test_non_ascii_digits_rejected(self) -> None:
        """Unicode digits are not accepted as decimal input."""
        assert not parse_external_timing("５００", "600000").available

    def test_out_of_64_bit_range_rejected(self) -> None:
        assert not parse_external_timing(str(2**63), "600000").available
        assert parse_external_timing(str(2**63 - 1), str(2**63 - 1)).available

    def test_signed_values_accepted(self) -> None:
        timing = parse_external_timing("+500000", "-1000")
        assert timing.launcher_start_ms == 500
        assert timing.handoff_ms == -1

    def test_sub_millisecond_part_truncated(self) -> None:
        """Up to 999 us per value is dropped."""
        timing = parse_external_timing("500999", "600001")
        assert timing.launcher_start_ms == 500
        assert timing.handoff_ms == 600
        assert timing.overhead_ms == 100

    def test_negative_overhead_not_an_error(self) -> None:
        timing = parse_external_timing("600000", "500000")
        assert timing.overhead_ms == -100

    @given(a=micros, b=micros)
    @settings(max_examples=200)
    def test_conversion_is_monotonic_and_overhead_exact(self, a: int, b: int) -> None:
        """For a <= b the converted values keep order and overhead is their difference."""
        a, b = min(a, b), max(a, b)
        timing = parse_external_timing(str(a), str(b))
        assert timing.launcher_start_ms == a // 1000
        assert timing.handoff_ms == b // 1000
        assert timing.launcher_start_ms <= timing.handoff_ms
        assert timing.overhead_ms == b // 1000 - a // 1000

    @given(bad=non_numeric, good=micros, bad_first=st.booleans())
    @settings(max_examples=200)
    def test_non_numeric_in_either_field(self, bad: str, good: int, bad_first: bool) -> None:
        """A non-numeric string in either field yields absent/absent."""
        args = (bad, str(good)) if bad_first else (str(good), bad)
        timing = parse_external_timing(*args)
        assert timing.launcher_start_ms is None
        assert timing.handoff_ms is None
        assert timing.overhead_ms is None


def test_micros_to_millis_floors() -> None:
    assert micros_to_millis(1999) == 1
    assert micros_to_millis(2000) == 2
    assert micros_to_millis(0) == 0


def test_property_env_var() -> None:
    assert property_env_var("jarrunner.start.micros") == "JARRUNNER_START_MICROS"


class TestResolveTimingSources:
    """Tests for resolve_timing_sources."""

    def test_properties_found(self) -> None:
        properties = {"jarrunner.start.micros": "1", "jarrunner.beforejvm.micros": "2"}
        assert resolve_timing_sources(ExternalConfig(), properties, environ={}) == ("1", "2")

    def test_environment_fallback(self) -> None:
        environ = {"JARRUNNER_START_MICROS": "10", "JARRUNNER_BEFOREJVM_MICROS": "20"}
        assert resolve_timing_sources(ExternalConfig(), {}, environ=environ) == ("10", "20")

    def test_properties_take_precedence(self) -> None:
        properties = {"jarrunner.start.micros": "1"}
        environ = {"JARRUNNER_START_MICROS": "10", "JARRUNNER_BEFOREJVM_MICROS": "20"}
        assert resolve_timing_sources(ExternalConfig(), properties, environ=environ) == ("1", "20")

    def test_missing_values_are_none(self) -> None:
        assert resolve_timing_sources(ExternalConfig(), {}, environ={}) == (None, None)

    def test_custom_property_names(self) -> None:
        config = ExternalConfig(start_property="my.start", handoff_property="my.handoff")
        properties = {"my.start": "5", "jarrunner.start.micros": "1"}
        environ = {"MY_HANDOFF": "7"}
        assert resolve_timing_sources(config, properties, environ=environ) == ("5", "7")

    def test_defaults_to_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JARRUNNER_START_MICROS", "100")
        monkeypatch.setenv("JARRUNNER_BEFOREJVM_MICROS", "200")
        assert resolve_timing_sources(ExternalConfig(), {}) == ("100", "200")
