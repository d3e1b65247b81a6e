"""External launcher timestamp parsing.

The launcher passes two decimal microsecond instants (its own start and the
moment right before it invokes the runtime). They are diagnostic only: if
either is missing or malformed the run continues without launcher timing.
"""

import logging
import os
import re
from collections.abc import Mapping

from ..config import ExternalConfig
from ..constants import MICROS_PER_MILLI
from ..models import ExternalTiming

logger = logging.getLogger(__name__)

# Base-10 integer with optional sign; int() alone would also accept
# surrounding whitespace and digit-group underscores
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Launchers write signed 64-bit counters
_MIN_MICROS = -(2**63)
_MAX_MICROS = 2**63 - 1


def _parse_micros(value: str | None) -> int | None:
    """Parse a decimal microsecond string, or None if absent or malformed."""
    if value is None or not _INTEGER_RE.fullmatch(value):
        return None
    micros = int(value)
    if not _MIN_MICROS <= micros <= _MAX_MICROS:
        return None
    return micros


def micros_to_millis(micros: int) -> int:
    """Convert microseconds to milliseconds, dropping the sub-millisecond part."""
    return micros // MICROS_PER_MILLI


def parse_external_timing(start: str | None, handoff: str | None) -> ExternalTiming:
    """Parse launcher start and handoff instants.

    Args:
        start: Launcher start instant in decimal microseconds
        handoff: Pre-runtime handoff instant in decimal microseconds

    Returns:
        ExternalTiming in milliseconds, or an unavailable timing if either
        value is missing or not a base-10 integer
    """
    if start is None or handoff is None:
        logger.debug("Launcher timing not supplied")
        return ExternalTiming.unavailable()

    start_us = _parse_micros(start)
    handoff_us = _parse_micros(handoff)
    if start_us is None or handoff_us is None:
        logger.debug(f"Ignoring malformed launcher timing: start={start!r}, handoff={handoff!r}")
        return ExternalTiming.unavailable()

    return ExternalTiming(
        launcher_start_ms=micros_to_millis(start_us),
        handoff_ms=micros_to_millis(handoff_us),
    )


def property_env_var(name: str) -> str:
    """Environment variable consulted for a property (``a.b.c`` -> ``A_B_C``)."""
    return name.upper().replace(".", "_")


def resolve_timing_sources(
    config: ExternalConfig,
    properties: Mapping[str, str],
    environ: Mapping[str, str] | None = None,
) -> tuple[str | None, str | None]:
    """Look up the raw launcher start and handoff strings.

    Explicit properties take precedence over environment variables.

    Args:
        config: Property names to look up
        properties: Properties given on the command line (-D key=value)
        environ: Environment to fall back to (defaults to os.environ)

    Returns:
        Tuple of (start, handoff) raw strings, each None if not found
    """
    env = os.environ if environ is None else environ

    def lookup(name: str) -> str | None:
        if name in properties:
            return properties[name]
        return env.get(property_env_var(name))

    return lookup(config.start_property), lookup(config.handoff_property)
