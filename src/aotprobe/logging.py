"""Logging configuration for aotprobe CLI."""

import logging
from enum import IntEnum

from rich.console import Console
from rich.logging import RichHandler

# Only aotprobe's own loggers are configured; libraries exercised inside
# measured phases keep their defaults
PACKAGE_LOGGER = "aotprobe"


class LogLevel(IntEnum):
    """Log level enumeration."""

    QUIET = logging.WARNING
    NORMAL = logging.INFO
    VERBOSE = logging.DEBUG


def resolve_level(verbosity: int = 0, quiet: bool = False, debug: bool = False) -> LogLevel:
    """Map CLI flags to a level. Precedence: quiet > debug > verbosity."""
    if quiet:
        return LogLevel.QUIET
    if debug or verbosity >= 1:
        return LogLevel.VERBOSE
    return LogLevel.NORMAL


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    debug: bool = False,
) -> Console:
    """Configure the aotprobe logger based on CLI options.

    Args:
        verbosity: Number of -v flags (1=debug, 2+=debug with time and source)
        quiet: Only warnings and errors
        no_color: Disable colored output
        debug: Debug level with time and source

    Returns:
        Rich console on stderr used by the log handler
    """
    console = Console(
        stderr=True,
        force_terminal=not no_color,
        no_color=no_color,
    )
    detailed = debug or verbosity >= 2
    handler = RichHandler(console=console, show_time=detailed, show_path=detailed)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(resolve_level(verbosity, quiet, debug))
    logger.propagate = False

    return console
