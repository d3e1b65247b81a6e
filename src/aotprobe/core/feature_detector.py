"""AOT cache mode detection from runtime arguments."""

import logging
import sys
from collections.abc import Iterable, Mapping, Sequence

from ..constants import AOT_CREATE_PREFIX, AOT_USE_PREFIX
from ..models import FeatureMode, FeatureState

logger = logging.getLogger(__name__)


def detect_feature_mode(
    args: Iterable[str],
    use_prefix: str = AOT_USE_PREFIX,
    create_prefix: str = AOT_CREATE_PREFIX,
) -> FeatureMode:
    """Detect the AOT cache mode from runtime arguments.

    The first argument matching either prefix decides the mode; later
    arguments are not inspected, even if they name the other mode.
    Within one argument the use prefix is tested first.

    Args:
        args: Runtime arguments in the order the runtime received them
        use_prefix: Prefix selecting an existing cache
        create_prefix: Prefix selecting cache creation

    Returns:
        Detected FeatureMode, disabled if no argument matches
    """
    for arg in args:
        if arg.startswith(use_prefix):
            mode = FeatureMode(state=FeatureState.USE, path=arg[len(use_prefix) :])
        elif arg.startswith(create_prefix):
            mode = FeatureMode(state=FeatureState.CREATE, path=arg[len(create_prefix) :])
        else:
            continue
        logger.debug(f"AOT cache mode {mode.state.value} from argument {arg!r}")
        return mode
    return FeatureMode.disabled()


def interpreter_arguments(
    orig_argv: Sequence[str] | None = None,
    argv: Sequence[str] | None = None,
    xoptions: Mapping[str, str | bool] | None = None,
) -> list[str]:
    """Return the options given to the interpreter itself.

    ``orig_argv`` ends with ``argv`` (the script and its arguments), so only
    the tokens between the executable and the script are kept. ``-X``
    options are folded back in as single ``-Xkey[=value]`` tokens, which also
    covers the spaced ``-X key=value`` form.
    """
    orig_argv = sys.orig_argv if orig_argv is None else orig_argv
    argv = sys.argv if argv is None else argv
    xoptions = sys._xoptions if xoptions is None else xoptions

    options = list(orig_argv[1 : max(1, len(orig_argv) - len(argv))])
    for key, value in xoptions.items():
        token = f"-X{key}" if value is True else f"-X{key}={value}"
        if token not in options:
            options.append(token)
    return options
