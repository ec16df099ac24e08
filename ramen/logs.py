"""
Logging setup for the command-line wrapper.

Library modules only create loggers (`logging.getLogger(__name__)`); the wrapper calls
setup() once so records are rendered by rich on stderr, leaving stdout to the
`KEY=VALUE` output.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler


def setup(level=logging.WARNING, /, console=None):
    """
    Attach a RichHandler (stderr by default) to the "ramen" logger and set its level.

    Calling it again replaces the previously installed handler.
    """
    logger = logging.getLogger("ramen")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=level <= logging.DEBUG,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


__all__ = ("setup",)
