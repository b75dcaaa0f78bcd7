"""Console logging for the deinflector CLI.

The library itself only creates module loggers; handlers are installed here,
by the entry point.  TRACE sits below DEBUG and logs every search node.
"""

import logging
import sys

APP_NAME = "deinflector"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def setup_logging(level: int = logging.WARNING) -> None:
    """Install a single stderr handler on the root logger."""
    formatter = logging.Formatter(
        f"%(asctime)s - [%(levelname)-5s] - [{APP_NAME}] - %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    if root.hasHandlers():
        root.handlers.clear()
    root.addHandler(handler)


def level_from_verbosity(verbosity: int) -> int:
    """0 → WARNING, 1 → INFO, 2 → DEBUG, 3+ → TRACE."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    if verbosity == 2:
        return logging.DEBUG
    return TRACE
