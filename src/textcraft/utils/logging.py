import logging
import os
import sys

ENV_LOG_LEVEL = "TEXTCRAFT_LOG_LEVEL"


def configure_logging(level: int = logging.WARNING) -> None:
    """Install a single stderr handler on the root logger.

    TEXTCRAFT_LOG_LEVEL, when set to a level name, wins over ``level``. Logs go
    to stderr so they never interleave with the menus on stdout.
    """
    level_name = os.getenv(ENV_LOG_LEVEL)
    if level_name:
        level = getattr(logging, level_name.upper(), level)

    handler = logging.StreamHandler(stream=sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
