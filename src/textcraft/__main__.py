from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .app import TextcraftApp
from .core.rng import RNG
from .errors import SettingsError
from .persistence.manager import RosterStorage
from .settings import Settings
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="textcraft",
        description="Textcraft - a console mining and trading game",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory for the save files")
    parser.add_argument("--seed", type=int, default=None, help="Fix the random seed")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser.parse_args(argv)


def _log_level(settings: Settings, verbosity: int) -> int:
    if verbosity == 1:
        return logging.INFO
    if verbosity >= 2:
        return logging.DEBUG
    return getattr(logging, settings.logging.level.upper(), logging.WARNING)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        settings = Settings.load(user_path=args.settings_path)
    except SettingsError as exc:
        print(f"textcraft: {exc}", file=sys.stderr)
        return 2
    configure_logging(level=_log_level(settings, args.verbose))

    data_dir = args.data_dir or settings.storage.resolved_data_dir()
    seed = args.seed if args.seed is not None else settings.game.seed

    try:
        storage = RosterStorage(
            data_dir,
            account_file=settings.storage.account_file,
            inventory_file=settings.storage.inventory_file,
        )
        roster = storage.load(rng=RNG(seed))
        return TextcraftApp(storage, roster).run()
    except OSError:
        logger.exception("Save files in %s could not be read or written", data_dir)
        return 1


if __name__ == "__main__":
    sys.exit(main())
