from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "Textcraft"

# Environment variable override (useful for tests and portable installs)
ENV_DATA_DIR = "TEXTCRAFT_DATA_DIR"


def default_data_dir() -> Path:
    """Directory holding the account and inventory files.

    Linux: ~/.local/share/Textcraft, unless TEXTCRAFT_DATA_DIR is set.
    """
    override = os.getenv(ENV_DATA_DIR)
    if override:
        return Path(override).expanduser().resolve()
    return Path(user_data_dir(appname=APP_NAME, appauthor=False)).expanduser().resolve()
