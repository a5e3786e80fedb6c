from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Optional

import yaml

from .errors import SettingsError
from .paths import default_data_dir

logger = logging.getLogger(__name__)


@dataclass
class StorageSettings:
    data_dir: str = ""
    account_file: str = "account.txt"
    inventory_file: str = "inventory.txt"

    def resolved_data_dir(self) -> Path:
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return default_data_dir()


@dataclass
class GameSettings:
    seed: Optional[int] = None


@dataclass
class LoggingSettings:
    level: str = "WARNING"


@dataclass
class Settings:
    storage: StorageSettings = field(default_factory=StorageSettings)
    game: GameSettings = field(default_factory=GameSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise SettingsError(f"Invalid settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        try:
            storage = StorageSettings(**(data.get("storage") or {}))
            game = GameSettings(**(data.get("game") or {}))
            logging_ = LoggingSettings(**(data.get("logging") or {}))
        except TypeError as exc:
            raise SettingsError(f"Unknown settings key: {exc}") from exc
        if game.seed is not None:
            try:
                game.seed = int(game.seed)
            except (TypeError, ValueError) as exc:
                raise SettingsError(f"game.seed must be an integer, got {game.seed!r}") from exc
        return Settings(storage=storage, game=game, logging=logging_)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and optional user override file.

        If user_path is provided and exists, overlay values onto defaults.
        """
        try:
            with resources.files("textcraft.config").joinpath("default_settings.yaml").open(
                "r", encoding="utf-8"
            ) as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(dataclasses.asdict(self), f, sort_keys=False)
        logger.info("Saved settings to %s", path)
