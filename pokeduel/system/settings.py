from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional
from pokeduel.core.logging import logger

SETTINGS_FILENAME = ".pokeduel_settings.json"
DEFAULT_API_BASE = "https://pokeapi.co/api/v2"
LOG_LEVELS = ("DEBUG","INFO","WARN","ERROR")

@dataclass
class SettingsData:
    api_base: str = DEFAULT_API_BASE
    request_timeout: float = 10.0  # seconds per HTTP request
    text_delay: float = 0.4        # pause between narrated events
    log_level: str = "WARN"        # DEBUG / INFO / WARN / ERROR
    max_candidates: int = 60       # known moves resolved per creature
    menu_size: int = 12            # strongest moves offered to the player
    bot_pool_size: int = 10        # strongest moves the bot picks from
    bot_max_attempts: int = 5      # random creatures drawn before giving up

    def normalize(self):
        self.api_base = (self.api_base or DEFAULT_API_BASE).rstrip("/")
        if self.request_timeout <= 0:
            self.request_timeout = 10.0
        if self.text_delay < 0:
            self.text_delay = 0.0
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            self.log_level = "WARN"
        # 5 moves are always needed, so every pool must hold at least that many
        self.max_candidates = max(5, int(self.max_candidates))
        self.menu_size = max(5, int(self.menu_size))
        self.bot_pool_size = max(5, int(self.bot_pool_size))
        self.bot_max_attempts = max(1, int(self.bot_max_attempts))

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = path or cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Backfill missing fields (migration safe)
                field_names = {f.name for f in fields(SettingsData)}
                data_kwargs = {name: raw[name] for name in field_names if name in raw}
                data = SettingsData(**data_kwargs)
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2))
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def override(self, **values) -> None:
        """Apply non-None values (typically from CLI flags) for this run."""
        for name, value in values.items():
            if value is not None and hasattr(self.data, name):
                setattr(self.data, name, value)
        self.data.normalize()
