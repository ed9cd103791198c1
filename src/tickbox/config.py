"""Read-only settings: config.json under the config dir, then TICKBOX_* env vars."""

import json
import os
from pathlib import Path
from typing import Any

_loaded: "Config | None" = None


def clear_config_cache() -> None:
    """Forget the loaded config so the next load re-reads disk and env."""
    global _loaded
    _loaded = None


def get_default_config_dir() -> Path:
    """TICKBOX_CONFIG_DIR if set, else ~/.config/tickbox."""
    config_dir = os.environ.get("TICKBOX_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "tickbox"


class Config:
    """Style and logging settings, all plain strings."""

    DEFAULTS: dict[str, str] = {
        "selected_style": "bold #32CD32",
        "muted_style": "#696969",
        "help_style": "#626262",
        "log_file": "",  # Empty = no log file
        "log_level": "WARNING",
    }

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or get_default_config_dir()
        self._values: dict[str, Any] = {}

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Load settings; the default-dir config is loaded once per process."""
        global _loaded

        if config_dir is None and _loaded is not None:
            return _loaded

        config = cls(config_dir)
        config._values = {**config._read_file(), **config._read_env()}

        if config_dir is None:
            _loaded = config
        return config

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self.DEFAULTS:
            return self._values.get(name, self.DEFAULTS[name])
        raise AttributeError(f"Config has no attribute '{name}'")

    def _read_file(self) -> dict[str, Any]:
        path = self.config_dir / "config.json"
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8") or "{}")
        except ValueError:
            # Unreadable JSON or bad UTF-8: run on defaults
            return {}
        return data if isinstance(data, dict) else {}

    def _read_env(self) -> dict[str, str]:
        return {
            key: os.environ[f"TICKBOX_{key.upper()}"]
            for key in self.DEFAULTS
            if f"TICKBOX_{key.upper()}" in os.environ
        }
