"""JSON-backed user settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from lff.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "lff"
_SETTINGS_FILE = "settings.json"


class Settings:
    """Read-only settings loaded from a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("defaults.min_size_mib")  # reads data["defaults"]["min_size_mib"]

    The ``defaults`` object holds default values for command-line options,
    keyed by option name, e.g. ``{"defaults": {"sort_method": "size"}}``.
    """

    _instance: Settings | None = None

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @classmethod
    def instance(cls) -> Settings:
        """Return the singleton settings instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def option_defaults(self) -> dict[str, Any]:
        """Return the ``defaults`` object, or an empty dict if unusable."""
        defaults = self.get("defaults", {})
        if not isinstance(defaults, dict):
            log.warning("Ignoring 'defaults' in %s: expected an object", self._path)
            return {}
        return defaults

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring settings in %s: expected an object", self._path)
            return
        self._data = data
