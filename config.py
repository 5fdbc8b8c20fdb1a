"""JSON settings for the angle-arcs console tools."""
from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DISPLAY_MODES = ("rad", "radians", "deg", "degrees")

DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    "display": {
        "mode": "deg",
    },
    "logging": {
        "level": "WARNING",
        "format": "%(levelname)s %(name)s: %(message)s",
    },
}


class Settings:
    """Configuration manager backed by an optional JSON file."""

    def __init__(self, path: Optional[str | Path] = None):
        self.path = Path(path) if path else None
        self.values = self.load()

    def load(self) -> Dict[str, Dict[str, Any]]:
        """Load settings from ``self.path`` merged over the defaults."""
        values = copy.deepcopy(DEFAULT_SETTINGS)
        if self.path is None or not self.path.exists():
            return values
        try:
            loaded = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not load settings file %s: %s", self.path, e)
            return values
        if not isinstance(loaded, dict):
            logger.warning("Ignoring settings file %s: top level is not an object", self.path)
            return values
        # Merge with defaults, section by section
        for section, section_values in loaded.items():
            if isinstance(section_values, dict):
                values.setdefault(section, {}).update(section_values)
        logger.debug("Loaded settings from %s", self.path)
        return values

    def save(self, path: Optional[str | Path] = None) -> Path:
        target = Path(path) if path else self.path
        if target is None:
            raise ValueError("no settings path given")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(self.values, indent=2), encoding="utf-8")
        return target

    def get(self, section: str, key: str, default=None):
        """Get a configuration value."""
        return self.values.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a configuration value."""
        self.values.setdefault(section, {})[key] = value

    @property
    def display_mode(self) -> str:
        mode = str(self.get("display", "mode", "deg")).lower()
        return mode if mode in DISPLAY_MODES else "deg"
