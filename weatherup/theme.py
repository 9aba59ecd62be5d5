"""Persistent storage of the light/dark theme preference."""

from __future__ import annotations

import json
import logging
from pathlib import Path

_log = logging.getLogger(__name__)

_KEY = "theme"
_LIGHT = "Light"
_DARK = "Dark"


class ThemeStore:
    """Key/value store in a JSON file, holding the chosen theme."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def is_light(self) -> bool:
        """Whether the light theme is chosen; light unless "Dark" was saved."""
        return self._load().get(_KEY) != _DARK

    def set_theme(self, is_light: bool) -> None:
        """Save the theme; failures to write are ignored."""
        data = self._load()
        data[_KEY] = _LIGHT if is_light else _DARK
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding="utf-8")
        except OSError as exc:
            _log.debug("could not save theme to %s: %s", self.path, exc)