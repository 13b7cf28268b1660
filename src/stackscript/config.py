# src/stackscript/config.py
"""Runtime configuration for the StackScript interpreter.

Settings are layered: built-in defaults, then an optional JSON file
(``~/.stackscript/config.json`` or the path in ``STACKSCRIPT_CONFIG``), then
environment variables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging
import os

logger = logging.getLogger(__name__)

CONFIG_ENV = "STACKSCRIPT_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".stackscript" / "config.json"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Config:
    def __init__(self, log_level: str = "warning", strict_strings: bool = False,
                 show_suggestions: bool = True):
        self.log_level = log_level.lower()
        # Unterminated string literals raise instead of absorbing the rest of input
        self.strict_strings = strict_strings
        self.show_suggestions = show_suggestions

    @property
    def level(self) -> int:
        return _LEVELS.get(self.log_level, logging.WARNING)

    def should_log(self, level: str) -> bool:
        return _LEVELS.get(level.lower(), logging.DEBUG) >= self.level

    def update(self, values: Dict[str, Any]) -> None:
        for key, value in values.items():
            if key == "log_level":
                self.log_level = str(value).lower()
            elif key == "strict_strings":
                self.strict_strings = _as_bool(value)
            elif key == "show_suggestions":
                self.show_suggestions = _as_bool(value)
            else:
                logger.warning("ignoring unknown config key %r", key)

    @classmethod
    def load(cls, path: Optional[Path] = None, environ=None) -> "Config":
        environ = os.environ if environ is None else environ
        config = cls()

        if path is None:
            path = Path(environ[CONFIG_ENV]) if CONFIG_ENV in environ else DEFAULT_CONFIG_PATH
        if path.is_file():
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"{path}: config must be a JSON object")
            config.update(data)
            logger.debug("loaded config from %s", path)

        if "STACKSCRIPT_LOG_LEVEL" in environ:
            config.log_level = environ["STACKSCRIPT_LOG_LEVEL"].lower()
        if "STACKSCRIPT_STRICT_STRINGS" in environ:
            config.strict_strings = _as_bool(environ["STACKSCRIPT_STRICT_STRINGS"])
        return config


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


config = Config()
