"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any

from core.errors import ConfigurationError
from core.services.paginator import validate_page_size

DEFAULT_PAGE_SIZE = 20
_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        try:
            with self._path.open("r", encoding="utf-8") as f:
                self._data = json.load(f)
        except json.JSONDecodeError as ex:
            raise ConfigurationError(f"Invalid JSON in {self._path}: {ex}") from ex

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node


@dataclass(frozen=True)
class AppConfig:
    """Validated runtime configuration."""

    page_size: int = DEFAULT_PAGE_SIZE
    confirm_delete: bool = True
    audit_log: bool = True
    delete_log_dir: str | None = None
    log_dir: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_settings(cls, settings: JsonSettings | None) -> AppConfig:
        """Build a config from `settings`, falling back to defaults.

        Raises:
            ConfigurationError: A present value has the wrong type or range.
        """
        if settings is None:
            return cls()

        page_size = validate_page_size(settings.get("browse.page_size", DEFAULT_PAGE_SIZE))
        level = str(settings.get("logging.level", "INFO")).upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(f"Unknown logging.level: {level!r}")

        return cls(
            page_size=page_size,
            confirm_delete=_as_bool(settings, "delete.confirm", True),
            audit_log=_as_bool(settings, "delete.audit_log", True),
            delete_log_dir=_as_optional_str(settings, "delete.log_dir"),
            log_dir=_as_optional_str(settings, "logging.dir"),
            log_level=level,
        )


def _as_bool(settings: JsonSettings, key: str, default: bool) -> bool:
    value = settings.get(key, default)
    if not isinstance(value, bool):
        raise ConfigurationError(f"{key} must be true or false, got {value!r}")
    return value


def _as_optional_str(settings: JsonSettings, key: str) -> str | None:
    value = settings.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{key} must be a string, got {value!r}")
    return value
