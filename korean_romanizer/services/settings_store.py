from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

import yaml

logger = logging.getLogger(__name__)

SETTINGS_FILENAME: Final[str] = "romanizer.yaml"

_BOOL_KEYS: Final[tuple[str, ...]] = ("add_spaces", "title_case", "use_overrides")


@dataclass(frozen=True)
class RomanizerOptions:
    add_spaces: bool = False
    title_case: bool = False
    use_overrides: bool = True
    overrides_path: Path | None = None


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save romanizer.yaml atomically
      - Provide typed `RomanizerOptions`

    Notes:
      - A missing file means defaults; a relative `overrides_path` is resolved
        against the settings file's directory.
    """

    def __init__(self, settings_path: str | Path | None = None) -> None:
        if settings_path is None:
            self._path = Path.cwd() / SETTINGS_FILENAME
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
        os.replace(str(tmp), str(p))

    def get_options(self) -> RomanizerOptions:
        s = self.load()

        def _bval(key: str, default: bool) -> bool:
            v = s.get(key, default)
            if isinstance(v, bool):
                return v
            logger.warning("Ignoring non-boolean setting %s=%r", key, v)
            return default

        overrides_path = None
        raw_path = s.get("overrides_path")
        if isinstance(raw_path, str) and raw_path.strip():
            overrides_path = Path(raw_path.strip())
            if not overrides_path.is_absolute():
                overrides_path = self._path.parent / overrides_path

        return RomanizerOptions(
            add_spaces=_bval("add_spaces", False),
            title_case=_bval("title_case", False),
            use_overrides=_bval("use_overrides", True),
            overrides_path=overrides_path,
        )

    def set_option(self, key: str, value: Any) -> None:
        """Persist a single option, keeping the other keys."""
        if key in _BOOL_KEYS:
            if not isinstance(value, bool):
                raise TypeError("Setting {!r} expects a bool, got {!r}".format(key, value))
        elif key == "overrides_path":
            value = None if value is None else str(value)
        else:
            raise KeyError("Unknown setting: {}".format(key))

        s = self.load()
        if value is None:
            s.pop(key, None)
        else:
            s[key] = value
        self.save(s)
