from __future__ import annotations

"""Exact-match romanization overrides for Korean names.

Names are often romanized by convention rather than by rule (김 -> Kim,
이 -> Lee). These tables are consulted *before* the romanization pipeline;
on a hit the pipeline is skipped.

Expected file: korean_romanizer/data/names.yaml

Expected YAML shape:

    surnames:
      김: Kim
    surname_variants:
      이: [Yi, Rhee]
    given_names:
      민준: Min Jun
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

_NAMES_FILENAME: Final[str] = "names.yaml"

_CACHE: dict[str, "NameOverrides"] = {}
_CACHE_MTIME_NS: dict[str, int] = {}


def _package_root() -> Path:
    # korean_romanizer/domain/name_overrides.py -> korean_romanizer/domain -> korean_romanizer
    return Path(__file__).resolve().parents[1]


def default_names_path() -> Path:
    return _package_root() / "data" / _NAMES_FILENAME


@dataclass(frozen=True)
class NameOverrides:
    """Read-only override tables, keyed by the exact Hangul input."""

    surnames: Mapping[str, str] = field(default_factory=dict)
    surname_variants: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    given_names: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # tables are read-only: one instance is shared by every load_overrides() caller
        for name in ("surnames", "surname_variants", "given_names"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def lookup(self, text: str) -> Optional[str]:
        """Return the override for `text`, checking given names before surnames."""
        if text in self.given_names:
            return self.given_names[text]
        return self.surnames.get(text)

    def variants(self, surname: str) -> list[str]:
        """Canonical spelling first, then known alternatives, without duplicates."""
        out: list[str] = []
        canonical = self.surnames.get(surname)
        if canonical:
            out.append(canonical)
        for v in self.surname_variants.get(surname, ()):
            if v not in out:
                out.append(v)
        return out

    def __len__(self) -> int:
        return len(self.surnames) + len(self.given_names)


# -----------------------------------------------------------------------------
# YAML parsing
# -----------------------------------------------------------------------------

def _extract_str_map(data: dict[str, Any], key: str) -> dict[str, str]:
    out: dict[str, str] = {}
    items = data.get(key)
    if not isinstance(items, dict):
        return out
    for hangul, rr in items.items():
        if isinstance(hangul, str) and isinstance(rr, str) and hangul.strip() and rr.strip():
            out[hangul.strip()] = rr.strip()
    return out


def _extract_variants(data: dict[str, Any], key: str) -> dict[str, tuple[str, ...]]:
    out: dict[str, tuple[str, ...]] = {}
    items = data.get(key)
    if not isinstance(items, dict):
        return out
    for hangul, spellings in items.items():
        if not isinstance(hangul, str):
            continue
        # a single spelling may be given as a plain string
        if isinstance(spellings, str):
            spellings = [spellings]
        if not isinstance(spellings, list):
            continue
        cleaned = tuple(s.strip() for s in spellings if isinstance(s, str) and s.strip())
        if cleaned:
            out[hangul.strip()] = cleaned
    return out


def parse_overrides(data: Any) -> NameOverrides:
    """Build `NameOverrides` from an already-loaded YAML document."""
    if not isinstance(data, dict):
        return NameOverrides()
    return NameOverrides(
        surnames=_extract_str_map(data, "surnames"),
        surname_variants=_extract_variants(data, "surname_variants"),
        given_names=_extract_str_map(data, "given_names"),
    )


def load_overrides(path: Path | str | None = None) -> NameOverrides:
    """Load override tables from YAML.

    Failure is non-fatal: a missing file gives empty tables, an unreadable or
    malformed one is logged and gives empty tables. Results are cached per
    path and reloaded when the file's mtime changes.
    """
    p = Path(path) if path is not None else default_names_path()
    cache_key = str(p)

    if not p.exists():
        logger.debug("Name overrides file missing: %s", p)
        return NameOverrides()

    try:
        mtime_ns = p.stat().st_mtime_ns
        if cache_key in _CACHE and _CACHE_MTIME_NS.get(cache_key) == mtime_ns:
            return _CACHE[cache_key]

        raw = p.read_text(encoding="utf-8")
        data = yaml.safe_load(raw)
    except (OSError, UnicodeError, yaml.YAMLError) as e:
        logger.warning("Failed to load name overrides from %s: %s", p, e)
        return NameOverrides()

    overrides = parse_overrides(data)
    _CACHE[cache_key] = overrides
    _CACHE_MTIME_NS[cache_key] = mtime_ns
    logger.debug("Loaded %d name overrides from %s", len(overrides), p)
    return overrides
