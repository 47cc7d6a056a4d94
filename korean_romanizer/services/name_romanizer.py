from __future__ import annotations

import logging
from typing import Optional

from korean_romanizer.domain.name_overrides import NameOverrides, load_overrides
from korean_romanizer.domain.romanization_rr import romanize, to_title_case
from korean_romanizer.services.settings_store import RomanizerOptions, SettingsStore

logger = logging.getLogger(__name__)


class NameRomanizer:
    """Romanize Korean personal names.

    Exact matches in the override tables win over the rule-based result;
    everything else goes through `romanize()`. Full names are split into an
    assumed one-character surname and the given name.
    """

    def __init__(
        self,
        overrides: Optional[NameOverrides] = None,
        options: Optional[RomanizerOptions] = None,
    ) -> None:
        self._options = options or RomanizerOptions()
        if overrides is None:
            if self._options.use_overrides:
                overrides = load_overrides(self._options.overrides_path)
            else:
                overrides = NameOverrides()
        self._overrides = overrides

    @classmethod
    def from_settings(cls, store: SettingsStore) -> "NameRomanizer":
        return cls(options=store.get_options())

    @property
    def options(self) -> RomanizerOptions:
        return self._options

    @property
    def overrides(self) -> NameOverrides:
        return self._overrides

    def romanize(self, text: str, add_spaces: Optional[bool] = None, title_case: Optional[bool] = None) -> str:
        """Romanize `text`, preferring an exact override.

        `add_spaces` / `title_case` default to the configured options.
        """
        if add_spaces is None:
            add_spaces = self._options.add_spaces
        if title_case is None:
            title_case = self._options.title_case

        override = self._overrides.lookup(text)
        if override is not None:
            logger.debug("Name override hit: %s -> %s", text, override)
            return to_title_case(override) if title_case else override

        return romanize(text, add_spaces=add_spaces, title_case=title_case)

    def romanize_name(self, text: str) -> str:
        """Romanize one name part with per-syllable spacing and title case."""
        return self.romanize(text, add_spaces=True, title_case=True)

    def romanize_full_name(self, full_name: str) -> str:
        """Romanize "surname + given name", e.g. 김민준 -> "Kim Min Jun"."""
        if not full_name:
            return full_name

        if len(full_name) == 1:
            return self.romanize_name(full_name)

        surname = full_name[:1]
        given_name = full_name[1:]
        return "{} {}".format(self.romanize_name(surname), self.romanize_name(given_name))

    def surname_variants(self, surname: str) -> list[str]:
        """Known spellings of `surname`, canonical first; the RR spelling if none."""
        variants = self._overrides.variants(surname)
        if variants:
            return variants
        return [self.romanize_name(surname)]


def default_name_romanizer() -> NameRomanizer:
    """A romanizer over the bundled tables.

    Built per call; `load_overrides` caches by mtime, so edits to the names
    file are picked up without a restart.
    """
    return NameRomanizer()


def romanize_name(text: str) -> str:
    return default_name_romanizer().romanize_name(text)


def romanize_full_name(full_name: str) -> str:
    return default_name_romanizer().romanize_full_name(full_name)
