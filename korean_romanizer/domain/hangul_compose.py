from __future__ import annotations

"""Hangul composition helpers (domain layer).

It centralises:
- Hangul Jamo ordering constants (compatibility jamo)
- Pure functions for decomposing / composing LVT syllables
- The `Syllable` record the pronunciation rules operate on

Primary API:
- decompose(ch)
- compose_lvt(lead, vowel, tail)
- Syllable.from_char(ch)
"""

from dataclasses import dataclass
from typing import Final


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

# The silent initial; a syllable starting with it is vowel-initial
NULL_ONSET: Final[str] = "ㅇ"

# Unicode Hangul Syllables algorithm constants
S_BASE: Final[int] = 0xAC00
S_LAST: Final[int] = 0xD7A3
V_COUNT: Final[int] = len(JUNGSEONG)
T_COUNT: Final[int] = len(JONGSEONG)
N_COUNT: Final[int] = V_COUNT * T_COUNT  # 588

# Hangul Compatibility Jamo letters (ㄱ .. ㅣ)
COMPAT_FIRST: Final[int] = 0x3131
COMPAT_LAST: Final[int] = 0x3163


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_CHO_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
_JUNG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
_JONG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG)}


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def is_hangul_syllable(ch: str) -> bool:
    """Return True for a single precomposed Hangul syllable (가..힣)."""
    return len(ch) == 1 and S_BASE <= ord(ch) <= S_LAST


def is_compat_jamo(ch: str) -> bool:
    """Return True for a single standalone compatibility jamo (ㄱ..ㅣ)."""
    return len(ch) == 1 and COMPAT_FIRST <= ord(ch) <= COMPAT_LAST


def decompose(ch: str) -> tuple[str, str, str]:
    """Split a precomposed syllable into (choseong, jungseong, jongseong).

    The jongseong is "" when the syllable has no final.

    Raises:
        ValueError: if `ch` is not a precomposed Hangul syllable.
    """
    if not is_hangul_syllable(ch):
        raise ValueError("Not a Hangul syllable: %r" % (ch,))

    code = ord(ch) - S_BASE
    li = code // N_COUNT
    vi = (code // T_COUNT) % V_COUNT
    ti = code % T_COUNT
    return CHOSEONG[li], JUNGSEONG[vi], JONGSEONG[ti]


def compose_lvt(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간").

    Raises:
        ValueError: if any component is not valid in its position.

    Notes:
        This uses the Unicode Hangul Syllables algorithm:
        SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    """
    li = _CHO_MAP.get(lead)
    vi = _JUNG_MAP.get(vowel)
    ti = _JONG_MAP.get(tail or "")

    if li is None or vi is None or ti is None:
        raise ValueError(
            "Invalid jamo for compose_lvt: lead=%r vowel=%r tail=%r" % (lead, vowel, tail)
        )

    return chr(S_BASE + (li * V_COUNT + vi) * T_COUNT + ti)


def compose_cv(lead: str, vowel: str) -> str:
    """Compose a Hangul syllable from a leading consonant and a vowel."""
    return compose_lvt(lead, vowel, "")


def final_to_initial(coda: str) -> str:
    """Return the onset spelling of a single-consonant final.

    Compatibility jamo share one glyph between both positions, so this is a
    membership check.

    Raises:
        ValueError: for complex finals (ㄳ, ㄺ, ...) which have no onset form.
    """
    if coda not in _CHO_MAP:
        raise ValueError("Final has no onset form: %r" % (coda,))
    return coda


@dataclass
class Syllable:
    """One input character on its way through the pipeline.

    Precomposed syllables carry their jamo in `onset`/`vowel`/`coda`.
    Anything else (compatibility jamo, spaces, other scripts) is a degenerate
    entry: `onset` holds the character itself and `vowel`/`coda` are empty.
    """

    char: str
    onset: str
    vowel: str = ""
    coda: str = ""

    @classmethod
    def from_char(cls, ch: str) -> "Syllable":
        if is_hangul_syllable(ch):
            lead, vowel, tail = decompose(ch)
            return cls(char=ch, onset=lead, vowel=vowel, coda=tail)
        return cls(char=ch, onset=ch)

    @property
    def is_syllable(self) -> bool:
        return bool(self.vowel)

    @property
    def is_jamo(self) -> bool:
        return not self.vowel and is_compat_jamo(self.char)

    @property
    def is_vowel_initial(self) -> bool:
        return self.is_syllable and self.onset == NULL_ONSET

    def compose(self) -> str:
        """Return the current (possibly rewritten) components as one character."""
        if not self.is_syllable:
            return self.char
        return compose_lvt(self.onset, self.vowel, self.coda)
