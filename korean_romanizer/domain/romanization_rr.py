from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from korean_romanizer.domain.hangul_compose import Syllable
from korean_romanizer.domain.pronunciation import pronounce


@dataclass(frozen=True)
class RRSegment:
    text: str
    role: str  # "consonant" | "vowel" | "final" | "text"


@dataclass(frozen=True)
class RRResult:
    rr: str
    hint: str
    details: list[str]
    segments: list[RRSegment]


_VOWEL_RR: Final[dict[str, str]] = {
    # monophthongs
    "ㅏ": "a",
    "ㅓ": "eo",
    "ㅗ": "o",
    "ㅜ": "u",
    "ㅡ": "eu",
    "ㅣ": "i",
    "ㅐ": "ae",
    "ㅔ": "e",
    "ㅚ": "oe",
    "ㅟ": "wi",
    # diphthongs
    "ㅘ": "wa",
    "ㅝ": "wo",
    "ㅙ": "wae",
    "ㅞ": "we",
    "ㅢ": "ui",
    "ㅑ": "ya",
    "ㅕ": "yeo",
    "ㅛ": "yo",
    "ㅠ": "yu",
    "ㅒ": "yae",
    "ㅖ": "ye",
}

# Consonants spelled the same wherever they occur
_CONS_RR: Final[dict[str, str]] = {
    "ㄴ": "n",
    "ㅁ": "m",
    "ㅅ": "s",
    "ㅈ": "j",
    "ㅊ": "ch",
    "ㅋ": "k",
    "ㅌ": "t",
    "ㅍ": "p",
    "ㅎ": "h",
    "ㄲ": "kk",
    "ㄸ": "tt",
    "ㅃ": "pp",
    "ㅆ": "ss",
    "ㅉ": "jj",
}

# ㄱ/ㄷ/ㅂ/ㄹ: (followed by a vowel, before a consonant or at the end)
_POSITIONAL_RR: Final[dict[str, tuple[str, str]]] = {
    "ㄱ": ("g", "k"),
    "ㄷ": ("d", "t"),
    "ㅂ": ("b", "p"),
    "ㄹ": ("r", "l"),
}

# ㅇ is silent as an initial and the velar nasal as a final
_IEUNG_RR: Final[tuple[str, str]] = ("", "ng")

# Finals the pronunciation rules can leave behind
_FINAL_CLASSES: Final[frozenset[str]] = frozenset({"ㄱ", "ㄴ", "ㄷ", "ㄹ", "ㅁ", "ㅂ", "ㅇ"})


def consonant_rr(jamo: str, before_vowel: bool) -> str:
    """Return the RR spelling of a consonant jamo in context.

    An initial is always followed by its own vowel; a final that survived the
    pronunciation rules never is (liaison has already moved it otherwise).
    """
    if jamo in _POSITIONAL_RR:
        voiced, plain = _POSITIONAL_RR[jamo]
        return voiced if before_vowel else plain
    if jamo == "ㅇ":
        return _IEUNG_RR[0] if before_vowel else _IEUNG_RR[1]
    if jamo in _CONS_RR:
        return _CONS_RR[jamo]
    raise ValueError("No RR spelling for consonant %r" % (jamo,))


def _final_rr(coda: str) -> str:
    if not coda:
        return ""
    if coda not in _FINAL_CLASSES:
        raise ValueError("Final was not reduced by the pronunciation rules: %r" % (coda,))
    return consonant_rr(coda, before_vowel=False)


def _jamo_rr(glyph: str) -> str:
    """Standalone compatibility jamo, spelled without context."""
    if glyph in _VOWEL_RR:
        return _VOWEL_RR[glyph]
    if glyph in _POSITIONAL_RR or glyph in _CONS_RR or glyph == "ㅇ":
        return consonant_rr(glyph, before_vowel=True)
    # complex / archaic jamo have no RR spelling
    return glyph


def _segments_for(syllable: Syllable) -> list[RRSegment]:
    if syllable.is_syllable:
        segments: list[RRSegment] = []
        onset = consonant_rr(syllable.onset, before_vowel=True)
        if onset:
            segments.append(RRSegment(text=onset, role="consonant"))
        segments.append(RRSegment(text=_VOWEL_RR[syllable.vowel], role="vowel"))
        final = _final_rr(syllable.coda)
        if final:
            segments.append(RRSegment(text=final, role="final"))
        return segments

    if syllable.is_jamo:
        glyph = syllable.char
        role = "vowel" if glyph in _VOWEL_RR else "consonant"
        return [RRSegment(text=_jamo_rr(glyph), role=role)]

    return [RRSegment(text=syllable.char, role="text")]


def _is_hangul_unit(syllable: Syllable) -> bool:
    return syllable.is_syllable or syllable.is_jamo


def _render(syllables: list[Syllable], add_spaces: bool) -> tuple[str, list[RRSegment]]:
    parts: list[str] = []
    segments: list[RRSegment] = []
    last = len(syllables) - 1

    for i, syllable in enumerate(syllables):
        unit = _segments_for(syllable)
        segments.extend(unit)
        parts.append("".join(seg.text for seg in unit))

        if add_spaces and _is_hangul_unit(syllable) and i < last:
            if not syllables[i + 1].char.isspace():
                parts.append(" ")

    return "".join(parts), segments


def to_title_case(text: str) -> str:
    """Uppercase the first letter of each whitespace-delimited word, lowercase the rest."""
    out: list[str] = []
    capitalize_next = True
    for ch in text:
        if ch.isspace():
            out.append(ch)
            capitalize_next = True
        elif capitalize_next:
            out.append(ch.upper())
            capitalize_next = False
        else:
            out.append(ch.lower())
    return "".join(out)


def _pronounce(text: str) -> list[Syllable]:
    if not isinstance(text, str):
        raise TypeError("romanize() expects str, got %s" % type(text).__name__)
    return pronounce(text)


def romanize(text: str, add_spaces: bool = False, title_case: bool = False) -> str:
    """Romanize Korean text following the Revised Romanization of Korean.

    Args:
        text: any string; non-Hangul characters pass through unchanged.
        add_spaces: put a space after every romanized syllable.
        title_case: capitalize each whitespace-delimited word.
    """
    rr, _ = _render(_pronounce(text), add_spaces)
    if title_case:
        rr = to_title_case(rr)
    return rr


def romanize_detailed(text: str, add_spaces: bool = False, title_case: bool = False) -> RRResult:
    """Like `romanize`, but also return per-jamo segments and a readable hint."""
    syllables = _pronounce(text)
    if not syllables:
        return RRResult(rr="", hint="", details=[], segments=[])

    pronounced = "".join(s.compose() for s in syllables)
    rr, segments = _render(syllables, add_spaces)
    if title_case:
        rr = to_title_case(rr)

    details = [
        "RR spelling: {}".format(rr),
        "Pronounced as: {}".format(pronounced),
    ]
    hint = "\n".join(details)
    return RRResult(rr=rr, hint=hint, details=details, segments=segments)
