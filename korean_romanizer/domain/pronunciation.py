from __future__ import annotations

"""Pronunciation rules applied before romanization (domain layer).

RR spells Korean as it is pronounced, so finals are rewritten first:

1. neutralization of finals before a consonant or at a boundary
2. ㅎ-final aspiration / deletion
3. splitting of double finals before a vowel
4. liaison of single finals before a vowel

The rules run once, left to right, over a list of `Syllable` records. Each
step reads and writes slot `i` and may rewrite the onset of slot `i + 1`.
Only precomposed syllables take part; any other neighbour (space,
punctuation, standalone jamo) is treated like the end of the text.
"""

from typing import Final, Optional

from korean_romanizer.domain.hangul_compose import Syllable, final_to_initial


# -----------------------------------------------------------------------------
# Rule tables
# -----------------------------------------------------------------------------

# Rule 1: finals collapsed to their representative before a consonant / boundary.
# Simple finals already in ㄱ ㄴ ㄷ ㄹ ㅁ ㅂ ㅇ are left alone.
NEUTRALIZED_FINAL: Final[dict[str, str]] = {
    # velar -> [ㄱ]
    "ㄲ": "ㄱ",
    "ㅋ": "ㄱ",
    "ㄳ": "ㄱ",
    "ㄺ": "ㄱ",
    # alveolar / sibilant / affricate -> [ㄷ]
    "ㅅ": "ㄷ",
    "ㅆ": "ㄷ",
    "ㅈ": "ㄷ",
    "ㅊ": "ㄷ",
    "ㅌ": "ㄷ",
    # labial -> [ㅂ]
    "ㅍ": "ㅂ",
    "ㅄ": "ㅂ",
    "ㄿ": "ㅂ",
    # complex finals that keep their first member
    "ㄵ": "ㄴ",
    "ㄼ": "ㄹ",
    "ㄽ": "ㄹ",
    "ㄾ": "ㄹ",
    "ㄻ": "ㅁ",
}

# Rule 2: finals containing ㅎ, and what is left once the ㅎ is gone
H_FINAL_WITHOUT_H: Final[dict[str, str]] = {
    "ㅎ": "",
    "ㄶ": "ㄴ",
    "ㅀ": "ㄹ",
}

# ㅎ + ㄱ/ㄷ/ㅈ/ㅅ -> ㅋ/ㅌ/ㅊ/ㅆ
H_ASPIRATED_ONSET: Final[dict[str, str]] = {
    "ㄱ": "ㅋ",
    "ㄷ": "ㅌ",
    "ㅈ": "ㅊ",
    "ㅅ": "ㅆ",
}

# Rule 3: double finals as (stays as final, moves to next onset).
# ㄶ and ㅀ are resolved by the ㅎ rule before this one runs.
DOUBLE_CONSONANT_FINAL: Final[dict[str, tuple[str, str]]] = {
    "ㄳ": ("ㄱ", "ㅅ"),
    "ㄵ": ("ㄴ", "ㅈ"),
    "ㄺ": ("ㄹ", "ㄱ"),
    "ㄻ": ("ㄹ", "ㅁ"),
    "ㄼ": ("ㄹ", "ㅂ"),
    "ㄽ": ("ㄹ", "ㅆ"),
    "ㄾ": ("ㄹ", "ㅌ"),
    "ㄿ": ("ㄹ", "ㅍ"),
    "ㅄ": ("ㅂ", "ㅅ"),
}

# Rule 4: the velar nasal never moves to the next syllable
_NO_LIAISON: Final[frozenset[str]] = frozenset({"", "ㅇ"})


# -----------------------------------------------------------------------------
# Rules
# -----------------------------------------------------------------------------

def _next_syllable(syllables: list[Syllable], i: int) -> Optional[Syllable]:
    """Return slot i + 1 if it is a precomposed syllable, else None (boundary)."""
    if i + 1 >= len(syllables):
        return None
    nxt = syllables[i + 1]
    return nxt if nxt.is_syllable else None


def _neutralize(cur: Syllable, nxt: Optional[Syllable]) -> None:
    if nxt is not None and nxt.is_vowel_initial:
        return
    cur.coda = NEUTRALIZED_FINAL.get(cur.coda, cur.coda)


def _resolve_h_final(cur: Syllable, nxt: Optional[Syllable]) -> None:
    if cur.coda not in H_FINAL_WITHOUT_H:
        return

    without_h = H_FINAL_WITHOUT_H[cur.coda]

    if nxt is None:
        cur.coda = without_h
        return

    onset = nxt.onset
    if onset in H_ASPIRATED_ONSET:
        nxt.onset = H_ASPIRATED_ONSET[onset]
        cur.coda = without_h
    elif onset == "ㄴ":
        # ㅎ assimilates to the following ㄴ
        cur.coda = without_h or "ㄴ"
    else:
        # silent before a vowel; ㄴ/ㄹ left behind surface through liaison
        cur.coda = without_h


def _split_double_final(cur: Syllable, nxt: Optional[Syllable]) -> None:
    if nxt is None or not nxt.is_vowel_initial:
        return
    pair = DOUBLE_CONSONANT_FINAL.get(cur.coda)
    if pair is None:
        return
    cur.coda, nxt.onset = pair[0], final_to_initial(pair[1])


def _liaison(cur: Syllable, nxt: Optional[Syllable]) -> None:
    if nxt is None or not nxt.is_vowel_initial:
        return
    if cur.coda in _NO_LIAISON:
        return
    nxt.onset = final_to_initial(cur.coda)
    cur.coda = ""


def apply_rules(syllables: list[Syllable]) -> list[Syllable]:
    """Rewrite onsets/finals in place so they reflect pronunciation.

    The list length never changes. Returns the same list for chaining.
    """
    for i, cur in enumerate(syllables):
        if not cur.is_syllable or not cur.coda:
            continue
        nxt = _next_syllable(syllables, i)

        _neutralize(cur, nxt)
        _resolve_h_final(cur, nxt)
        _split_double_final(cur, nxt)
        _liaison(cur, nxt)

    return syllables


def pronounce(text: str) -> list[Syllable]:
    """Decompose `text` and return its pronunciation sequence."""
    return apply_rules([Syllable.from_char(ch) for ch in text])


def pronounced_text(text: str) -> str:
    """Return `text` respelled in Hangul as it is pronounced (e.g. 좋아 -> 조아)."""
    return "".join(s.compose() for s in pronounce(text))
