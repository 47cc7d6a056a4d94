"""
Korean romanizer package exports.

Romanizes Hangul following the Revised Romanization of Korean, applying the
pronunciation rules (neutralization, ㅎ aspiration, liaison) first.
"""

from .domain.hangul_compose import Syllable, compose_lvt, decompose  # noqa: F401
from .domain.pronunciation import pronounce, pronounced_text  # noqa: F401
from .domain.romanization_rr import RRResult, RRSegment, romanize, romanize_detailed  # noqa: F401
from .services.name_romanizer import NameRomanizer, romanize_full_name, romanize_name  # noqa: F401

__all__ = [
    "NameRomanizer",
    "RRResult",
    "RRSegment",
    "Syllable",
    "compose_lvt",
    "decompose",
    "pronounce",
    "pronounced_text",
    "romanize",
    "romanize_detailed",
    "romanize_full_name",
    "romanize_name",
]
