"""
French number vocabulary — the static tables every conversion reads.

Two tables:
  - BASE_WORDS:           words with a direct value 0-99, including the
                          irregular compounds ("dix-sept"), the regional
                          Belgian/Swiss forms ("septante", "huitante",
                          "nonante") and the feminine "une".
  - MULTIPLIER_EXPONENTS: scale words mapped to their power-of-ten exponent,
                          singular and plural. French uses the long scale:
                          "milliard" = 10^9, "billion" = 10^12.

Both are read-only views built once at import time.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# ─── Base Words ──────────────────────────────────────────────────────

BASE_WORDS: Mapping[str, int] = MappingProxyType({
    "zéro": 0,
    "zero": 0,
    "un": 1,
    "une": 1,
    "deux": 2,
    "trois": 3,
    "quatre": 4,
    "cinq": 5,
    "six": 6,
    "sept": 7,
    "huit": 8,
    "neuf": 9,
    "dix": 10,
    "onze": 11,
    "douze": 12,
    "treize": 13,
    "quatorze": 14,
    "quinze": 15,
    "seize": 16,
    "dix-sept": 17,
    "dix-huit": 18,
    "dix-neuf": 19,
    "vingt": 20,
    "trente": 30,
    "quarante": 40,
    "cinquante": 50,
    "soixante": 60,
    "soixante-dix": 70,
    "septante": 70,
    "quatre-vingt": 80,
    "quatre-vingts": 80,
    "huitante": 80,
    "quatre-vingt-dix": 90,
    "quatre-vingts-dix": 90,
    "nonante": 90,
})

# ─── Multiplier Words ────────────────────────────────────────────────

MULTIPLIER_EXPONENTS: Mapping[str, int] = MappingProxyType({
    "un": 0,
    "dix": 1,
    "cent": 2,
    "cents": 2,
    "mille": 3,
    "milles": 3,
    "million": 6,
    "millions": 6,
    "milliard": 9,
    "milliards": 9,
    "billion": 12,
    "billions": 12,
    "trillion": 15,
    "trillions": 15,
    # Extended names, kept for completeness
    "quadrillion": 15,
    "quintillion": 18,
    "sextillion": 21,
    "septillion": 24,
    "octillion": 27,
    "nonillion": 30,
    "decillion": 33,
    "undecillion": 36,
    "duodecillion": 39,
    "tredecillion": 42,
    "quattuordecillion": 45,
    "quindecillion": 48,
    "sexdecillion": 51,
    "septendecillion": 54,
    "octodecillion": 57,
    "novemdecillion": 60,
    "vigintillion": 63,
    "unvigintillion": 66,
    "duovigintillion": 69,
    "trevigintillion": 72,
    "quattuorvigintillion": 75,
    "quinvigintillion": 78,
    "sexvigintillion": 81,
    "septenvigintillion": 84,
    "octovigintillion": 87,
    "novemvigintillion": 90,
    "trigintillion": 93,
    "untrigintillion": 96,
    "duotrigintillion": 99,
    "googol": 100,
})

# "un" and "dix" double as ordinary base words, so they never act as
# multipliers in the factor-multiplier pattern.
_NON_PATTERN_MULTIPLIERS: frozenset[str] = frozenset({"un", "dix"})

# Longest first: at any position the alternation must prefer "cents" over
# "cent" and "milliards" over "milliard".
MULTIPLIER_KEYS: tuple[str, ...] = tuple(
    sorted(
        (word for word in MULTIPLIER_EXPONENTS if word not in _NON_PATTERN_MULTIPLIERS),
        key=len,
        reverse=True,
    )
)

CONJUNCTION = "et"


def is_known_word(word: str) -> bool:
    """True if *word* is a base word, a multiplier word or the conjunction."""
    return word == CONJUNCTION or word in BASE_WORDS or word in MULTIPLIER_EXPONENTS
