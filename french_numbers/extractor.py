"""
Convert written-out French number words to their integer value.

The extractor is a pure function of its input: no shared state, no logging,
no exceptions for vocabulary it does not know (unknown words are worth 0,
so "vingt invalid" still yields 20).

Supported patterns:
    "vingt et un"                          → 21
    "quatre-vingt-dix-neuf"                → 99
    "deux cent cinquante"                  → 250
    "mille cent onze"                      → 1,111
    "trois milliards cinq cents millions"  → 3,500,000,000

Algorithm (recursive, each step works on a strictly shorter residual):
    1. Empty text → 0; an exact base word → its value.
    2. Factor × multiplier: the earliest scale word ("cent", "mille", ...)
       and the phrase before it. The phrase is the factor, the scale word
       gives the magnitude, and the rest of the text is summed recursively.
       When the rest contains a LARGER scale word ("cinq cents millions"),
       the current product becomes the factor of that larger scale.
    3. The irregular "quatre-vingt(s)(-dix)" family (80/90 = 4 × 20 [+ 10]).
    4. Additive scan of whatever tokens remain.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .vocabulary import BASE_WORDS, CONJUNCTION, MULTIPLIER_EXPONENTS, MULTIPLIER_KEYS

# ─── Precompiled Patterns ────────────────────────────────────────────

# Bare alternation: the factor phrase is sliced off the text by position
MULTIPLIER_PATTERN = re.compile("|".join(re.escape(word) for word in MULTIPLIER_KEYS))

QUATRE_VINGT_PATTERN = re.compile(
    r"(?P<base>quatre[-\s]vingts?(?:[-\s]dix)?)[-\s]?(?P<suffix>\w*)"
)

_TOKEN_SEPARATORS = re.compile(r"[-\s]+")


# ─── Data Structures ────────────────────────────────────────────────


@dataclass(frozen=True)
class ExtractionDetail:
    """Partial result while a chain of multipliers is being combined."""

    factor: int
    magnitude: int
    residual: str


# ─── Public API ──────────────────────────────────────────────────────


def extract(text: str) -> int:
    """Convert normalized French number words to an integer.

    Args:
        text: Lowercased, stripped text, e.g. "deux cent cinquante".

    Returns:
        250. Text without any number words yields 0.
    """
    if not text:
        return 0

    if text in BASE_WORDS:
        return BASE_WORDS[text]

    detail = _extract_multiplier(text, detail=False)
    if detail is not None:
        return extract(detail.residual) + detail.factor * detail.magnitude

    match = QUATRE_VINGT_PATTERN.search(text)
    if match:
        return _extract_quatre_vingt(text, match)

    return additive_scan(text)


def additive_scan(text: str) -> int:
    """Sum the value of every token, right to left.

    "et" is worth 0, a base word its table value and unknown tokens 0.
    A bare multiplier word here is worth 10 * exponent ("cent" → 20,
    "mille" → 30), NOT 10 ** exponent. Callers only reach this with
    multiplier-free text, except through direct use.
    """
    total = 0
    for word in reversed(_TOKEN_SEPARATORS.split(text)):
        if not word or word == CONJUNCTION:
            continue
        if word in BASE_WORDS:
            total += BASE_WORDS[word]
        elif word in MULTIPLIER_EXPONENTS:
            total += 10 * MULTIPLIER_EXPONENTS[word]
    return total


# ─── Pattern Handlers ────────────────────────────────────────────────


def _extract_multiplier(text: str, detail: bool) -> ExtractionDetail | None:
    """Apply the factor × multiplier pattern to *text*.

    Returns None if *text* contains no multiplier word. In detail mode an
    empty factor stays 0 so the caller can add it to its own product;
    otherwise a bare multiplier means one of that magnitude ("cent" = 100).
    """
    match = MULTIPLIER_PATTERN.search(text)
    if match is None:
        return None

    # The factor phrase runs from the start of the line to the multiplier,
    # less one separating whitespace character
    factor_end = match.start()
    if factor_end and text[factor_end - 1].isspace():
        factor_end -= 1
    factor_start = text.rfind("\n", 0, factor_end) + 1

    residual = text[:factor_start] + text[match.end():]
    phrase = text[factor_start:factor_end]
    multiplier = match.group()

    factor = BASE_WORDS[phrase] if phrase in BASE_WORDS else additive_scan(phrase)
    if factor == 0 and not detail:
        factor = 1
    magnitude = 10 ** MULTIPLIER_EXPONENTS[multiplier]

    if _has_higher_multiplier(multiplier, residual):
        inner = _extract_multiplier(residual, detail=True)
        # A higher multiplier word is in the residual, so the pattern matches
        assert inner is not None
        factor = factor * magnitude + inner.factor
        magnitude = inner.magnitude
        residual = inner.residual

    return ExtractionDetail(factor=factor, magnitude=magnitude, residual=residual)


def _extract_quatre_vingt(text: str, match: re.Match[str]) -> int:
    """Value the quatre-vingt span, then add whatever the rest of *text* is worth."""
    canonical = re.sub(r"\s", "-", match.group("base"))
    if canonical.endswith("s"):
        canonical = canonical[:-1]

    residual = text[: match.start()] + text[match.end():]
    return (
        extract(residual)
        + BASE_WORDS[canonical]
        + BASE_WORDS.get(match.group("suffix"), 0)
    )


def _has_higher_multiplier(multiplier: str, text: str) -> bool:
    """True if *text* mentions a multiplier word larger than *multiplier*."""
    current = MULTIPLIER_EXPONENTS[multiplier]
    return any(
        exponent > current and word in text
        for word, exponent in MULTIPLIER_EXPONENTS.items()
    )
