"""
Conversion facade — the single entry point for turning French words into integers.

Flow:
  ┌────────────┐
  │  Raw text  │
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ Normalizer │   ← lowercase, strip, reject non-text / too long
  └─────┬──────┘
        │
  ┌─────▼──────┐  hit
  │   Cache    ├───────► value
  └─────┬──────┘
        │ miss
  ┌─────▼──────┐
  │ Extractor  │   ← pure recursive parse
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ Cache put  │
  └────────────┘

Design principles:
  - Empty input is worth 0 and never touches the cache.
  - The extractor runs outside the cache lock; it is pure, so two threads
    missing on the same text just compute the same value twice.
  - The cached and uncached paths share normalization, so they always agree.
"""

from __future__ import annotations

import logging
import threading

from .cache import ConversionCache
from .config import ConverterSettings
from .exceptions import ConversionError
from .extractor import extract
from .models import CacheStats, ConversionResult
from .normalizer import normalize_text
from .vocabulary import is_known_word

logger = logging.getLogger(__name__)

# Minimum share of recognized tokens for is_plausible()
PLAUSIBILITY_THRESHOLD = 0.5


class FrenchNumberConverter:
    """Normalizes, consults the cache, else extracts and remembers.

    Usage:
        converter = FrenchNumberConverter()
        converter.convert("deux cent cinquante")   # 250
        converter.cache_stats().size               # 1
    """

    def __init__(
        self,
        settings: ConverterSettings | None = None,
        cache: ConversionCache | None = None,
    ):
        self.settings = settings if settings is not None else ConverterSettings.from_env()
        self.cache = cache if cache is not None else ConversionCache(self.settings.cache_capacity)

    def convert(self, text: object) -> int:
        """Convert French number words to an integer, memoizing the result.

        Args:
            text: e.g. "trois milliards cinq cents millions"

        Returns:
            3_500_000_000

        Raises:
            InvalidInputError: If *text* cannot be treated as text.
            InputTooLongError: If *text* exceeds the configured maximum length.
        """
        normalized = self._normalize(text)
        if not normalized:
            return 0

        cached = self.cache.get(normalized)
        if cached is not None:
            logger.debug("Cache hit for %r", normalized)
            return cached

        logger.debug("Cache miss for %r", normalized)
        value = extract(normalized)
        self.cache.put(normalized, value)
        return value

    def convert_uncached(self, text: object) -> int:
        """Same as convert() but never reads or writes the cache."""
        normalized = self._normalize(text)
        return extract(normalized)

    def analyze(self, text: object) -> ConversionResult:
        """Convert *text* and report the normalized key and plausibility verdict.

        ``None`` is reported as empty text worth 0, like convert().
        """
        value = self.convert(text)
        return ConversionResult(
            text="" if text is None else text,
            normalized=normalize_text(text),
            value=value,
            plausible=self.is_plausible(text),
        )

    def is_plausible(self, text: object) -> bool:
        """Heuristic: do at least half of the tokens look like French number words?

        Not a parser guarantee — "vingt invalid" is plausible, "invalid" is not.
        Non-text and empty input are simply not plausible.
        """
        try:
            normalized = normalize_text(text)
        except ConversionError:
            return False

        words = normalized.replace("-", " ").split()
        if not words:
            return False

        recognized = sum(1 for word in words if is_known_word(word))
        return recognized / len(words) >= PLAUSIBILITY_THRESHOLD

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("Conversion cache cleared")

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()

    # ─── Helpers ─────────────────────────────────────────────────────

    def _normalize(self, text: object) -> str:
        try:
            return normalize_text(text, max_length=self.settings.max_input_length)
        except ConversionError as e:
            logger.warning("Rejected input [%s]: %s", e.code, e)
            raise


# ─── Process-wide Default Converter ─────────────────────────────────

_default_converter: FrenchNumberConverter | None = None
_default_lock = threading.Lock()


def get_default_converter() -> FrenchNumberConverter:
    """Return the shared converter, creating it from the environment on first use."""
    global _default_converter  # noqa: PLW0603
    with _default_lock:
        if _default_converter is None:
            _default_converter = FrenchNumberConverter()
            logger.info(
                "Default converter ready (cache capacity %d, max input length %d)",
                _default_converter.settings.cache_capacity,
                _default_converter.settings.max_input_length,
            )
        return _default_converter


def convert(text: object) -> int:
    """Convert French number words to an integer using the shared cache."""
    return get_default_converter().convert(text)


def convert_uncached(text: object) -> int:
    """Convert without the cache; always agrees with convert()."""
    return get_default_converter().convert_uncached(text)


def clear_cache() -> None:
    get_default_converter().clear_cache()


def cache_stats() -> CacheStats:
    return get_default_converter().cache_stats()


def is_plausible_french_number(text: object) -> bool:
    """True if at least half of the words in *text* are French number words."""
    return get_default_converter().is_plausible(text)
