"""
French Number Parser — written-out French numbers to integers.

Architecture: Normalizer → LRU cache → Recursive extractor → Cache insert
Philosophy:  Lenient on vocabulary (unknown words are worth 0), strict on input type.

    >>> import french_numbers
    >>> french_numbers.convert("trois milliards cinq cents millions")
    3500000000
"""

from .converter import (
    FrenchNumberConverter,
    cache_stats,
    clear_cache,
    convert,
    convert_uncached,
    get_default_converter,
    is_plausible_french_number,
)
from .exceptions import ConversionError, InputTooLongError, InvalidInputError

__version__ = "1.0.0"

__all__ = [
    "ConversionError",
    "FrenchNumberConverter",
    "InputTooLongError",
    "InvalidInputError",
    "cache_stats",
    "clear_cache",
    "convert",
    "convert_uncached",
    "get_default_converter",
    "is_plausible_french_number",
]
