#!/usr/bin/env python3
"""
French Number Parser — Entry Point
==================================

Converts French number phrases and prints a small report.

Usage:
    python main.py                                   # Built-in sample phrases
    python main.py "deux cent cinquante" "mille"     # Your own phrases
"""

from __future__ import annotations

import sys

from french_numbers import __version__
from french_numbers.converter import FrenchNumberConverter
from french_numbers.exceptions import ConversionError
from french_numbers.models import CacheStats, ConversionResult

SAMPLE_PHRASES = [
    "vingt et un",
    "quatre-vingt-dix-neuf",
    "deux cent cinquante",
    "mille cent onze",
    "septante-cinq",
    "trois milliards cinq cents millions",
    "soixante-quinze million trois cent quarante six mille sept cent quatre-vingt-dix neuf",
    "vingt invalid",
    "vingt et un",  # Repeated on purpose: served from the cache
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _print_result(result: ConversionResult) -> None:
    color = _GREEN if result.plausible else _YELLOW
    print(f"  {result.text}")
    print(f"    {_DIM}→{_RESET} {color}{_BOLD}{result.value:,}{_RESET}")
    if not result.plausible:
        print(f"    {_YELLOW}(few recognized number words){_RESET}")


def _print_error(text: str, error: ConversionError) -> None:
    shown = text if len(text) <= 40 else f"{text[:40]}..."
    print(f"  {shown}")
    print(f"    {_RED}[{error.code}]{_RESET} {error}")


def _print_cache_stats(stats: CacheStats) -> None:
    print(f"  Cache size:  {stats.size}/{stats.capacity}")
    print(f"  Hit ratio:   {stats.hit_ratio:.1%} ({stats.hits}/{stats.lookups})")


# ─── Main ────────────────────────────────────────────────────────────


def main() -> None:
    """Convert every phrase, print the report and exit 1 if any looked wrong."""
    phrases = sys.argv[1:] or SAMPLE_PHRASES
    converter = FrenchNumberConverter()

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  FRENCH NUMBER PARSER {__version__}{_RESET}")
    print(f"{'=' * _WIDTH}")

    all_plausible = True
    for text in phrases:
        try:
            result = converter.analyze(text)
        except ConversionError as e:
            _print_error(text, e)
            all_plausible = False
            continue
        _print_result(result)
        all_plausible = all_plausible and result.plausible

    print(f"{'─' * _WIDTH}")
    _print_cache_stats(converter.cache_stats())
    print(f"{'=' * _WIDTH}\n")

    sys.exit(0 if all_plausible else 1)


if __name__ == "__main__":
    main()
