"""
Custom exception hierarchy for French number conversion.

Each exception type maps to a specific category of rejected input, carrying
a machine-readable code so callers (and the HTTP layer) can report it
precisely. Unknown vocabulary is NOT an error: the extractor values it at 0.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(ConversionError):
    """The input value has no text representation we accept."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_INPUT", message, details)


class InputTooLongError(ConversionError):
    """The normalized input exceeds the configured maximum length."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INPUT_TOO_LONG", message, details)
