"""
Input normalization — the only place a conversion can be rejected.

Lowercases and trims whatever the caller hands us. Values that cannot be
treated as text fail loudly here, at the boundary, rather than somewhere
inside the recursive extractor.
"""

from __future__ import annotations

from .exceptions import InputTooLongError, InvalidInputError


def normalize_text(text: object, max_length: int | None = None) -> str:
    """Normalize raw input into the text the extractor and cache work on.

    Args:
        text: A ``str``, UTF-8 ``bytes``/``bytearray``, or ``None``
            (treated as empty).
        max_length: Optional upper bound on the normalized length.

    Returns:
        The lowercased, stripped text ("" for ``None``).

    Raises:
        InvalidInputError: If *text* is not text or is undecodable bytes.
        InputTooLongError: If the normalized text exceeds *max_length*.
    """
    if text is None:
        return ""

    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidInputError(
                "Input bytes are not valid UTF-8 text",
                details={"reason": str(e)},
            ) from e

    if not isinstance(text, str):
        raise InvalidInputError(
            f"Input must be text, got {type(text).__name__}",
            details={"type": type(text).__name__},
        )

    normalized = text.lower().strip()

    if max_length is not None and len(normalized) > max_length:
        raise InputTooLongError(
            f"Input is {len(normalized)} characters long (max {max_length})",
            details={"length": len(normalized), "max_length": max_length},
        )

    return normalized
