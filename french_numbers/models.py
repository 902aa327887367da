"""
Pydantic models for conversion results and cache statistics.

Every field is explicitly typed. These are the shapes handed to callers,
the command line report and the HTTP API.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ─── Cache Statistics ───────────────────────────────────────────────


class CacheStats(BaseModel):
    """Snapshot of the conversion cache."""

    size: int = Field(ge=0)
    capacity: int = Field(ge=1)
    hits: int = Field(default=0, ge=0)
    lookups: int = Field(default=0, ge=0)
    hit_ratio: float = Field(default=0.0, ge=0.0, le=1.0)  # hits / lookups, 0.0 before any lookup


# ─── Conversion Result ──────────────────────────────────────────────


class ConversionResult(BaseModel):
    """A single conversion with the heuristic verdict alongside it."""

    text: str  # As given by the caller
    normalized: str  # Lowercased and stripped; also the cache key
    value: int
    plausible: bool  # At least half of the tokens are known number words
