"""
French Number Parser — FastAPI Server
=====================================

RESTful API for converting written-out French numbers to integers.

Endpoints:
    POST   /convert         Convert a French number phrase
    GET    /cache/stats     Conversion cache statistics
    DELETE /cache           Clear the conversion cache
    GET    /health          Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from french_numbers import __version__
from french_numbers.converter import FrenchNumberConverter
from french_numbers.exceptions import ConversionError, InputTooLongError
from french_numbers.models import CacheStats, ConversionResult

# ─── Application Lifespan (pre-warm converter) ──────────────────────

_converter: FrenchNumberConverter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the converter (settings + cache) on startup."""
    global _converter  # noqa: PLW0603
    _converter = FrenchNumberConverter()
    yield
    _converter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="French Number Parser API",
    description=(
        "Converts written-out French numbers (standard, Belgian and Swiss forms) "
        "to integers, with a bounded LRU cache of past conversions."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    text: str = Field(
        ...,
        description="The French number phrase to convert.",
        json_schema_extra={"example": "trois milliards cinq cents millions"},
    )


class ConvertResponse(ConversionResult):
    """API-facing conversion result (inherits all fields from ConversionResult)."""


class HealthResponse(BaseModel):
    status: str
    version: str
    cache_capacity: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter() -> FrenchNumberConverter:
    if _converter is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    return _converter


def _error_status(error: ConversionError) -> int:
    return 413 if isinstance(error, InputTooLongError) else 422


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a French number phrase",
    tags=["Conversion"],
    responses={
        413: {"description": "Text longer than the configured maximum"},
        503: {"description": "Converter not yet initialised"},
    },
)
def convert_text(request: ConvertRequest) -> ConvertResponse:
    """Convert French number words to an integer.

    Returns:
    - **value**: the integer (unknown words count as 0)
    - **normalized**: the lowercased, stripped text used as cache key
    - **plausible**: `true` if at least half of the words are number words
    """
    converter = _get_converter()
    try:
        result = converter.analyze(request.text)
    except ConversionError as e:
        raise HTTPException(
            status_code=_error_status(e),
            detail={"code": e.code, "message": str(e), "details": e.details},
        ) from e
    return ConvertResponse.model_validate(result, from_attributes=True)


@app.get(
    "/cache/stats",
    summary="Conversion cache statistics",
    tags=["Cache"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def get_cache_stats() -> CacheStats:
    return _get_converter().cache_stats()


@app.delete(
    "/cache",
    summary="Clear the conversion cache",
    tags=["Cache"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def delete_cache() -> CacheStats:
    """Empty the cache, reset its counters and return the fresh statistics."""
    converter = _get_converter()
    converter.clear_cache()
    return converter.cache_stats()


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    converter = _get_converter()
    return HealthResponse(
        status="healthy",
        version=__version__,
        cache_capacity=converter.settings.cache_capacity,
    )
