"""
Converter configuration.

Defaults suit a single process; both limits can be overridden through the
environment (or a .env file):

    FRENCH_NUMBERS_CACHE_CAPACITY     entries kept in the LRU cache (default 1000)
    FRENCH_NUMBERS_MAX_INPUT_LENGTH   longest accepted input, in characters (default 1000)
"""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_CACHE_CAPACITY = 1000
DEFAULT_MAX_INPUT_LENGTH = 1000

CACHE_CAPACITY_ENV = "FRENCH_NUMBERS_CACHE_CAPACITY"
MAX_INPUT_LENGTH_ENV = "FRENCH_NUMBERS_MAX_INPUT_LENGTH"


class ConverterSettings(BaseModel):
    """Tunable limits of a FrenchNumberConverter."""

    cache_capacity: int = Field(default=DEFAULT_CACHE_CAPACITY, ge=1)
    max_input_length: int = Field(default=DEFAULT_MAX_INPUT_LENGTH, ge=1)

    @classmethod
    def from_env(cls) -> ConverterSettings:
        """Build settings from environment variables, loading .env first.

        Raises:
            pydantic.ValidationError: If a variable is not a positive integer.
        """
        load_dotenv()

        overrides: dict[str, str] = {}
        if CACHE_CAPACITY_ENV in os.environ:
            overrides["cache_capacity"] = os.environ[CACHE_CAPACITY_ENV]
        if MAX_INPUT_LENGTH_ENV in os.environ:
            overrides["max_input_length"] = os.environ[MAX_INPUT_LENGTH_ENV]

        return cls.model_validate(overrides)
