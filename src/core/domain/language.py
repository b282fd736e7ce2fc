"""Language utilities for pascal-bench.

This module centralizes the language options supported across the
application. Keeping it in the domain layer allows both CLI and service
layers to share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    INDONESIAN = "id"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    @classmethod
    def from_bool(cls, indonesian: bool) -> "Language":
        """Derive a language value from a boolean flag."""

        return cls.INDONESIAN if indonesian else cls.ENGLISH

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "Indonesian" if self is Language.INDONESIAN else "English"
