"""Domain models and entities.

Pure data structures (Pydantic v2). The domain knows nothing about timing,
the terminal, or JSON output.
"""

from core.domain.errors import InvalidSizeError
from core.domain.language import Language
from core.domain.models import (
    Algorithm,
    BatchEntry,
    BenchmarkBatch,
    RevealStep,
    TimedResult,
    Triangle,
)

__all__ = [
    "Algorithm",
    "BatchEntry",
    "BenchmarkBatch",
    "InvalidSizeError",
    "Language",
    "RevealStep",
    "TimedResult",
    "Triangle",
]
