"""Domain models (Pydantic v2).

Notes:
- Every result is frozen: it is created once by the benchmark harness and
  owned by the caller afterwards.
- These models describe *what* a measurement is, not *how* it is taken.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

Triangle = list[list[int]]


class Algorithm(str, Enum):
    """Triangle construction strategy."""

    ITERATIVE = "iterative"
    RECURSIVE = "recursive"

    def complexity_label(self) -> str:
        """Fixed descriptive label, not derived from any measurement."""

        return "Θ(n²)" if self is Algorithm.ITERATIVE else "O(2ⁿ)"


class TimedResult(BaseModel):
    """One wall-clock sample of a triangle build."""

    model_config = ConfigDict(frozen=True)

    algorithm: Algorithm = Field(
        ...,
        description="Builder that produced the triangle.",
    )
    size: int = Field(
        ...,
        ge=0,
        description="Requested row count.",
    )
    elapsed_ms: float = Field(
        ...,
        ge=0.0,
        description="Elapsed wall-clock time in fractional milliseconds.",
    )
    triangle: Triangle = Field(
        default_factory=list,
        description="Rows 0..size-1 of the triangle.",
    )


class BatchEntry(BaseModel):
    """Side-by-side timing for one size.

    `recursive_ms` is None when the recursive builder was not run. When
    `estimated` is True the value is a rough `2^size / 1e6` placeholder and
    not a measurement.
    """

    model_config = ConfigDict(frozen=True)

    size: int | None = Field(
        ...,
        description="Requested row count (None if the request was not an integer).",
    )
    iterative_ms: float | None = Field(
        default=None,
        ge=0.0,
        description="Iterative build time (None if the size failed).",
    )
    recursive_ms: float | None = Field(
        default=None,
        ge=0.0,
        description="Recursive build time, estimate, or None when not run.",
    )
    estimated: bool = Field(
        default=False,
        description="True when `recursive_ms` is an estimate instead of a measurement.",
    )
    error: str | None = Field(
        default=None,
        description="Failure message for this size, if any.",
    )

    @model_validator(mode="after")
    def _estimate_needs_value(self) -> "BatchEntry":
        if self.estimated and self.recursive_ms is None:
            raise ValueError("an estimated entry must carry a recursive_ms value")
        return self

    @property
    def recursive_ran(self) -> bool:
        return self.recursive_ms is not None and not self.estimated

    @property
    def speedup(self) -> float | None:
        """How many times faster the iterative build was (measured values only)."""

        if not self.recursive_ran or not self.iterative_ms:
            return None
        return self.recursive_ms / self.iterative_ms


class BenchmarkBatch(BaseModel):
    """Ordered results of a batch run, one entry per requested size."""

    model_config = ConfigDict(frozen=True)

    entries: list[BatchEntry] = Field(
        default_factory=list,
        description="Entries in request order.",
    )
    threshold: int = Field(
        ...,
        ge=0,
        description="Largest size at which the recursive builder was run.",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Moment the batch was assembled (UTC).",
    )

    @property
    def sizes(self) -> list[int | None]:
        return [entry.size for entry in self.entries]

    @property
    def failures(self) -> list[BatchEntry]:
        return [entry for entry in self.entries if entry.error is not None]


class RevealStep(BaseModel):
    """Render instruction for one triangle node."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    value: int = Field(..., ge=0)
    delay_ms: int = Field(
        default=0,
        ge=0,
        description="Delay since the start of the animation.",
    )
    filled: bool = Field(
        default=False,
        description="Even values are drawn filled (Sierpinski pattern).",
    )
