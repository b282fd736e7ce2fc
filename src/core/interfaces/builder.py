"""Triangle builder contract.

Protocol instead of a base class: the builders are plain functions and any
callable with the same shape (a test double, an alternative algorithm) can be
registered with the benchmark harness.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Triangle


@runtime_checkable
class TriangleBuilder(Protocol):
    """Minimal contract for a triangle construction strategy.

    Design rules:
    - Synchronous and side-effect free.
    - Does not validate `rows`; the harness does.
    """

    def __call__(self, rows: int) -> Triangle:
        """Build rows 0..rows-1 of Pascal's Triangle."""

        ...
