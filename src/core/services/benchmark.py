"""Benchmark harness for the triangle builders.

Wraps a builder call with a wall-clock measurement and applies the safety
policy that keeps the exponential builder away from large sizes. The harness
never caps a size on its own: the threshold is supplied by the caller, and the
check happens before the builder is invoked (there is no in-flight timeout).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable

from core.config import DEFAULT_RECURSIVE_THRESHOLD, AppSettings
from core.domain.errors import InvalidSizeError
from core.domain.models import Algorithm, BatchEntry, BenchmarkBatch, TimedResult
from core.interfaces.builder import TriangleBuilder
from core.services.triangle_builder import build_triangle_iterative, build_triangle_recursive

logger = logging.getLogger(__name__)

# Arbitrary scale for the skipped-run placeholder. Not a calibrated model.
ESTIMATE_DIVISOR = 1_000_000

BUILDERS: dict[Algorithm, TriangleBuilder] = {
    Algorithm.ITERATIVE: build_triangle_iterative,
    Algorithm.RECURSIVE: build_triangle_recursive,
}


@dataclass
class BatchOptions:
    """Policy knobs for `run_batch`."""

    threshold: int = DEFAULT_RECURSIVE_THRESHOLD
    estimate_skipped: bool = True

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {self.threshold}")

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "BatchOptions":
        return cls(
            threshold=settings.recursive_threshold,
            estimate_skipped=settings.estimate_skipped,
        )


@dataclass
class BatchHooks:
    """Optional callbacks for UI layers (progress)."""

    size_start: Callable[[int], None] | None = None
    size_done: Callable[[BatchEntry], None] | None = None


def validate_size(size: object) -> int:
    """Return `size` unchanged or raise `InvalidSizeError`."""

    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(size)
    if size < 0:
        raise InvalidSizeError(size)
    return size


def complexity_label(algorithm: Algorithm | str) -> str:
    return Algorithm(algorithm).complexity_label()


def within_threshold(size: int, threshold: int = DEFAULT_RECURSIVE_THRESHOLD) -> bool:
    """Whether the recursive builder may be run for `size`."""

    return size <= threshold


def estimate_recursive_ms(size: int) -> float:
    """Rough order-of-magnitude filler for a skipped recursive run."""

    return 2**size / ESTIMATE_DIVISOR


def measure(algorithm: Algorithm | str, size: int) -> TimedResult:
    """Time one triangle build.

    Blocks until the builder returns. Asking for `recursive` at a large size
    will take exponentially long; callers apply `within_threshold` first.
    """

    algorithm = Algorithm(algorithm)
    validate_size(size)
    builder = BUILDERS[algorithm]

    start = time.perf_counter()
    triangle = builder(size)
    end = time.perf_counter()

    elapsed_ms = max(0.0, (end - start) * 1000.0)
    logger.debug("%s build of %d rows took %.4f ms", algorithm.value, size, elapsed_ms)
    return TimedResult(
        algorithm=algorithm,
        size=size,
        elapsed_ms=elapsed_ms,
        triangle=triangle,
    )


def compare(size: int, *, threshold: int = DEFAULT_RECURSIVE_THRESHOLD) -> BatchEntry:
    """Run both builders for one size.

    Above the threshold the recursive builder is not invoked and its time is
    absent (not zero, not estimated).
    """

    validate_size(size)
    iterative = measure(Algorithm.ITERATIVE, size)

    recursive_ms: float | None = None
    if within_threshold(size, threshold):
        recursive_ms = measure(Algorithm.RECURSIVE, size).elapsed_ms
    else:
        logger.info("Skipping recursive build for size %d (threshold %d)", size, threshold)

    return BatchEntry(
        size=size,
        iterative_ms=iterative.elapsed_ms,
        recursive_ms=recursive_ms,
    )


def _batch_entry(size: int, options: BatchOptions) -> BatchEntry:
    entry = compare(size, threshold=options.threshold)
    if entry.recursive_ms is None and options.estimate_skipped:
        return entry.model_copy(
            update={"recursive_ms": estimate_recursive_ms(size), "estimated": True}
        )
    return entry


def run_batch(
    sizes: Iterable[int],
    *,
    options: BatchOptions | None = None,
    hooks: BatchHooks | None = None,
) -> BenchmarkBatch:
    """Compare both builders for each size, in request order.

    A failing size is recorded with its error and the remaining sizes are
    still attempted.
    """

    options = options or BatchOptions()
    hooks = hooks or BatchHooks()
    entries: list[BatchEntry] = []

    for size in sizes:
        if hooks.size_start:
            hooks.size_start(size)
        try:
            entry = _batch_entry(size, options)
        except Exception as exc:
            logger.warning("Benchmark for size %r failed: %s", size, exc)
            valid = isinstance(size, int) and not isinstance(size, bool)
            entry = BatchEntry(size=size if valid else None, error=str(exc))
        entries.append(entry)
        if hooks.size_done:
            hooks.size_done(entry)

    return BenchmarkBatch(entries=entries, threshold=options.threshold)
