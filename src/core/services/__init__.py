"""Engine services: triangle builders, benchmark harness, reveal schedule."""

from core.services.benchmark import (
    BatchHooks,
    BatchOptions,
    compare,
    complexity_label,
    estimate_recursive_ms,
    measure,
    run_batch,
    validate_size,
    within_threshold,
)
from core.services.reveal import is_filled, reveal_schedule
from core.services.triangle_builder import (
    build_triangle_iterative,
    build_triangle_recursive,
    coefficient_iterative,
    coefficient_recursive,
)

__all__ = [
    "BatchHooks",
    "BatchOptions",
    "build_triangle_iterative",
    "build_triangle_recursive",
    "coefficient_iterative",
    "coefficient_recursive",
    "compare",
    "complexity_label",
    "estimate_recursive_ms",
    "is_filled",
    "measure",
    "reveal_schedule",
    "run_batch",
    "validate_size",
    "within_threshold",
]
