"""Tests for core.services.benchmark.

Timing values are non-deterministic, so these tests check shape, ordering and
the safety policy rather than actual durations.
"""
from __future__ import annotations

import pytest

import core.services.benchmark as benchmark
from core.config import AppSettings
from core.domain.errors import InvalidSizeError
from core.domain.models import Algorithm, BatchEntry
from core.interfaces.builder import TriangleBuilder
from core.services.benchmark import (
    ESTIMATE_DIVISOR,
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
from core.services.triangle_builder import build_triangle_iterative


def test_measure_iterative_returns_triangle_and_non_negative_time() -> None:
    result = measure("iterative", 10)

    assert result.algorithm is Algorithm.ITERATIVE
    assert result.size == 10
    assert result.elapsed_ms >= 0
    assert result.triangle == build_triangle_iterative(10)


def test_measure_recursive_matches_iterative() -> None:
    result = measure(Algorithm.RECURSIVE, 12)
    assert result.triangle == build_triangle_iterative(12)


def test_measure_zero_rows() -> None:
    result = measure(Algorithm.ITERATIVE, 0)
    assert result.triangle == []
    assert result.elapsed_ms >= 0


@pytest.mark.parametrize("bad", [-1, 2.5, True, "10", None])
def test_measure_rejects_invalid_sizes(bad: object) -> None:
    with pytest.raises(InvalidSizeError):
        measure(Algorithm.ITERATIVE, bad)  # type: ignore[arg-type]


def test_invalid_size_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_size(-5)
    assert validate_size(0) == 0


def test_measure_rejects_unknown_algorithm() -> None:
    with pytest.raises(ValueError):
        measure("quadratic", 3)


def test_builders_satisfy_protocol() -> None:
    for builder in benchmark.BUILDERS.values():
        assert isinstance(builder, TriangleBuilder)


def test_invalid_size_never_reaches_builder(monkeypatch: pytest.MonkeyPatch) -> None:
    called: list[int] = []

    def _spy(rows: int) -> list[list[int]]:
        called.append(rows)
        return []

    monkeypatch.setitem(benchmark.BUILDERS, Algorithm.ITERATIVE, _spy)
    with pytest.raises(InvalidSizeError):
        measure(Algorithm.ITERATIVE, -3)
    assert called == []


def test_complexity_labels() -> None:
    assert complexity_label("iterative") == "Θ(n²)"
    assert complexity_label(Algorithm.RECURSIVE) == "O(2ⁿ)"


def test_threshold_policy() -> None:
    assert within_threshold(20)
    assert not within_threshold(21)
    assert within_threshold(5, threshold=5)
    assert not within_threshold(6, threshold=5)


def test_estimate_formula() -> None:
    assert ESTIMATE_DIVISOR == 1_000_000
    assert estimate_recursive_ms(25) == pytest.approx(2**25 / 1_000_000)
    assert estimate_recursive_ms(0) == pytest.approx(1e-6)


def test_compare_within_threshold_runs_both() -> None:
    entry = compare(10)
    assert entry.size == 10
    assert entry.iterative_ms is not None and entry.iterative_ms >= 0
    assert entry.recursive_ms is not None and entry.recursive_ms >= 0
    assert entry.recursive_ran
    assert not entry.estimated


def test_compare_above_threshold_marks_not_run(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(rows: int) -> list[list[int]]:
        raise AssertionError("recursive builder must not be invoked")

    monkeypatch.setitem(benchmark.BUILDERS, Algorithm.RECURSIVE, _boom)
    entry = compare(25, threshold=20)

    assert entry.recursive_ms is None
    assert not entry.estimated
    assert not entry.recursive_ran
    assert entry.speedup is None


def test_compare_rejects_invalid_size() -> None:
    with pytest.raises(InvalidSizeError):
        compare(-1)


def test_run_batch_default_sizes_in_order() -> None:
    result = run_batch([5, 10, 15, 20, 25])

    assert result.sizes == [5, 10, 15, 20, 25]
    assert result.threshold == 20
    for entry in result.entries[:4]:
        assert entry.recursive_ran
        assert not entry.estimated
        assert entry.error is None
    last = result.entries[4]
    assert last.estimated
    assert not last.recursive_ran
    assert last.recursive_ms == pytest.approx(2**25 / 1_000_000)


def test_run_batch_without_estimate_leaves_skipped_absent() -> None:
    result = run_batch([3, 8], options=BatchOptions(threshold=4, estimate_skipped=False))

    first, second = result.entries
    assert first.recursive_ran
    assert second.recursive_ms is None
    assert not second.estimated
    assert result.threshold == 4


def test_run_batch_continues_after_failure() -> None:
    result = run_batch([3, -1, 2.5, 4])  # type: ignore[list-item]

    assert [e.size for e in result.entries] == [3, -1, None, 4]
    assert result.entries[0].error is None
    assert "non-negative integer" in (result.entries[1].error or "")
    assert result.entries[2].error is not None
    assert result.entries[3].recursive_ran
    assert len(result.failures) == 2


def test_run_batch_records_builder_exceptions(monkeypatch: pytest.MonkeyPatch) -> None:
    def _flaky(rows: int) -> list[list[int]]:
        if rows == 6:
            raise RecursionError("maximum recursion depth exceeded")
        return build_triangle_iterative(rows)

    monkeypatch.setitem(benchmark.BUILDERS, Algorithm.RECURSIVE, _flaky)
    result = run_batch([5, 6, 7])

    assert [e.error is None for e in result.entries] == [True, False, True]
    assert "recursion" in (result.entries[1].error or "")


def test_run_batch_hooks_called_in_order() -> None:
    started: list[int] = []
    finished: list[BatchEntry] = []

    run_batch(
        [4, 2, 6],
        hooks=BatchHooks(size_start=started.append, size_done=finished.append),
    )

    assert started == [4, 2, 6]
    assert [e.size for e in finished] == [4, 2, 6]


def test_run_batch_empty() -> None:
    result = run_batch([])
    assert result.entries == []


def test_batch_options_from_settings() -> None:
    settings = AppSettings(recursive_threshold=12, estimate_skipped=False)
    options = BatchOptions.from_settings(settings)
    assert options.threshold == 12
    assert options.estimate_skipped is False


def test_batch_options_reject_negative_threshold() -> None:
    with pytest.raises(ValueError):
        BatchOptions(threshold=-1)


def test_batch_options_accept_zero_threshold() -> None:
    result = run_batch([0, 1], options=BatchOptions(threshold=0))
    assert result.threshold == 0
    assert result.entries[0].recursive_ran
    assert result.entries[1].estimated
