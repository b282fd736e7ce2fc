"""Pascal's Triangle construction, iterative and recursive.

Both styles are kept deliberately naive so their growth can be compared:
- iterative: bottom-up table, Θ(n²) time and space;
- recursive: plain top-down recurrence without memoization, O(2ⁿ).

No validation happens here. The benchmark harness rejects invalid sizes.
"""

from __future__ import annotations

from core.domain.models import Triangle


def coefficient_iterative(n: int, k: int) -> int:
    """C(n, k) read from a full bottom-up table of n + 1 rows."""

    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1

    # Whole table is kept even though only the last row is read.
    table: Triangle = []
    for i in range(n + 1):
        row: list[int] = []
        for j in range(i + 1):
            if j == 0 or j == i:
                row.append(1)
            else:
                row.append(table[i - 1][j - 1] + table[i - 1][j])
        table.append(row)

    return table[n][k]


def coefficient_recursive(n: int, k: int) -> int:
    """C(n, k) from the additive recurrence, unmemoized."""

    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1

    return coefficient_recursive(n - 1, k - 1) + coefficient_recursive(n - 1, k)


def build_triangle_iterative(rows: int) -> Triangle:
    """Rows 0..rows-1, each cell computed once from the row above."""

    triangle: Triangle = []
    for i in range(rows):
        row: list[int] = []
        for j in range(i + 1):
            if j == 0 or j == i:
                row.append(1)
            else:
                row.append(triangle[i - 1][j - 1] + triangle[i - 1][j])
        triangle.append(row)

    return triangle


def build_triangle_recursive(rows: int) -> Triangle:
    """Rows 0..rows-1 with an independent recursive call per cell.

    Nothing is shared between cells, so every cell pays for its own
    exponential recursion. This is the cost being demonstrated.
    """

    return [[coefficient_recursive(i, j) for j in range(i + 1)] for i in range(rows)]
