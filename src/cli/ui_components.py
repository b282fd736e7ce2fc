"""UI components for the CLI (Rich).

Keeps tables/panels apart from command logic so several commands can share
them.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.language import Language
from core.domain.models import Algorithm, BatchEntry, RevealStep

_LABELS: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "subtitle": "Pascal's Triangle • Θ(n²) vs O(2ⁿ)",
        "size": "Rows (n)",
        "iterative": "Iterative",
        "recursive": "Recursive",
        "speedup": "Speedup",
        "not_run": "Not run (n > {threshold})",
        "estimated": "~{value:.4f} ms (estimated)",
        "failed": "Failed: {error}",
        "batch_title": "Benchmark batch",
        "result_title": "Result",
        "warning_slow": "For n > {threshold} the recursive algorithm is too slow and will not be run.",
    },
    Language.INDONESIAN: {
        "subtitle": "Segitiga Pascal • Θ(n²) vs O(2ⁿ)",
        "size": "Jumlah Baris (n)",
        "iterative": "Iteratif",
        "recursive": "Rekursif",
        "speedup": "Percepatan",
        "not_run": "Tidak dijalankan (n > {threshold})",
        "estimated": "~{value:.4f} ms (perkiraan)",
        "failed": "Gagal: {error}",
        "batch_title": "Pengujian batch",
        "result_title": "Hasil",
        "warning_slow": "Untuk n > {threshold}, algoritma rekursif terlalu lambat dan tidak akan dijalankan.",
    },
}


def label(language: Language, key: str, **values: object) -> str:
    return _LABELS[language][key].format(**values)


def print_banner(console: Console, language: Language = Language.ENGLISH) -> None:
    """Print the welcome banner (skipped in JSON mode)."""

    title = Text("pascal-bench", style="bold cyan")
    subtitle = Text(label(language, "subtitle"), style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def format_recursive(entry: BatchEntry, *, threshold: int, language: Language) -> str:
    if entry.error is not None:
        return label(language, "failed", error=entry.error)
    if entry.recursive_ms is None:
        return label(language, "not_run", threshold=threshold)
    if entry.estimated:
        return label(language, "estimated", value=entry.recursive_ms)
    return f"{entry.recursive_ms:.4f} ms"


def build_timing_table(
    entries: list[BatchEntry],
    *,
    threshold: int,
    language: Language = Language.ENGLISH,
    title: str | None = None,
) -> Table:
    """Side-by-side timings, one row per size."""

    iterative = Algorithm.ITERATIVE
    recursive = Algorithm.RECURSIVE
    table = Table(title=title or label(language, "batch_title"))
    table.add_column(label(language, "size"), style="cyan", no_wrap=True, justify="right")
    table.add_column(
        f"{label(language, 'iterative')} {iterative.complexity_label()}",
        style="green",
        justify="right",
    )
    table.add_column(
        f"{label(language, 'recursive')} {recursive.complexity_label()}",
        style="magenta",
        justify="right",
    )
    table.add_column(label(language, "speedup"), style="yellow", justify="right")

    for entry in entries:
        size = "?" if entry.size is None else str(entry.size)
        iterative_cell = "-" if entry.iterative_ms is None else f"{entry.iterative_ms:.4f} ms"
        speedup = entry.speedup
        table.add_row(
            size,
            iterative_cell,
            format_recursive(entry, threshold=threshold, language=language),
            "-" if speedup is None else f"{speedup:.1f}x",
        )
    return table


def build_result_panel(
    entry: BatchEntry,
    *,
    threshold: int,
    language: Language = Language.ENGLISH,
) -> Panel:
    """Panel for a single `compare` run."""

    body = Text()
    body.append(f"{label(language, 'size')}: {entry.size}\n", style="bold")
    body.append(f"{label(language, 'iterative')} {Algorithm.ITERATIVE.complexity_label()}: ")
    body.append(f"{entry.iterative_ms:.4f} ms\n", style="green")
    body.append(f"{label(language, 'recursive')} {Algorithm.RECURSIVE.complexity_label()}: ")
    body.append(format_recursive(entry, threshold=threshold, language=language), style="magenta")
    if entry.speedup is not None:
        body.append(f"\n{label(language, 'speedup')}: {entry.speedup:.1f}x", style="yellow")
    return Panel(body, title=label(language, "result_title"), border_style="green")


def render_triangle(steps: list[RevealStep], *, visible: int | None = None) -> Text:
    """Centered triangle from reveal steps; only the first `visible` are drawn.

    Even values are drawn filled, which traces the Sierpinski pattern.
    """

    if not steps:
        return Text()

    shown = len(steps) if visible is None else max(0, visible)
    width = max(len(str(step.value)) for step in steps)
    rows = steps[-1].row + 1

    text = Text()
    current_row = -1
    for index, step in enumerate(steps):
        if step.row != current_row:
            if current_row >= 0:
                text.append("\n")
            current_row = step.row
            text.append(" " * ((rows - 1 - step.row) * (width + 1) // 2))
        cell = str(step.value).center(width)
        if index >= shown:
            text.append(" " * width)
        elif step.filled:
            text.append(cell, style="bold black on cyan")
        else:
            text.append(cell, style="cyan")
        text.append(" ")
    return text
