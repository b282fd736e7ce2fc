"""pascal-bench command line interface.

Thin presentation layer: collects sizes, calls the engine in `core.services`
and renders the results with Rich (or JSON for pipelines).
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import typer
from rich.console import Console
from rich.live import Live
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_exporter import render_json, render_triangle_json
from cli import doctor
from cli.ui_components import (
    build_result_panel,
    build_timing_table,
    label,
    print_banner,
    render_triangle,
)
from core.config import AppSettings
from core.domain.errors import InvalidSizeError
from core.domain.language import Language
from core.domain.models import Algorithm, BatchEntry
from core.services.benchmark import (
    BatchHooks,
    BatchOptions,
    compare,
    measure,
    run_batch,
    validate_size,
    within_threshold,
)
from core.services.reveal import reveal_schedule
from core.services.triangle_builder import coefficient_iterative, coefficient_recursive

app = typer.Typer(
    no_args_is_help=True,
    help="Compare iterative Θ(n²) and recursive O(2ⁿ) Pascal's Triangle builders.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _language(ctx: typer.Context) -> Language:
    obj = ctx.obj or {}
    return obj.get("language", Language.default())


def _settings(ctx: typer.Context) -> AppSettings:
    obj = ctx.obj or {}
    return obj.get("settings") or AppSettings()


def _check_rows(value: int, settings: AppSettings, *, param: str, minimum: int = 1) -> int:
    """Reject a size before any computation is attempted."""

    try:
        validate_size(value)
    except InvalidSizeError as exc:
        raise typer.BadParameter(str(exc), param_hint=param) from exc
    if not minimum <= value <= settings.max_rows:
        raise typer.BadParameter(
            f"must be between {minimum} and {settings.max_rows}, got {value}",
            param_hint=param,
        )
    return value


@app.callback()
def main(
    ctx: typer.Context,
    indonesian: bool = typer.Option(
        False,
        "--indonesian",
        "--id",
        help="Show labels in Indonesian.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    settings = AppSettings()
    _configure_logging("DEBUG" if verbose else settings.log_level)
    language = Language.INDONESIAN if indonesian else settings.default_language
    ctx.obj = {"settings": settings, "language": language}


@app.command()
def coefficient(
    ctx: typer.Context,
    n: int = typer.Argument(..., help="Row index (n >= 0)."),
    k: int = typer.Argument(..., help="Position within the row."),
    algorithm: Algorithm = typer.Option(Algorithm.ITERATIVE, "--algorithm", "-a"),
) -> None:
    """Print a single binomial coefficient C(n, k)."""

    settings = _settings(ctx)
    language = _language(ctx)
    _check_rows(n, settings, param="N", minimum=0)
    threshold = settings.recursive_threshold
    if algorithm is Algorithm.RECURSIVE and not within_threshold(n, threshold):
        raise typer.BadParameter(label(language, "warning_slow", threshold=threshold), param_hint="N")

    if algorithm is Algorithm.ITERATIVE:
        value = coefficient_iterative(n, k)
    else:
        value = coefficient_recursive(n, k)
    typer.echo(str(value))


@app.command()
def triangle(
    ctx: typer.Context,
    rows: int = typer.Argument(..., help="Number of rows to build."),
    algorithm: Algorithm = typer.Option(Algorithm.ITERATIVE, "--algorithm", "-a"),
    animate: bool = typer.Option(False, "--animate/--no-animate", help="Reveal nodes one by one."),
    json_output: bool = typer.Option(False, "--json", help="Print the rows as JSON."),
) -> None:
    """Build and draw the triangle (even values filled)."""

    settings = _settings(ctx)
    language = _language(ctx)
    _check_rows(rows, settings, param="ROWS")
    threshold = settings.recursive_threshold
    if algorithm is Algorithm.RECURSIVE and not within_threshold(rows, threshold):
        raise typer.BadParameter(label(language, "warning_slow", threshold=threshold), param_hint="ROWS")

    result = measure(algorithm, rows)
    if json_output:
        typer.echo(render_triangle_json(result.triangle), nl=False)
        return

    steps = reveal_schedule(result.triangle, animated=animate, step_ms=settings.reveal_step_ms)
    if animate:
        started = time.monotonic()
        with Live(render_triangle(steps, visible=0), console=_console, refresh_per_second=30) as live:
            for index, step in enumerate(steps):
                wait = step.delay_ms / 1000.0 - (time.monotonic() - started)
                if wait > 0:
                    time.sleep(wait)
                live.update(render_triangle(steps, visible=index + 1))
    else:
        _console.print(render_triangle(steps))

    _console.print(
        f"[dim]{label(language, algorithm.value)} {algorithm.complexity_label()}: "
        f"{result.elapsed_ms:.4f} ms[/dim]"
    )


@app.command(name="measure")
def measure_command(
    ctx: typer.Context,
    size: int = typer.Argument(..., help="Number of rows to build with both algorithms."),
    threshold: Optional[int] = typer.Option(
        None,
        "--threshold",
        min=0,
        help="Largest size for the recursive run (defaults to settings).",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Time both algorithms once for SIZE rows."""

    settings = _settings(ctx)
    language = _language(ctx)
    _check_rows(size, settings, param="SIZE")
    limit = settings.recursive_threshold if threshold is None else threshold

    entry = compare(size, threshold=limit)
    if json_output:
        typer.echo(render_json(entry), nl=False)
        return

    if not within_threshold(size, limit):
        _console.print(f"[yellow]{label(language, 'warning_slow', threshold=limit)}[/yellow]")
    _console.print(build_result_panel(entry, threshold=limit, language=language))


@app.command()
def batch(
    ctx: typer.Context,
    sizes: Optional[list[int]] = typer.Argument(None, help="Sizes to benchmark, in order."),
    threshold: Optional[int] = typer.Option(None, "--threshold", min=0),
    no_estimate: bool = typer.Option(
        False,
        "--no-estimate",
        help="Leave skipped recursive runs empty instead of a rough 2^n/1e6 estimate.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the batch as JSON."),
) -> None:
    """Run the comparison for several sizes (default 5 10 15 20 25)."""

    settings = _settings(ctx)
    language = _language(ctx)
    options = BatchOptions.from_settings(settings)
    if threshold is not None:
        options.threshold = threshold
    if no_estimate:
        options.estimate_skipped = False

    requested = list(sizes) if sizes else list(settings.batch_sizes)
    for size in requested:
        _check_rows(size, settings, param="SIZES")

    if json_output:
        result = run_batch(requested, options=options)
        typer.echo(render_json(result), nl=False)
        return

    print_banner(_console, language)
    with _console.status("") as status:

        def _start(size: int) -> None:
            status.update(f"{label(language, 'size')} = {size}")

        def _done(entry: BatchEntry) -> None:
            if entry.error is not None:
                _console.print(f"[red]{escape(label(language, 'failed', error=entry.error))}[/red]")

        result = run_batch(requested, options=options, hooks=BatchHooks(size_start=_start, size_done=_done))

    _console.print(build_timing_table(result.entries, threshold=options.threshold, language=language))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
