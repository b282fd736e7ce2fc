"""Doctor command for environment diagnostics."""

from __future__ import annotations

import time

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, write_user_env_vars
from core.services.triangle_builder import (
    build_triangle_iterative,
    build_triangle_recursive,
    coefficient_iterative,
    coefficient_recursive,
)

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# Small enough that the recursive side finishes instantly.
SELF_CHECK_ROWS = 12


def check_agreement(rows: int = SELF_CHECK_ROWS) -> tuple[bool, str]:
    """Both algorithms must produce the same coefficients and triangle."""

    for n in range(rows):
        for k in range(-1, n + 2):
            if coefficient_iterative(n, k) != coefficient_recursive(n, k):
                return False, f"C({n}, {k}) differs"
    if build_triangle_iterative(rows) != build_triangle_recursive(rows):
        return False, f"triangles of {rows} rows differ"
    return True, f"C(n, k) and triangles agree for n < {rows}"


def check_timer() -> tuple[bool, str]:
    """Report the resolution of the clock used for measurements."""

    info = time.get_clock_info("perf_counter")
    ok = info.monotonic and info.resolution <= 1e-3
    return ok, f"{info.implementation}, resolution {info.resolution:.2e}s"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show the effective settings."""

    settings = AppSettings()

    table = Table(title="pascal-bench Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_agree, detail_agree = check_agreement()
    table.add_row("Algorithm agreement", "OK" if ok_agree else "FAIL", detail_agree)

    ok_timer, detail_timer = check_timer()
    table.add_row("Timer", "OK" if ok_timer else "WARN", detail_timer)

    # Config
    table.add_row("Recursive threshold", "OK", str(settings.recursive_threshold))
    table.add_row("Max rows", "OK", str(settings.max_rows))
    table.add_row("Batch sizes", "OK", " ".join(str(s) for s in settings.batch_sizes))
    table.add_row("Language", "OK", settings.default_language.label())

    _console.print(table)

    if settings.recursive_threshold > 25:
        _console.print(
            "\n[yellow]Note:[/yellow] recursive builds above ~25 rows can take minutes; "
            "consider lowering PASCAL_BENCH_RECURSIVE_THRESHOLD."
        )
    if not ok_agree:
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()

    threshold = typer.prompt(
        "Recursive threshold",
        default=current.recursive_threshold,
        type=int,
        show_default=True,
    )
    max_rows = typer.prompt("Max rows", default=current.max_rows, type=int, show_default=True)
    language = typer.prompt(
        "Language (en/id)",
        default=current.default_language.value,
        show_default=True,
    ).strip().lower()

    if threshold < 0 or max_rows < 1:
        raise typer.BadParameter("threshold must be >= 0 and max rows >= 1")
    if language not in ("en", "id"):
        raise typer.BadParameter("language must be 'en' or 'id'")

    env_path = write_user_env_vars(
        {
            "PASCAL_BENCH_RECURSIVE_THRESHOLD": str(threshold),
            "PASCAL_BENCH_MAX_ROWS": str(max_rows),
            "PASCAL_BENCH_DEFAULT_LANGUAGE": language,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
