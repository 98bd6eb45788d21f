"""Output formatting for simplecalc — result lines and Rich tables."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from simplecalc.models import BenchResult, OperationInfo


def format_result(value: float, precision: int = 2) -> str:
    """Format a computed value as the CLI prints it: 'Result: 6.00'."""
    return f"Result: {value:.{precision}f}"


def _fmt_ns(ns: float) -> str:
    """Format a per-call duration with a unit suffix."""
    if ns >= 1_000_000:
        return f"{ns / 1_000_000:.2f}ms"
    if ns >= 1000:
        return f"{ns / 1000:.2f}us"
    return f"{ns:.1f}ns"


def render_operations(ops: list[OperationInfo], console: Console) -> None:
    """Render a table of the available operations."""
    table = Table(title="Available Operations", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=10)
    table.add_column("Description", min_width=30)
    table.add_column("Args", justify="right")

    for op in ops:
        table.add_row(op.name, op.description, str(op.arity))

    console.print()
    console.print(table)
    console.print()


def render_bench(results: list[BenchResult], console: Console) -> None:
    """Render benchmark timings, fastest first."""
    if not results:
        console.print("[yellow]No operations matched.[/yellow]")
        return

    table = Table(title="Benchmark", show_header=True, header_style="bold")
    table.add_column("Operation", style="green", min_width=10)
    table.add_column("Calls", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Per call", justify="right", style="cyan")

    for r in sorted(results, key=lambda r: r.ns_per_call):
        table.add_row(r.name, f"{r.iterations:,}", f"{r.total_s:.4f}s", _fmt_ns(r.ns_per_call))

    console.print()
    console.print(table)
    console.print()
