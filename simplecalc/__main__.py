"""CLI for the simplecalc calculator.

Usage:
    python -m simplecalc add 2.5 3.5         # Result: 6.00
    python -m simplecalc divide 10 2         # Result: 5.00
    python -m simplecalc subtract -5 3 -p 3  # Result: -8.000
    python -m simplecalc list                # Show operations
    python -m simplecalc bench -n 50000      # Time every operation
"""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from simplecalc.bench import run_bench
from simplecalc.exceptions import CalculatorError
from simplecalc.models import Operation, list_operations, load_operation
from simplecalc.render import format_result, render_bench, render_operations
from simplecalc.settings import load_settings

app = typer.Typer(
    name="simplecalc",
    help="Minimal arithmetic calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)
logger = logging.getLogger("simplecalc")

# Lets negative numbers like -5 through as positional values.
_NUMERIC_ARGS = {"ignore_unknown_options": True}


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _calculate(op: Operation, num1: float, num2: float, precision: Optional[int]) -> None:
    """Run a binary operation and print the result, or exit 1 on failure."""
    settings = load_settings()
    places = settings.precision if precision is None else precision
    info = load_operation(op.value)
    logger.debug("Dispatching %s(%r, %r)", op.value, num1, num2)
    try:
        value = info.func(num1, num2)
    except CalculatorError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)
    typer.echo(format_result(value, places))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Minimal arithmetic calculator."""
    settings = load_settings()
    _configure_logging("DEBUG" if verbose else settings.log_level)


@app.command("add", context_settings=_NUMERIC_ARGS)
def cmd_add(
    num1: float = typer.Argument(help="First operand"),
    num2: float = typer.Argument(help="Second operand"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=0, help="Decimal places"),
) -> None:
    """Add two numbers."""
    _calculate(Operation.ADD, num1, num2, precision)


@app.command("subtract", context_settings=_NUMERIC_ARGS)
def cmd_subtract(
    num1: float = typer.Argument(help="Number to subtract from"),
    num2: float = typer.Argument(help="Number to subtract"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=0, help="Decimal places"),
) -> None:
    """Subtract the second number from the first."""
    _calculate(Operation.SUBTRACT, num1, num2, precision)


@app.command("multiply", context_settings=_NUMERIC_ARGS)
def cmd_multiply(
    num1: float = typer.Argument(help="First factor"),
    num2: float = typer.Argument(help="Second factor"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=0, help="Decimal places"),
) -> None:
    """Multiply two numbers."""
    _calculate(Operation.MULTIPLY, num1, num2, precision)


@app.command("divide", context_settings=_NUMERIC_ARGS)
def cmd_divide(
    num1: float = typer.Argument(help="Dividend"),
    num2: float = typer.Argument(help="Divisor (must not be zero)"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=0, help="Decimal places"),
) -> None:
    """Divide the first number by the second."""
    _calculate(Operation.DIVIDE, num1, num2, precision)


@app.command("list")
def cmd_list() -> None:
    """Show the operations available from the command line."""
    render_operations(list_operations(cli_only=True), console)


@app.command("bench")
def cmd_bench(
    iterations: Optional[int] = typer.Option(None, "--iterations", "-n", min=1, help="Calls per operation"),
    ops: Optional[List[str]] = typer.Option(None, "--op", help="Only time these operations (repeatable)"),
) -> None:
    """Time every library operation and show per-call cost."""
    settings = load_settings()
    n = settings.bench_iterations if iterations is None else iterations
    unknown = [name for name in ops or [] if load_operation(name) is None]
    if unknown:
        console.print(f"[red]Unknown operation: {', '.join(unknown)}[/red]")
        raise typer.Exit(1)
    results = run_bench(n, names=ops, console=console)
    render_bench(results, console)


if __name__ == "__main__":
    app()
