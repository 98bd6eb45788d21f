"""Micro-benchmark for simplecalc operations.

Each operation is called in a tight loop with a fixed sample input and the
elapsed time is recorded with time.perf_counter().
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from rich.console import Console

from simplecalc.models import BenchResult, OperationInfo, list_operations

logger = logging.getLogger(__name__)

# Inputs that never fail, so the loop measures the happy path only.
_SAMPLE_ARGS: dict[str, tuple] = {
    "add": (1.5, 2.5),
    "subtract": (5.0, 3.0),
    "multiply": (2.5, 4.0),
    "divide": (10.0, 2.0),
    "power": (2.0, 10.0),
    "sqrt": (2.0,),
    "is_even": (1001,),
    "abs": (-5.5,),
}


def bench_operation(info: OperationInfo, iterations: int) -> BenchResult:
    """Time `iterations` calls of a single operation."""
    args = _SAMPLE_ARGS.get(info.name, (1.0,) * info.arity)
    func = info.func
    start = time.perf_counter()
    for _ in range(iterations):
        func(*args)
    elapsed = time.perf_counter() - start
    logger.debug("bench %s: %d calls in %.6fs", info.name, iterations, elapsed)
    return BenchResult(name=info.name, iterations=iterations, total_s=elapsed)


def run_bench(
    iterations: int,
    names: Optional[list[str]] = None,
    console: Optional[Console] = None,
) -> list[BenchResult]:
    """Benchmark the registered operations, optionally restricted to `names`."""
    selected = [op for op in list_operations() if not names or op.name in names]
    results = []
    for op in selected:
        if console:
            console.print(f"  [dim]Timing {op.name} x{iterations}[/dim]")
        results.append(bench_operation(op, iterations))
    return results
