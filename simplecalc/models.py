"""Data models for simplecalc.

Operation enum, OperationInfo, BenchResult and the operation registry that
the CLI and the benchmark both dispatch through.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from simplecalc import operations


class Operation(str, Enum):
    """Binary operations reachable from the command line."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


CLI_OPERATIONS = [Operation.ADD, Operation.SUBTRACT, Operation.MULTIPLY, Operation.DIVIDE]


@dataclass
class OperationInfo:
    """Metadata about a registered operation."""

    name: str
    description: str
    arity: int
    func: Callable[..., object]
    can_fail: bool = False
    cli: bool = False


_REGISTRY: dict[str, OperationInfo] = {
    info.name: info
    for info in (
        OperationInfo("add", "Sum of two numbers", 2, operations.add, cli=True),
        OperationInfo("subtract", "Difference of two numbers", 2, operations.subtract, cli=True),
        OperationInfo("multiply", "Product of two numbers", 2, operations.multiply, cli=True),
        OperationInfo("divide", "Quotient; fails on a zero divisor", 2, operations.divide, can_fail=True, cli=True),
        OperationInfo("power", "First number raised to the second", 2, operations.power),
        OperationInfo("sqrt", "Square root; fails on negative input", 1, operations.sqrt, can_fail=True),
        OperationInfo("is_even", "Parity check on an integer", 1, operations.is_even),
        OperationInfo("abs", "Absolute value", 1, operations.absolute),
    )
}


def list_operations(cli_only: bool = False) -> list[OperationInfo]:
    """Return registered operations in registration order."""
    return [info for info in _REGISTRY.values() if info.cli or not cli_only]


def load_operation(name: str) -> Optional[OperationInfo]:
    """Look up an operation by name.

    Args:
        name: Registered name (e.g., 'divide', 'sqrt').

    Returns:
        OperationInfo if the operation exists, None otherwise.
    """
    return _REGISTRY.get(name)


@dataclass
class BenchResult:
    """Timing for one operation over a batch of calls."""

    name: str
    iterations: int
    total_s: float

    @property
    def ns_per_call(self) -> float:
        if self.iterations == 0:
            return 0.0
        return self.total_s * 1e9 / self.iterations

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "name": self.name,
            "iterations": self.iterations,
            "total_s": self.total_s,
            "ns_per_call": self.ns_per_call,
        }
