"""simplecalc — minimal arithmetic calculator.

A handful of pure scalar operations plus a thin command-line wrapper.
divide() and sqrt() are the only operations that can fail; they raise
DivisionByZeroError and NegativeRadicandError respectively.

Usage:
    python -m simplecalc add 2.5 3.5     # Result: 6.00
    python -m simplecalc divide 5 0      # Error, exit 1
    python -m simplecalc list            # Show operations
"""

from simplecalc.exceptions import CalculatorError, DivisionByZeroError, NegativeRadicandError
from simplecalc.operations import absolute, add, divide, is_even, multiply, power, sqrt, subtract

__all__ = [
    "CalculatorError",
    "DivisionByZeroError",
    "NegativeRadicandError",
    "absolute",
    "add",
    "divide",
    "is_even",
    "multiply",
    "power",
    "sqrt",
    "subtract",
]
