"""Error types raised by simplecalc operations.

Only two operations can fail: divide() and sqrt(). Both raise a subclass of
CalculatorError that also derives from the matching builtin, so callers can
catch either the calculator error or the usual ZeroDivisionError/ValueError.
"""

from __future__ import annotations

from typing import Optional


class CalculatorError(Exception):
    """Base exception for simplecalc errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when a divisor is exactly zero."""

    def __init__(self, message: str = "division by zero is not allowed") -> None:
        super().__init__(message)


class NegativeRadicandError(CalculatorError, ValueError):
    """Raised when asked for the square root of a negative number."""

    def __init__(
        self,
        message: str = "square root of negative number is not allowed",
        radicand: Optional[float] = None,
    ) -> None:
        super().__init__(message)
        self.radicand = radicand
