"""Scalar math operations.

Stateless functions over floats (and one over ints). Nothing here touches
shared state or does I/O, so every function is safe to call from any thread.
"""

from __future__ import annotations

import logging
import math

from simplecalc.exceptions import DivisionByZeroError, NegativeRadicandError

logger = logging.getLogger(__name__)


def add(a: float, b: float) -> float:
    """Return a + b."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Return a - b."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Return a * b."""
    return a * b


def divide(a: float, b: float) -> float:
    """Return a / b.

    Raises:
        DivisionByZeroError: if b is zero, whatever the numerator (0/0 too).
    """
    if b == 0:
        logger.debug("Rejected division: %r / %r", a, b)
        raise DivisionByZeroError()
    return a / b


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def power(a: float, b: float) -> float:
    """Return a raised to b with IEEE pow semantics.

    math.pow raises where C99 pow returns a special value. Those cases are
    mapped back so power() never raises: pow(0, negative) is an infinity,
    a negative base with a non-integer exponent is NaN, and overflow is an
    infinity signed like the true result.
    """
    a, b = float(a), float(b)
    try:
        return math.pow(a, b)
    except ValueError:
        if a == 0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan
    except OverflowError:
        return -math.inf if a < 0 and _is_odd_integer(b) else math.inf


def sqrt(a: float) -> float:
    """Return the square root of a.

    Raises:
        NegativeRadicandError: if a < 0. Negative zero is not negative.
    """
    if a < 0:
        logger.debug("Rejected square root of %r", a)
        raise NegativeRadicandError(radicand=a)
    return math.sqrt(a)


def is_even(n: int) -> bool:
    # Python's % is floored, so -4 % 2 == 0 and -3 % 2 == 1.
    return n % 2 == 0


def absolute(a: float) -> float:
    """Return |a|; abs(-0.0) is +0.0."""
    return math.fabs(a)
