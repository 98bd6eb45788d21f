"""Environment-driven settings for simplecalc.

Read once per CLI invocation from os.environ. Command-line options override
whatever is found here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PRECISION = 2
DEFAULT_BENCH_ITERATIONS = 100_000
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Resolved configuration values."""

    precision: int = DEFAULT_PRECISION
    bench_iterations: int = DEFAULT_BENCH_ITERATIONS
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_int(raw: Optional[str], default: int, minimum: int = 0) -> int:
    """Parse an int no smaller than minimum, falling back to default otherwise."""
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= minimum else default


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from SIMPLECALC_* environment variables.

    Args:
        env: Mapping to read instead of os.environ (tests pass a dict).
    """
    env = os.environ if env is None else env
    level = env.get("SIMPLECALC_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in _LOG_LEVELS:
        level = DEFAULT_LOG_LEVEL
    return Settings(
        precision=_parse_int(env.get("SIMPLECALC_PRECISION"), DEFAULT_PRECISION),
        bench_iterations=_parse_int(
            env.get("SIMPLECALC_BENCH_ITERATIONS"), DEFAULT_BENCH_ITERATIONS, minimum=1
        ),
        log_level=level,
    )
