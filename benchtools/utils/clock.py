"""
Monotonic clock access for benchmark measurements.

Timestamps come from ``time.perf_counter_ns``. Wall-clock time is never used
because it can jump backwards when the system clock is adjusted.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from functools import lru_cache

CLOCK_NAME = "perf_counter"


class ClockUnavailableError(RuntimeError):
    """Raised when the platform cannot provide a usable monotonic clock."""


@dataclass(frozen=True)
class Timebase:
    """Tick to nanosecond ratio of the clock (ns = ticks * numer / denom)."""

    numer: int
    denom: int


@lru_cache(maxsize=None)
def get_timebase() -> Timebase:
    """
    Resolve the timebase of the benchmark clock.

    The ratio is constant for the lifetime of the process, so it is
    resolved once and shared.
    """
    try:
        info = time.get_clock_info(CLOCK_NAME)
    except (ValueError, OSError) as exc:
        raise ClockUnavailableError(f"Clock '{CLOCK_NAME}' unavailable: {exc}") from exc

    if not info.monotonic:
        raise ClockUnavailableError(
            f"Clock '{CLOCK_NAME}' ({info.implementation}) is not monotonic"
        )
    if info.resolution <= 0:
        raise ClockUnavailableError(
            f"Clock '{CLOCK_NAME}' reports invalid resolution {info.resolution}"
        )

    # perf_counter_ns already counts nanoseconds
    return Timebase(numer=1, denom=1)


def now() -> int:
    """Return the current tick value of the monotonic clock."""
    return time.perf_counter_ns()


def elapsed_ns(start: int, end: int) -> int:
    """Convert a tick delta into nanoseconds."""
    timebase = get_timebase()
    elapsed = end - start
    if elapsed <= 0:
        return 0
    return elapsed * timebase.numer // timebase.denom
