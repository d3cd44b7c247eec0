from typing import Callable, Optional

from benchtools.utils import clock


class HighPrecisionTimer:
    """High-precision timer reporting elapsed nanoseconds."""

    def __init__(self):
        self.start_ticks: Optional[int] = None
        self.elapsed_ns: Optional[int] = None

    def start(self):
        """Start timing."""
        self.start_ticks = clock.now()

    def stop(self) -> int:
        """Stop timing and return elapsed time in nanoseconds."""
        end = clock.now()
        if self.start_ticks is None:
            raise RuntimeError("Timer not started")
        self.elapsed_ns = clock.elapsed_ns(self.start_ticks, end)
        return self.elapsed_ns


def duration_ns(call: Callable[[], object]) -> int:
    """Nanoseconds spent in one invocation of call, clock reads included."""
    start = clock.now()
    call()
    end = clock.now()
    return clock.elapsed_ns(start, end)
