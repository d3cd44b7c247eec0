"""
Execution time measurement of zero-argument callables.

Every measurement subtracts the cost of running an empty call through the
same instrumentation path, so the reported value isolates the callable's
own cost. The baseline is measured fresh on every call.
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional

from benchtools.config import DEFAULT_PRECISION, DEFAULT_TIMES
from benchtools.utils.precision import adjust_precision
from benchtools.utils.stats import StatisticsCollector
from benchtools.utils.timer import duration_ns

Logger = Callable[[str], None]


class BenchmarkStats(NamedTuple):
    """Minimum, average and maximum execution time in the requested precision."""

    min: int
    avg: int
    max: int


def _empty_call() -> None:
    pass


def _corrected(elapsed_ns: int, baseline_ns: int) -> int:
    return 0 if elapsed_ns < baseline_ns else elapsed_ns - baseline_ns


def benchmark(precision: str = DEFAULT_PRECISION, call: Callable[[], object] = _empty_call) -> int:
    """
    Measure execution time of call.

    Args:
        precision: "ns", "us", "ms" or "s". Unknown values mean seconds.
        call: Zero-argument callable, invoked exactly once.

    Returns:
        Elapsed time minus the empty-call overhead, never negative.
    """
    empty_call_ns = duration_ns(_empty_call)
    elapsed_ns = duration_ns(call)

    return adjust_precision(_corrected(elapsed_ns, empty_call_ns), precision)


def benchmark_print(precision: str = DEFAULT_PRECISION, title: str = "",
                    call: Callable[[], object] = _empty_call) -> None:
    """Measure execution time of call and print "<title>: <value><precision>"."""
    print(f"{title}: {benchmark(precision, call)}{precision}")


def benchmark_avg(
    precision: str = DEFAULT_PRECISION,
    call: Callable[[], object] = _empty_call,
    times: int = DEFAULT_TIMES,
    title: str = "",
    consistent: bool = False,
    logger: Optional[Logger] = None,
) -> BenchmarkStats:
    """
    Measure minimum, average and maximum execution time of call.

    The baseline is a single timed batch of ``times`` empty loop iterations.
    Minimum and maximum are taken over the raw per-run durations while the
    average is computed from the baseline-corrected total. With
    ``consistent=True`` the minimum and maximum are corrected as well, each
    run losing its share of the baseline.

    ``times`` is not validated; zero raises ZeroDivisionError.

    Returns:
        BenchmarkStats(min, avg, max) in the requested precision.
    """
    log = logger or (lambda msg: None)

    def empty_loop():
        for _ in range(times):
            pass

    empty_calls_ns = duration_ns(empty_loop)

    samples = [duration_ns(call) for _ in range(times)]

    if consistent:
        per_run_baseline = empty_calls_ns // times if times > 0 else 0
        extremes = StatisticsCollector.compute_stats(
            StatisticsCollector.correct_samples(samples, per_run_baseline)
        )
    else:
        extremes = StatisticsCollector.compute_stats(samples)

    elapsed_combined_ns = sum(samples)
    elapsed_corrected = _corrected(elapsed_combined_ns, empty_calls_ns)

    log(f"{title or 'benchmark'}: {times} runs, {elapsed_combined_ns}ns total, "
        f"{empty_calls_ns}ns baseline")

    return BenchmarkStats(
        adjust_precision(extremes['min'], precision),
        adjust_precision(elapsed_corrected // times, precision),
        adjust_precision(extremes['max'], precision),
    )
