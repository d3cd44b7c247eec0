from .benchmarks.core import BenchmarkStats, benchmark, benchmark_avg, benchmark_print
from .config import DEFAULT_PRECISION, DEFAULT_TIMES
from .utils.clock import ClockUnavailableError
from .utils.precision import FALLBACK_PRECISION, PRECISIONS, adjust_precision

__all__ = [
    'BenchmarkStats',
    'ClockUnavailableError',
    'DEFAULT_PRECISION',
    'DEFAULT_TIMES',
    'FALLBACK_PRECISION',
    'PRECISIONS',
    'adjust_precision',
    'benchmark',
    'benchmark_avg',
    'benchmark_print',
]
