import numpy as np
from typing import List, Dict


class StatisticsCollector:
    """Collect and compute statistics for benchmark results."""

    @staticmethod
    def compute_stats(samples_ns: List[int]) -> Dict[str, int]:
        """Compute min, max and total of per-run nanosecond samples."""
        arr = np.asarray(samples_ns, dtype=np.int64)
        if arr.size == 0:
            # no runs: min keeps its sentinel, max and total stay at zero
            return {'min': int(np.iinfo(np.int64).max), 'max': 0, 'total': 0, 'runs': 0}
        return {
            'min': int(arr.min()),
            'max': int(arr.max()),
            'total': int(arr.sum()),
            'runs': int(arr.size),
        }

    @staticmethod
    def correct_samples(samples_ns: List[int], baseline_ns: int) -> List[int]:
        """Subtract a per-run baseline from each sample, floored at zero."""
        arr = np.asarray(samples_ns, dtype=np.int64) - baseline_ns
        return [int(v) for v in np.clip(arr, 0, None)]

    @staticmethod
    def format_summary(title: str, stats, precision: str, runs: int) -> str:
        """Format a min/avg/max summary line."""
        return (f"{title}: min {stats.min}{precision} | avg {stats.avg}{precision} | "
                f"max {stats.max}{precision} ({runs} runs)")
