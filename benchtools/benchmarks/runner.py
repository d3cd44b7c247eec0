#!/usr/bin/env python3
"""
Command-line benchmarking of importable functions.

The target is named as ``module:function``, the same form console-script
entry points use, and must be callable without arguments. It is measured
with benchmark_print (single run) or benchmark_avg (repeated runs).

Usage examples:
    benchtools --target gc:collect --precision us
    benchtools --target mypackage.hot_path:build_index --repeat --times 50
"""

from __future__ import annotations

import argparse
import importlib
import sys
from typing import Callable, List, Optional

from benchtools.benchmarks.core import BenchmarkStats, benchmark_avg, benchmark_print
from benchtools.config import BenchmarkConfig, load_config
from benchtools.utils.affinity import AffinityManager
from benchtools.utils.precision import PRECISIONS
from benchtools.utils.stats import StatisticsCollector
from benchtools.utils.timer import HighPrecisionTimer

Logger = Callable[[str], None]


def resolve_target(target: str) -> Callable[[], object]:
    """
    Import the callable named by ``module:attribute``.

    The attribute part may be dotted (``module:Class.method``).
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Target must look like 'module:function', got '{target}'")

    obj = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)

    if not callable(obj):
        raise TypeError(f"Target '{target}' is not callable")
    return obj


class TargetBenchmark:
    """Runs single and repeated measurements of an importable function."""

    def __init__(self, config: Optional[BenchmarkConfig] = None, logger: Optional[Logger] = None):
        self.config = config or load_config()
        self.config.validate()
        self.logger = logger or (lambda msg: None)
        affinity = self.config.affinity
        self.affinity = AffinityManager(
            enabled=bool(affinity.get('enabled')),
            core=affinity.get('core'),
            logger=self.logger,
        )

    def prepare(self, target: str) -> Callable[[], object]:
        """Resolve the target, pin the process and run the warm-up phase."""
        call = resolve_target(target)
        self.affinity.apply()

        if self.config.warmup > 0:
            self.logger(f"Warmup ({self.config.warmup} iterations)")
            for _ in range(self.config.warmup):
                call()
        return call

    def run_once(self, target: str, title: Optional[str] = None) -> None:
        """Print a single measurement of target."""
        call = self.prepare(target)
        benchmark_print(self.config.precision, title or target, call)

    def run_repeated(self, target: str, title: Optional[str] = None) -> BenchmarkStats:
        """Measure target config.times times and print a min/avg/max summary."""
        call = self.prepare(target)
        title = title or target

        timer = HighPrecisionTimer()
        timer.start()
        stats = benchmark_avg(
            self.config.precision,
            call,
            times=self.config.times,
            title=title,
            consistent=self.config.consistent_stats,
            logger=self.logger,
        )
        self.logger(f"Completed in {timer.stop()}ns")

        print(StatisticsCollector.format_summary(title, stats, self.config.precision, self.config.times))
        return stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Measure execution time of an importable function")
    parser.add_argument(
        "--target",
        required=True,
        help="Zero-argument function to benchmark, as module:function",
    )
    parser.add_argument("--title", help="Label printed with the result (defaults to the target)")
    parser.add_argument(
        "--precision",
        help=f"Result precision, one of {', '.join(PRECISIONS)} (unknown values mean seconds)",
    )
    parser.add_argument("--times", type=int, help="Number of runs with --repeat")
    parser.add_argument("--warmup", type=int, help="Warm-up invocations before measuring")
    parser.add_argument("--config", help="Path to benchmark configuration JSON")
    parser.add_argument("--repeat", action="store_true", help="Report min/avg/max over several runs")
    parser.add_argument(
        "--consistent",
        action="store_true",
        help="Correct min and max for baseline overhead as well as the average",
    )
    parser.add_argument("--verbose", action="store_true", help="Print diagnostic messages")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.precision is not None:
        config.precision = args.precision
    if args.times is not None:
        config.times = args.times
    if args.warmup is not None:
        config.warmup = args.warmup
    if args.consistent:
        config.consistent_stats = True
    try:
        config.validate()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    try:
        resolve_target(args.target)
    except (ValueError, ImportError, AttributeError, TypeError) as exc:
        print(f"Invalid target: {exc}", file=sys.stderr)
        return 2

    logger = (lambda msg: print(f"[benchtools] {msg}")) if args.verbose else None
    runner = TargetBenchmark(config, logger=logger)

    if args.repeat:
        runner.run_repeated(args.target, args.title)
    else:
        runner.run_once(args.target, args.title)
    return 0


if __name__ == "__main__":
    sys.exit(main())
