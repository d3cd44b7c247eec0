#!/usr/bin/env python3
"""
Convenience wrapper to benchmark an importable function.

Usage:
    python scripts/run_benchmark.py --target gc:collect [--repeat --times 20 --precision us]
"""

import sys

from benchtools.benchmarks.runner import main


if __name__ == "__main__":
    sys.exit(main())
