"""
Benchmark configuration.

Defaults live here as named constants; ``config/benchmark.json`` may
override them.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from benchtools.utils.precision import FALLBACK_PRECISION

DEFAULT_PRECISION = "ms"
DEFAULT_TIMES = 10
DEFAULT_WARMUP = 0

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(__file__), '..', 'config', 'benchmark.json'
)

__all__ = [
    'BenchmarkConfig',
    'DEFAULT_CONFIG_PATH',
    'DEFAULT_PRECISION',
    'DEFAULT_TIMES',
    'DEFAULT_WARMUP',
    'FALLBACK_PRECISION',
    'load_config',
]


@dataclass
class BenchmarkConfig:
    """Settings for the statement runner."""

    precision: str = DEFAULT_PRECISION
    times: int = DEFAULT_TIMES
    warmup: int = DEFAULT_WARMUP
    consistent_stats: bool = False
    affinity: Dict[str, Any] = field(
        default_factory=lambda: {'enabled': False, 'core': None}
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BenchmarkConfig":
        """Build a config from parsed JSON, ignoring unknown keys."""
        config = cls()
        if 'precision' in data:
            config.precision = str(data['precision'])
        if 'times' in data:
            config.times = int(data['times'])
        if 'warmup' in data:
            config.warmup = int(data['warmup'])
        if 'consistent_stats' in data:
            config.consistent_stats = bool(data['consistent_stats'])
        if 'affinity' in data:
            config.affinity.update(data['affinity'] or {})
        return config

    def validate(self):
        if self.times <= 0:
            raise ValueError(f"times must be positive, got {self.times}")
        if self.warmup < 0:
            raise ValueError(f"warmup must not be negative, got {self.warmup}")


def load_config(config_path: Optional[str] = None) -> BenchmarkConfig:
    """
    Load configuration from JSON.

    Args:
        config_path: Path to a benchmark.json file. When omitted, the
                     repository default is used if present, otherwise
                     the built-in defaults.
    """
    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return BenchmarkConfig()
        config_path = DEFAULT_CONFIG_PATH

    with open(config_path, 'r') as f:
        data = json.load(f)

    return BenchmarkConfig.from_dict(data.get('benchmark', data))
