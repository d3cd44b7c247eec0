"""
Optional pinning of the benchmarking process to one CPU core.

A process that migrates between cores mid-measurement picks up cache and
frequency effects from each move. psutil exposes per-process affinity on
Linux, Windows and FreeBSD; elsewhere pinning is skipped and reported
through the logger.
"""

from __future__ import annotations

import os
from typing import Callable, Optional

import psutil

Logger = Callable[[str], None]


class AffinityManager:
    """Binds a process to the configured core when pinning is enabled."""

    def __init__(
        self,
        enabled: bool,
        core: Optional[int] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self.enabled = enabled
        self.core = core
        self.logger = logger or (lambda msg: None)
        self._reported: set = set()

    def apply(self, pid: Optional[int] = None) -> bool:
        """Pin pid (default: this process). Returns whether the pin took effect."""
        if not self.enabled or self.core is None:
            return False

        pid = pid or os.getpid()
        try:
            process = psutil.Process(pid)
        except psutil.Error as exc:
            self._report(f"cannot inspect pid {pid}: {exc}")
            return False

        if not hasattr(process, "cpu_affinity"):
            self._report("per-process CPU affinity is not supported here; results may be noisier")
            return False

        try:
            process.cpu_affinity([self.core])
        except (psutil.Error, ValueError, OSError) as exc:
            self._report(f"pinning to core {self.core} failed: {exc}")
            return False

        self.logger(f"Pinned pid {pid} to core {self.core}")
        return True

    def _report(self, message: str) -> None:
        # repeated failures of the same kind are logged once
        if message not in self._reported:
            self._reported.add(message)
            self.logger(message)
