from typing import Dict

FALLBACK_PRECISION = "s"

NANOSECONDS_PER: Dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
}

PRECISIONS = tuple(NANOSECONDS_PER)


def adjust_precision(ns: int, precision: str) -> int:
    """
    Convert nanoseconds to the given precision ("ns", "us", "ms" or "s").

    Unknown precisions are treated as seconds. The result is truncated
    toward zero, so -1500ns is -1us.
    """
    divisor = NANOSECONDS_PER.get(precision, NANOSECONDS_PER[FALLBACK_PRECISION])
    quotient = abs(ns) // divisor
    return quotient if ns >= 0 else -quotient
