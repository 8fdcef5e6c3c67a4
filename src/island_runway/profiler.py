# MIT License (see LICENSE)
"""
Simple profiling utilities for performance measurement.

Provides lightweight instrumentation to measure execution time of the
runway search phases (chord containment, extension) without external
dependencies.

Example:
    profiler = Profiler()
    calc = AirportCalculator(island, profiler=profiler)
    calc.calculate()
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field


@dataclass
class ProfileStats:
    """
    Accumulates timing samples for named sections.

    Stores raw timing data and provides summary statistics (count, mean, max, total).
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        """Record a timing sample (in seconds) for a named section."""
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Compute summary statistics for all recorded sections.

        Returns:
            Dict mapping section name to stats dict with keys:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
            - 'total_ms': summed time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            total = sum(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * (total / n),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class _Section:
    def __init__(self, stats: ProfileStats, name: str) -> None:
        self.stats = stats
        self.name = name

    def __enter__(self):
        self.t0 = time.perf_counter()

    def __exit__(self, exc_type, exc, tb):
        self.stats.add(self.name, time.perf_counter() - self.t0)


class Profiler:
    """
    Context-manager based profiler for timing code sections.

    Usage:
        profiler = Profiler()
        with profiler.section("extend"):
            calc.extend(a, b, True)

        stats = profiler.stats.summary()
        print(f"extend avg: {stats['extend']['mean_ms']:.3f}ms")
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    def section(self, name: str) -> _Section:
        """
        Return a context manager that times the enclosed code.

        Args:
            name: Identifier for this timed section.
        """
        return _Section(self.stats, name)
