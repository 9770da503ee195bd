# MIT License (see LICENSE)
"""
Lightweight timing of simulation phases.

ParticleSystem.update() is split into force resolution, integration and the
buffer swap. Handing the system a Profiler records how long each phase takes
per step, which is the quickest way to see the O(N²) pair loop dominate.

Example:
    profiler = Profiler()
    system = ParticleSystem(model, particles, profiler=profiler)
    for _ in range(100):
        system.update(1 / 60)
    print(profiler.stats.summary()["forces"])
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field


@dataclass
class ProfileStats:
    """
    Timing samples (in seconds) grouped by section name.
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def clear(self) -> None:
        self.samples.clear()

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': slowest sample in milliseconds
            - 'total_ms': sum of all samples in milliseconds
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
    """Context manager that records one timing sample on exit."""

    def __init__(self, stats: ProfileStats, name: str) -> None:
        self._stats = stats
        self._name = name
        self._t0 = 0.0

    def __enter__(self) -> "_Section":
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stats.add(self._name, time.perf_counter() - self._t0)


class Profiler:
    """
    Context-manager based profiler for named sections.

    Usage:
        profiler = Profiler()
        with profiler.section("forces"):
            resolve_forces()
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    def section(self, name: str) -> _Section:
        """Return a context manager that times the enclosed block."""
        return _Section(self.stats, name)

    def reset(self) -> None:
        """Drop all recorded samples."""
        self.stats.clear()
