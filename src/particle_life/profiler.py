# MIT License (see LICENSE)
"""
Section timing for simulation phases.

Simulation.step() times its three phases as "integrate", "index" and
"interact" when a Profiler is attached.

Example:
    profiler = Profiler()
    sim = Simulation(config, profiler=profiler)
    sim.run(100)
    print(profiler.stats.summary()["interact"]["mean_ms"])
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field


@dataclass
class ProfileStats:
    """Raw timing samples per section name, in seconds."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def total(self, name: str) -> float:
        """Accumulated seconds spent in a section, 0.0 if never entered."""
        return sum(self.samples.get(name, ()))

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
            - 'total_ms': accumulated time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * (sum(times) / n),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * sum(times),
            }
        return out

    def clear(self) -> None:
        self.samples.clear()


class _Section:
    """Context manager recording the elapsed wall time of its block."""

    def __init__(self, stats: ProfileStats, name: str) -> None:
        self._stats = stats
        self._name = name
        self._t0 = 0.0

    def __enter__(self) -> _Section:
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stats.add(self._name, time.perf_counter() - self._t0)


class Profiler:
    """Collects ProfileStats through `with profiler.section(name):` blocks."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    def section(self, name: str) -> _Section:
        return _Section(self.stats, name)
