# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Provides low-level 2D vector operations used by the interaction engine
and integrator, plus scalar interpolation used by the force curves.
Vectors are numpy arrays of shape (2,).
"""
from __future__ import annotations
from typing import Iterator, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b. t is not clamped."""
    return a + (b - a) * t


def lerp_bounded(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b with t clamped to [0, 1]."""
    if t <= 0.0:
        return a
    if t >= 1.0:
        return b
    return lerp(a, b, t)


def batched(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """
    Yield consecutive slices of at most `size` items.

    Raises:
        ValueError: If size < 1.
    """
    if size < 1:
        raise ValueError(f"Batch size must be >= 1, got {size}")
    for start in range(0, len(items), size):
        yield items[start:start + size]
