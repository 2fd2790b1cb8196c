# MIT License (see LICENSE)
"""
Diagnostic quantities of a particle population.

Particles carry no mass, so these use unit mass. With no damping the
kinetic energy is free to grow without bound; these values are logged
to watch that drift.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..types import Particle


def kinetic_energy(particles: Sequence[Particle]) -> float:
    """
    Total kinetic energy with unit mass.

    T = Σ 0.5 * v²
    """
    ke = 0.0
    for p in particles:
        ke += 0.5 * float(np.dot(p.velocity, p.velocity))
    return ke


def linear_momentum(particles: Sequence[Particle]) -> np.ndarray:
    """Total momentum vector Σ v with unit mass."""
    total = np.zeros(2, dtype=np.float64)
    for p in particles:
        total += p.velocity
    return total


def mean_speed(particles: Sequence[Particle]) -> float:
    """Average velocity magnitude, 0.0 for an empty population."""
    if not particles:
        return 0.0
    return sum(p.speed for p in particles) / len(particles)


def centroid(particles: Sequence[Particle]) -> np.ndarray:
    """Mean position, origin for an empty population."""
    if not particles:
        return np.zeros(2, dtype=np.float64)
    return np.mean([p.position for p in particles], axis=0)
