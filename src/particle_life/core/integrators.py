# MIT License (see LICENSE)
"""
Fixed-timestep position integrator.

Each step advances positions with the velocities computed by the previous
interaction pass:

    x(t+dt) = x(t) + v(t) * dt

Forces are then recomputed against the new positions, so the position a
renderer shows always lags the latest force computation by one step.
This leapfrog-style ordering is intended.
"""
from __future__ import annotations
from typing import Sequence

from ..constants import TIME_STEP
from ..types import Particle
from .parallel import BatchExecutor


def euler_position_step(particle: Particle, dt: float = TIME_STEP) -> None:
    """Advance one particle's position by velocity * dt (in-place)."""
    particle.position += particle.velocity * dt


def apply_velocities(
    particles: Sequence[Particle],
    dt: float = TIME_STEP,
    executor: BatchExecutor | None = None,
) -> None:
    """
    Advance every particle's position independently.

    Args:
        particles: Population to integrate.
        dt: Timestep in seconds.
        executor: Batch executor; None integrates serially.
    """
    if executor is None:
        for p in particles:
            euler_position_step(p, dt)
        return
    executor.run(lambda p: euler_position_step(p, dt), particles)
