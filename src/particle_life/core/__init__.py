# MIT License (see LICENSE)
"""
Core simulation components.

This subpackage provides:
    - Interaction engine: per-step velocity update from family attraction.
    - Integrator: fixed-timestep position update.
    - BatchExecutor: chunked parallel map over particles.
    - Diagnostics: kinetic energy, momentum, mean speed.

Typical usage:
    from particle_life.core import apply_velocities, update_velocities

    apply_velocities(particles, dt=1/60)
    index.rebuild(positions, ids)
    update_velocities(particles, index, params, radius=100.0)
"""
from .interaction import accumulate_velocity, update_velocities
from .integrators import euler_position_step, apply_velocities
from .parallel import BatchExecutor
from .invariants import kinetic_energy, linear_momentum, mean_speed, centroid

__all__ = [
    # Interaction
    "accumulate_velocity",
    "update_velocities",
    # Integration
    "euler_position_step",
    "apply_velocities",
    # Execution
    "BatchExecutor",
    # Diagnostics
    "kinetic_energy",
    "linear_momentum",
    "mean_speed",
    "centroid",
]
