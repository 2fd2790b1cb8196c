# MIT License (see LICENSE)
"""
Core type definitions for the particle-life simulation.

Defines the simulation entity (Particle) and the display color type.
Each particle belongs to one family, whose force curves decide how it
reacts to its neighbours:
  - Velocity: accumulated from pairwise family attraction every step
  - Position: advanced by velocity at a fixed timestep
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .util import f64

# RGB color, each channel in [0, 1).
Color = tuple[float, float, float]


@dataclass
class Particle:
    """
    A point particle with a family and kinematic state.

    Attributes:
        family: Index into SimulationParameters.families. Fixed for the
                lifetime of the particle.
        position: Position [x, y] in world units.
        velocity: Velocity [vx, vy] in world units per second.
        id: Unique identifier assigned by Simulation.add_particle().
            Used to exclude a particle from its own neighbour query.

    Note:
        Position and velocity are converted to float64 numpy arrays on init.
        Velocity is never reset between steps; the interaction engine adds
        to it and the integrator reads it.
    """
    family: int
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    id: int = -1

    def __post_init__(self) -> None:
        """Convert position/velocity to float64 arrays for consistent numerics."""
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)

    @property
    def speed(self) -> float:
        """Magnitude of the velocity."""
        return float(np.hypot(self.velocity[0], self.velocity[1]))
