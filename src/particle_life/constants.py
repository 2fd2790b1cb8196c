# MIT License (see LICENSE)
"""
Reference configuration constants for the particle-life simulation.

These values reproduce the reference setup: 16 families of 256 particles
spawned in a 2000x2000 square, interacting within a radius of 100 units
and stepped at 60 Hz.
"""
from __future__ import annotations
import math

import numpy as np

# Fixed simulation timestep in seconds.
TIME_STEP: float = 1.0 / 60.0

# Particles spawned per family and number of families.
PARTICLE_COUNT: int = 256
FAMILY_COUNT: int = 16

# Particles handled by one unit of parallel work.
BATCH_SIZE: int = 128

# Spawn square, half-open on each axis.
POS_GEN_RANGE: tuple[float, float] = (-1000.0, 1000.0)

# Display scale of a particle (diameter in world units).
PARTICLE_SCALE: float = 20.0

# Particles farther apart than this do not interact.
MAX_INTERACTION_DIST: float = 100.0

# When set, curve generation produces only Activation curves.
FAST_MODE: bool = False

TWO_PI: float = 2.0 * math.pi

# Neighbours at or below this distance are skipped. Single precision machine
# epsilon, the threshold the reference engine uses for its f32 positions.
DISTANCE_EPSILON: float = float(np.finfo(np.float32).eps)
