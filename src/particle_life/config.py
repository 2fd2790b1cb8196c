# MIT License (see LICENSE)
"""
Startup configuration for the particle-life simulation.

Defaults reproduce the reference setup (see constants.py). A config is
fixed once the Simulation is built; changing it afterwards has no effect
on a running simulation.
"""
from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any

from .constants import (
    BATCH_SIZE,
    FAMILY_COUNT,
    FAST_MODE,
    MAX_INTERACTION_DIST,
    PARTICLE_COUNT,
    PARTICLE_SCALE,
    POS_GEN_RANGE,
    TIME_STEP,
)

SPATIAL_INDEX_KINDS = ("kdtree", "grid")


@dataclass
class SimulationConfig:
    """
    Simulation configuration.

    Attributes:
        family_count: Number of families.
        particle_count: Particles spawned per family.
        interaction_radius: Cutoff distance R; also the distance normalizer.
        time_step: Fixed timestep in seconds.
        fast_mode: Generate Activation curves only.
        batch_size: Particles per unit of parallel work.
        max_workers: Worker threads; None uses the CPU count, 1 runs inline.
        position_range: Spawn square (low, high) on both axes.
        particle_scale: Display size of a particle, for renderers.
        spatial_index: Neighbour index provider, "kdtree" or "grid".
        seed: Seed for parameter generation and spawning. None is nondeterministic.
        log_level: Root logging level name.
        log_file: Optional rotating log file path.
        log_interval: Steps between progress messages in Simulation.run().
    """
    family_count: int = FAMILY_COUNT
    particle_count: int = PARTICLE_COUNT
    interaction_radius: float = MAX_INTERACTION_DIST
    time_step: float = TIME_STEP
    fast_mode: bool = FAST_MODE
    batch_size: int = BATCH_SIZE
    max_workers: int | None = None
    position_range: tuple[float, float] = POS_GEN_RANGE
    particle_scale: float = PARTICLE_SCALE
    spatial_index: str = "kdtree"
    seed: int | None = None
    log_level: str = "INFO"
    log_file: str | None = None
    log_interval: int = 100

    def clamp(self) -> SimulationConfig:
        """Coerce field types in place and return self."""
        self.family_count = int(self.family_count)
        self.particle_count = int(self.particle_count)
        self.interaction_radius = float(self.interaction_radius)
        self.time_step = float(self.time_step)
        self.fast_mode = bool(self.fast_mode)
        self.batch_size = int(self.batch_size)
        if self.max_workers is not None:
            self.max_workers = int(self.max_workers)
        lo, hi = self.position_range
        self.position_range = (float(lo), float(hi))
        self.particle_scale = float(self.particle_scale)
        self.spatial_index = str(self.spatial_index or "kdtree").strip().lower()
        if self.seed is not None:
            self.seed = int(self.seed)
        self.log_level = str(self.log_level or "INFO").strip().upper()
        self.log_interval = max(1, int(self.log_interval))
        return self

    def validate(self) -> list[str]:
        """Return a list of problems; empty when the config is usable."""
        errors: list[str] = []
        if self.family_count < 1:
            errors.append(f"family_count must be >= 1, got {self.family_count}")
        if self.particle_count < 0:
            errors.append(f"particle_count must be >= 0, got {self.particle_count}")
        if self.interaction_radius < 0:
            errors.append(f"interaction_radius must be >= 0, got {self.interaction_radius}")
        if self.time_step <= 0:
            errors.append(f"time_step must be > 0, got {self.time_step}")
        if self.batch_size < 1:
            errors.append(f"batch_size must be >= 1, got {self.batch_size}")
        if self.max_workers is not None and self.max_workers < 1:
            errors.append(f"max_workers must be >= 1 or None, got {self.max_workers}")
        lo, hi = self.position_range
        if not lo < hi:
            errors.append(f"position_range must satisfy low < high, got {self.position_range}")
        if self.spatial_index not in SPATIAL_INDEX_KINDS:
            errors.append(
                f"spatial_index must be one of {SPATIAL_INDEX_KINDS}, got '{self.spatial_index}'"
            )
        return errors

    def check(self) -> SimulationConfig:
        """
        Raise if the config is invalid.

        Raises:
            ValueError: Listing every problem found by validate().
        """
        errors = self.validate()
        if errors:
            raise ValueError("Invalid simulation config: " + "; ".join(errors))
        return self

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["position_range"] = list(self.position_range)
        return data


DEFAULT_CONFIG = SimulationConfig()
