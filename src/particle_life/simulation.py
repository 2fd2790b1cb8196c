# MIT License (see LICENSE)
"""
The simulation world and its fixed-rate step.

The Simulation class owns everything one run needs:
- The configuration and the family parameters generated from it.
- The particle population and its id lookup.
- The spatial index and the batch executor shared by the phases.

Each step runs three phases in order, never interleaved:
    1. Integrate: position += velocity * time_step (previous step's velocity).
    2. Rebuild the spatial index from the new positions.
    3. Interact: accumulate family attraction into every velocity.

Structure:
    - User creates a Simulation from a SimulationConfig.
    - User calls spawn_particles() (or add_particle() for custom layouts).
    - User calls step() or run(n) from the host loop.
"""
from __future__ import annotations
import logging

import numpy as np

from .config import SimulationConfig
from .core.integrators import apply_velocities
from .core.interaction import update_velocities
from .core.invariants import kinetic_energy, mean_speed
from .core.parallel import BatchExecutor
from .model.parameters import SimulationParameters
from .profiler import Profiler
from .spatial.index import SpatialIndex, make_spatial_index
from .types import Color, Particle

logger = logging.getLogger(__name__)


class Simulation:
    """
    Particle-life world.

    Attributes:
        config: Startup configuration, validated on construction.
        parameters: Family colors and properties, read-only after construction.
        particles: The population, in insertion order.
        index: Spatial index rebuilt every step.
        executor: Batch executor used by the integrate and interact phases.
        profiler: Optional Profiler receiving per-phase timings.
        time: Simulated seconds elapsed.
        step_count: Steps taken.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        parameters: SimulationParameters | None = None,
        index: SpatialIndex | None = None,
        profiler: Profiler | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = (config or SimulationConfig()).clamp()
        try:
            self.config.check()
        except ValueError as e:
            logger.critical(e)
            raise

        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        if parameters is None:
            parameters = SimulationParameters.random(
                self.config.family_count,
                self.rng,
                fast_mode=self.config.fast_mode,
                interaction_radius=self.config.interaction_radius,
            )
        self.parameters = parameters

        if index is None:
            index = make_spatial_index(
                self.config.spatial_index, cell_size=self.config.interaction_radius or 1.0
            )
        self.index = index
        self.executor = BatchExecutor(self.config.batch_size, self.config.max_workers)
        self.profiler = profiler

        self.particles: list[Particle] = []
        self._by_id: dict[int, Particle] = {}
        self._next_id = 1
        self.time = 0.0
        self.step_count = 0

        logger.info(
            "Simulation initialized: %d families, radius=%.1f, dt=%.5f, index=%s, workers=%d",
            self.parameters.family_count,
            self.config.interaction_radius,
            self.config.time_step,
            type(self.index).__name__,
            self.executor.max_workers,
        )

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def add_particle(self, particle: Particle) -> int:
        """
        Add a particle and assign it a unique id.

        Returns:
            The assigned id.

        Raises:
            ValueError: If the particle's family has no parameters.
        """
        if not 0 <= particle.family < self.parameters.family_count:
            raise ValueError(
                f"Family {particle.family} out of range for "
                f"{self.parameters.family_count} families"
            )
        particle.id = self._next_id
        self._next_id += 1
        self.particles.append(particle)
        self._by_id[particle.id] = particle
        return particle.id

    def spawn_particles(self, count_per_family: int | None = None) -> list[Particle]:
        """
        Spawn the initial population.

        Every family gets `count_per_family` particles (config.particle_count
        by default) at uniformly random positions in the spawn square, with
        zero velocity.

        Returns:
            The spawned particles.
        """
        count = self.config.particle_count if count_per_family is None else count_per_family
        lo, hi = self.config.position_range
        spawned = []
        for family in range(self.parameters.family_count):
            for _ in range(count):
                pos = (float(self.rng.uniform(lo, hi)), float(self.rng.uniform(lo, hi)))
                p = Particle(family=family, position=pos)
                self.add_particle(p)
                spawned.append(p)
        logger.info(
            "Spawned %d particles (%d per family)", len(spawned), count
        )
        return spawned

    def particle_by_id(self, pid: int) -> Particle | None:
        return self._by_id.get(pid)

    def particle_color(self, particle: Particle) -> Color:
        """Display color of a particle's family."""
        return self.parameters.colors[particle.family]

    def colors_for_particles(self) -> list[Color]:
        """Display color of every particle, in population order."""
        colors = self.parameters.colors
        return [colors[p.family] for p in self.particles]

    def positions(self) -> np.ndarray:
        """Snapshot of all positions as an (N, 2) array."""
        if not self.particles:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([p.position for p in self.particles], dtype=np.float64)

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def _integrate(self) -> None:
        apply_velocities(self.particles, self.config.time_step, self.executor)

    def _rebuild_index(self) -> None:
        self.index.rebuild(self.positions(), [p.id for p in self.particles])

    def _interact(self) -> int:
        return update_velocities(
            self.particles,
            self.index,
            self.parameters,
            radius=self.config.interaction_radius,
            executor=self.executor,
            particles_by_id=self._by_id,
        )

    def step(self) -> None:
        """
        Advance the simulation by one fixed timestep.

        Positions move with the velocities of the previous step, then
        velocities are recomputed against the new positions.
        """
        prof = self.profiler
        if prof:
            with prof.section("integrate"):
                self._integrate()
            with prof.section("index"):
                self._rebuild_index()
            with prof.section("interact"):
                self._interact()
        else:
            self._integrate()
            self._rebuild_index()
            self._interact()

        self.time += self.config.time_step
        self.step_count += 1

    def run(self, steps: int) -> None:
        """
        Take `steps` steps, logging progress every config.log_interval steps.
        """
        interval = self.config.log_interval
        for _ in range(steps):
            self.step()
            if self.step_count % interval == 0:
                logger.info("Simulation step %d (t=%.3f s)", self.step_count, self.time)
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(
                        "Step %d | mean speed %.4f | kinetic energy %.4f",
                        self.step_count,
                        mean_speed(self.particles),
                        kinetic_energy(self.particles),
                    )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Shut down the worker threads."""
        self.executor.close()

    def __enter__(self) -> Simulation:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
