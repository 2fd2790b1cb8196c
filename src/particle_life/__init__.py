# MIT License (see LICENSE)
"""
particle_life - A 2D particle-life simulation engine.

Particles are partitioned into families. Every family carries force curves
describing how it reacts to each other family as a function of distance;
from these simple pairwise rules self-organizing patterns emerge.

Main entry points:
    - Simulation: The world, its population and the fixed-rate step.
    - SimulationConfig: Startup configuration.
    - SimulationParameters, FamilyProperties: The family force model.
    - Particle: A simulated particle.

Submodules:
    - model: Force curves, family properties, simulation parameters.
    - spatial: Per-step neighbour indices.
    - core: Interaction engine, integrator, batch executor.
    - io: JSON config loading and parameter dumps.
    - renderer: Optional visualization adapters.

Example:
    from particle_life import Simulation, SimulationConfig

    with Simulation(SimulationConfig(family_count=4, particle_count=64, seed=7)) as sim:
        sim.spawn_particles()
        sim.run(600)
"""
from .simulation import Simulation
from .config import SimulationConfig
from .types import Particle
from .model import FamilyProperties, SimulationParameters

__all__ = [
    # Core simulation
    "Simulation",
    "SimulationConfig",
    "Particle",
    # Family model
    "FamilyProperties",
    "SimulationParameters",
]
