# MIT License (see LICENSE)
"""
Interaction engine: per-step velocity update from family attraction.

For each particle P, every neighbour N within the interaction radius R
contributes

    P.velocity += normalize(N.pos - P.pos) * attraction(P.family, N.family, |N.pos - P.pos| / R)

Velocities are a running accumulator; nothing here damps or resets them.

Key concepts:
- The spatial index snapshot is shared by all particles of one pass and
  is built from positions, so velocity writes never affect a query.
- Each unit of work writes only the velocity of the particle it owns.
- Pairs closer than DISTANCE_EPSILON are skipped instead of producing
  a division by zero.
- A neighbour id the index knows but the population does not is skipped;
  the index may lag the population.
"""
from __future__ import annotations
import logging
from typing import Mapping, Sequence

from ..constants import DISTANCE_EPSILON, MAX_INTERACTION_DIST
from ..model.parameters import SimulationParameters
from ..spatial.index import SpatialIndex
from ..types import Particle
from ..util import norm
from .parallel import BatchExecutor

logger = logging.getLogger(__name__)


def accumulate_velocity(
    particle: Particle,
    index: SpatialIndex,
    parameters: SimulationParameters,
    particles_by_id: Mapping[int, Particle],
    radius: float = MAX_INTERACTION_DIST,
) -> int:
    """
    Add the net family attraction of all neighbours to one particle's velocity.

    Args:
        particle: The particle to update. Only its velocity is written.
        index: Spatial index already rebuilt for current positions.
        parameters: Family properties, read-only.
        particles_by_id: Lookup from id to particle, used for neighbour families.
        radius: Interaction radius; also the distance normalizer.

    Returns:
        Number of neighbours skipped because their id was not found.
    """
    families = parameters.families
    own = families[particle.family]
    pos = particle.position
    missing = 0
    for neighbour_pos, neighbour_id in index.query_radius(pos, radius):
        if neighbour_id == particle.id:
            continue
        neighbour = particles_by_id.get(neighbour_id)
        if neighbour is None:
            missing += 1
            continue

        delta = neighbour_pos - pos
        length = norm(delta)
        if length <= DISTANCE_EPSILON:
            continue

        force = own.attraction(families[neighbour.family], length / radius)
        particle.velocity += (delta / length) * force
    return missing


def update_velocities(
    particles: Sequence[Particle],
    index: SpatialIndex,
    parameters: SimulationParameters,
    radius: float = MAX_INTERACTION_DIST,
    executor: BatchExecutor | None = None,
    particles_by_id: Mapping[int, Particle] | None = None,
) -> int:
    """
    Run one interaction pass over all particles.

    Args:
        particles: Population to update.
        index: Spatial index rebuilt from the particles' current positions.
        parameters: Family properties shared read-only by every batch.
        radius: Interaction radius.
        executor: Batch executor; None processes particles serially.
        particles_by_id: Optional prebuilt id lookup.

    Returns:
        Total number of skipped neighbour lookups.
    """
    lookup = particles_by_id if particles_by_id is not None else {p.id: p for p in particles}

    def work(p: Particle) -> int:
        return accumulate_velocity(p, index, parameters, lookup, radius)

    if executor is None:
        missing = sum(work(p) for p in particles)
    else:
        missing = sum(executor.run(work, particles))
    if missing:
        logger.debug("Skipped %d neighbour lookups with unknown ids", missing)
    return missing
