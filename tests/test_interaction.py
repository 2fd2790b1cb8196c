import math

import numpy as np
import pytest

from particle_life.core.interaction import accumulate_velocity, update_velocities
from particle_life.core.parallel import BatchExecutor
from particle_life.model.curves import ActivationCurve, ActivationProps, CurveProps, SinCurve
from particle_life.model.family import FamilyProperties
from particle_life.model.parameters import SimulationParameters
from particle_life.spatial.index import KDTreeIndex
from particle_life.types import Particle


def uniform_params(curve, families: int = 2) -> SimulationParameters:
    """Every family applies `curve` against every family."""
    fams = [
        FamilyProperties(
            ancestry=[1.0 if i == j else 0.0 for j in range(families)],
            curves=[[curve] for _ in range(families)],
        )
        for i in range(families)
    ]
    return SimulationParameters(colors=[(0.5, 0.5, 0.5)] * families, families=fams)


def indexed(particles):
    for i, p in enumerate(particles, start=1):
        p.id = i
    index = KDTreeIndex()
    index.rebuild(np.array([p.position for p in particles]), [p.id for p in particles])
    return index


def test_pair_attracts_toward_each_other():
    """
    Activation{0, 1, 100}, distance 10, R=100:
      normalized distance 0.1, force 1.0 * (0.1 - 0) * 1 = 0.1
    """
    params = uniform_params(ActivationCurve(ActivationProps(start=0.0, slope=1.0, end=100.0)))
    a = Particle(family=0, position=(0.0, 0.0))
    b = Particle(family=1, position=(10.0, 0.0))
    index = indexed([a, b])

    update_velocities([a, b], index, params, radius=100.0)

    np.testing.assert_allclose(a.velocity, [0.1, 0.0], atol=1e-12)
    np.testing.assert_allclose(b.velocity, [-0.1, 0.0], atol=1e-12)


def test_boundary_distance_samples_full_turn():
    """At d == R a Sin{1, 1, 0} curve samples sin(2π) ≈ 0."""
    params = uniform_params(SinCurve(CurveProps(x_mul=1.0, y_mul=1.0, x_offset=0.0)))
    a = Particle(family=0, position=(0.0, 0.0))
    b = Particle(family=1, position=(100.0, 0.0))
    index = indexed([a, b])

    update_velocities([a, b], index, params, radius=100.0)

    assert abs(a.velocity[0]) == pytest.approx(abs(math.sin(2 * math.pi)), abs=1e-12)
    np.testing.assert_allclose(a.velocity, [0.0, 0.0], atol=1e-12)


def test_zero_distance_pair_is_skipped():
    params = uniform_params(ActivationCurve(ActivationProps(start=0.0, slope=5.0, end=100.0)))
    a = Particle(family=0, position=(1.0, 1.0))
    b = Particle(family=1, position=(1.0, 1.0))
    index = indexed([a, b])

    update_velocities([a, b], index, params, radius=100.0)

    np.testing.assert_array_equal(a.velocity, [0.0, 0.0])
    np.testing.assert_array_equal(b.velocity, [0.0, 0.0])


def test_velocity_accumulates_without_reset():
    params = uniform_params(ActivationCurve(ActivationProps(start=0.0, slope=1.0, end=100.0)))
    a = Particle(family=0, position=(0.0, 0.0), velocity=(3.0, -1.0))
    b = Particle(family=1, position=(0.0, 50.0))
    index = indexed([a, b])

    update_velocities([a, b], index, params, radius=100.0)
    update_velocities([a, b], index, params, radius=100.0)

    np.testing.assert_allclose(a.velocity, [3.0, -1.0 + 2 * 0.5])


def test_neighbours_beyond_radius_ignored():
    params = uniform_params(ActivationCurve(ActivationProps(start=0.0, slope=1.0, end=100.0)))
    a = Particle(family=0, position=(0.0, 0.0))
    b = Particle(family=1, position=(100.5, 0.0))
    index = indexed([a, b])

    update_velocities([a, b], index, params, radius=100.0)

    np.testing.assert_array_equal(a.velocity, [0.0, 0.0])


def test_unknown_neighbour_is_skipped():
    """The index may know ids the population no longer has."""
    params = uniform_params(ActivationCurve(ActivationProps(start=0.0, slope=1.0, end=100.0)))
    a = Particle(family=0, position=(0.0, 0.0), id=1)
    index = KDTreeIndex()
    index.rebuild(np.array([[0.0, 0.0], [20.0, 0.0]]), [1, 99])

    missing = accumulate_velocity(a, index, params, {1: a}, radius=100.0)

    assert missing == 1
    np.testing.assert_array_equal(a.velocity, [0.0, 0.0])


def test_parallel_pass_matches_serial():
    rng = np.random.default_rng(21)
    params = SimulationParameters.random(4, rng)

    def population():
        local = np.random.default_rng(8)
        return [
            Particle(family=int(local.integers(0, 4)), position=tuple(local.uniform(-150, 150, 2)))
            for _ in range(200)
        ]

    serial = population()
    parallel = population()
    update_velocities(serial, indexed(serial), params, radius=100.0)
    with BatchExecutor(batch_size=16, max_workers=4) as executor:
        update_velocities(parallel, indexed(parallel), params, radius=100.0, executor=executor)

    for s, p in zip(serial, parallel):
        np.testing.assert_allclose(s.velocity, p.velocity, rtol=1e-12, atol=1e-12)
