import numpy as np
import pytest

from particle_life.core.invariants import centroid, kinetic_energy, linear_momentum, mean_speed
from particle_life.types import Particle
from particle_life.util import lerp, lerp_bounded


def test_diagnostics_unit_mass():
    particles = [
        Particle(family=0, position=(0.0, 0.0), velocity=(3.0, 4.0)),
        Particle(family=1, position=(2.0, 6.0), velocity=(-1.0, 0.0)),
    ]
    assert kinetic_energy(particles) == pytest.approx(0.5 * 25.0 + 0.5 * 1.0)
    np.testing.assert_allclose(linear_momentum(particles), [2.0, 4.0])
    assert mean_speed(particles) == pytest.approx(3.0)
    np.testing.assert_allclose(centroid(particles), [1.0, 3.0])


def test_diagnostics_empty_population():
    assert kinetic_energy([]) == 0.0
    assert mean_speed([]) == 0.0
    np.testing.assert_array_equal(linear_momentum([]), [0.0, 0.0])
    np.testing.assert_array_equal(centroid([]), [0.0, 0.0])


def test_lerp_bounded_clamps():
    assert lerp(0.0, 10.0, 1.5) == pytest.approx(15.0)
    assert lerp_bounded(0.0, 10.0, 1.5) == 10.0
    assert lerp_bounded(0.0, 10.0, -0.5) == 0.0
    assert lerp_bounded(0.0, 10.0, 0.25) == pytest.approx(2.5)
