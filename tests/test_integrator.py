import numpy as np

from particle_life.core.integrators import apply_velocities, euler_position_step
from particle_life.core.parallel import BatchExecutor
from particle_life.types import Particle


def test_position_moves_by_velocity_times_dt():
    p = Particle(family=0, position=(1.0, 2.0), velocity=(6.0, -3.0))
    euler_position_step(p, 1 / 60)
    np.testing.assert_allclose(p.position, [1.0 + 6.0 / 60, 2.0 - 3.0 / 60])
    np.testing.assert_array_equal(p.velocity, [6.0, -3.0])


def test_batched_integration_moves_every_particle():
    particles = [
        Particle(family=0, position=(float(i), 0.0), velocity=(1.0, float(i)))
        for i in range(37)
    ]
    with BatchExecutor(batch_size=5, max_workers=3) as executor:
        apply_velocities(particles, 0.5, executor)
    for i, p in enumerate(particles):
        np.testing.assert_allclose(p.position, [i + 0.5, 0.5 * i])


def test_zero_velocity_is_stationary():
    p = Particle(family=0, position=(4.0, 4.0))
    for _ in range(100):
        apply_velocities([p], 1 / 60)
    np.testing.assert_array_equal(p.position, [4.0, 4.0])
