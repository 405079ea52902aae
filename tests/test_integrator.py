import numpy as np
import pytest

from tearable_cloth import ParticleStore, integrate


def make_pair(mass=2.0, gravity=10.0):
    return ParticleStore([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], mass=mass,
                         gravity=gravity, pinned=[True, False])


def test_gravity_verlet_steps():
    particles = make_pair()

    integrate(particles, 0.1)
    # a = -g, dx = a * dt^2
    np.testing.assert_allclose(particles.position[1], [1.0, -0.1, 0.0])
    np.testing.assert_allclose(particles.previous_position[1], [1.0, 0.0, 0.0])
    np.testing.assert_allclose(particles.acceleration[1], [0.0, -10.0, 0.0])

    integrate(particles, 0.1)
    np.testing.assert_allclose(particles.position[1], [1.0, -0.3, 0.0])
    # diagnostic velocity is (position - previous) * dt
    np.testing.assert_allclose(particles.velocity[1], [0.0, -0.01, 0.0])


def test_pinned_particle_untouched():
    particles = make_pair()
    particles.force[0] = [1.0, 2.0, 3.0]
    before = particles.position[0].copy()

    for _ in range(10):
        integrate(particles, 1 / 60)

    np.testing.assert_array_equal(particles.position[0], before)
    np.testing.assert_array_equal(particles.previous_position[0], before)
    np.testing.assert_array_equal(particles.force[0], [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(particles.velocity[0], 0.0)


def test_applied_force_is_consumed():
    particles = make_pair(gravity=0.0)
    particles.apply_force(1, [0.0, 0.0, 4.0])
    particles.apply_force(0, [0.0, 0.0, 4.0])

    integrate(particles, 0.5)

    np.testing.assert_allclose(particles.position[1], [1.0, 0.0, 0.5])
    np.testing.assert_array_equal(particles.force, 0.0)

    integrate(particles, 0.5)
    # no more force: keeps drifting at constant step
    np.testing.assert_allclose(particles.position[1], [1.0, 0.0, 1.0])


def test_rest_without_gravity_is_fixed_point():
    particles = ParticleStore([[0.3, 0.7, 0.0], [2.0, -1.0, 0.5]], gravity=0.0)
    before = particles.position.copy()

    integrate(particles, 1 / 60)

    np.testing.assert_array_equal(particles.position, before)


@pytest.mark.parametrize("dt", [0.0, -0.01])
def test_non_positive_dt(dt):
    with pytest.raises(ValueError):
        integrate(make_pair(), dt)
