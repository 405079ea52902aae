import numpy as np

from .particles import UP


def integrate(particles, dt):
    """Advance every unpinned particle one Verlet step under gravity and accumulated force."""
    if not dt > 0.0:
        raise ValueError(f"dt must be > 0, got {dt!r}")

    free = particles.free
    if not np.any(free):
        return

    pos = particles.position[free]
    prev = particles.previous_position[free]
    mass = particles.mass[free][:, None]

    force = particles.force[free] + UP * (-particles.gravity[free] * particles.mass[free])[:, None]
    acc = force * (1.0 / mass)

    # kept for inspection only; positions advance from the previous position
    particles.velocity[free] = (pos - prev) * dt
    particles.acceleration[free] = acc

    next_pos = pos * 2 - prev + acc * dt * dt
    particles.previous_position[free] = pos
    particles.position[free] = next_pos
    particles.force[free] = 0.0
