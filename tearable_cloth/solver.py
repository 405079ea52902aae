import logging
import math

import numpy as np

log = logging.getLogger(__name__)


def resolve_constraints(particles, constraints, iterations=5):
    """Gauss-Seidel relaxation of all enabled constraints toward their rest length.

    A constraint stretched past its max distance is disabled (torn) but still
    corrected in the pass that tears it. Returns the number of constraints torn.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations!r}")
    if len(constraints) == 0:
        return 0

    # plain floats: per-constraint numpy indexing dominates otherwise
    pos = particles.position.tolist()
    pinned = particles.pinned.tolist()
    point_a = constraints.point_a.tolist()
    point_b = constraints.point_b.tolist()
    rest = constraints.distance.tolist()
    max_dist = constraints.max_distance.tolist()
    enabled = constraints.enabled.tolist()

    torn = []
    for _ in range(iterations):
        for k in range(len(enabled)):
            if not enabled[k]:
                continue
            pa = pos[point_a[k]]
            pb = pos[point_b[k]]
            dx = pa[0] - pb[0]
            dy = pa[1] - pb[1]
            dz = pa[2] - pb[2]
            dist = math.sqrt(dx * dx + dy * dy + dz * dz)

            if dist > max_dist[k]:
                enabled[k] = False
                torn.append(k)

            if dist == 0.0:
                continue

            f = (rest[k] - dist) / dist * 0.5
            cx, cy, cz = dx * f, dy * f, dz * f
            if not pinned[point_a[k]]:
                pa[0] += cx; pa[1] += cy; pa[2] += cz
            if not pinned[point_b[k]]:
                pb[0] -= cx; pb[1] -= cy; pb[2] -= cz

    free = ~particles.pinned
    particles.position[free] = np.asarray(pos, dtype=float).reshape(-1, 3)[free]
    if torn:
        constraints.enabled[torn] = False
        log.debug("Tore %d constraints (%d still enabled)", len(torn), constraints.enabled_count)
    return len(torn)
