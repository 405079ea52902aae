import logging
from collections import namedtuple

import numpy as np

log = logging.getLogger(__name__)

PointerResult = namedtuple("PointerResult", ["dragged", "cut"])


class PointerInteraction:
    """Turns world-space pointer state into drag nudges (primary) and cuts (secondary).

    The nearest particle is found with a full linear scan.
    """

    def __init__(self, mouse_distance, mouse_influence):
        self.mouse_distance = float(mouse_distance)
        self.mouse_influence = float(mouse_influence)
        self.previous = None

    def handle(self, particles, constraints, pointer, primary=False, secondary=False):
        if pointer is None:
            return PointerResult(None, 0)
        current = np.asarray(pointer, dtype=float).reshape(3)

        if self.previous is None:
            # first sample: nothing to measure a drag against yet
            self.previous = current.copy()

        dragged = None
        if primary:
            if not np.array_equal(current, self.previous):
                dragged = self._drag(particles, current)
        else:
            self.previous = current.copy()

        cut = self._cut(particles, constraints, current) if secondary else 0
        return PointerResult(dragged, cut)

    def _drag(self, particles, current):
        hit = particles.nearest(current)
        if hit is None:
            return None
        i, dist = hit
        if particles.pinned[i] or dist >= self.mouse_distance:
            return None

        delta = current - self.previous
        length = float(np.linalg.norm(delta))
        particles.position[i] += delta / length * self.mouse_influence
        self.previous = current.copy()
        return i

    def _cut(self, particles, constraints, current):
        hit = particles.nearest(current)
        if hit is None:
            return 0
        i, dist = hit
        if dist >= self.mouse_distance:
            return 0
        broken = constraints.disable_touching(i)
        if broken:
            log.debug("Cut particle %d loose (%d constraints)", i, broken)
        return broken
