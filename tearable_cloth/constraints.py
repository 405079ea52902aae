import numpy as np


class ConstraintStore:
    """Distance constraints between particle pairs, in creation order.

    Constraints are never removed, only disabled, so index ``k`` always names
    the same pair of particles (and the same render primitive).
    """
    __slots__ = ("point_a", "point_b", "distance", "max_distance", "enabled")

    def __init__(self, pairs, distance, max_distance):
        idx = np.array(pairs, dtype=np.intp).reshape(-1, 2)
        count = idx.shape[0]
        if count and np.any(idx[:, 0] == idx[:, 1]):
            raise ValueError("a constraint needs two distinct particles")
        self.point_a = idx[:, 0].copy()
        self.point_b = idx[:, 1].copy()
        self.distance = np.broadcast_to(np.asarray(distance, dtype=float), (count,)).copy()
        self.max_distance = np.broadcast_to(np.asarray(max_distance, dtype=float), (count,)).copy()
        self.enabled = np.ones(count, dtype=bool)

    def __len__(self):
        return self.point_a.shape[0]

    @property
    def enabled_count(self):
        return int(np.count_nonzero(self.enabled))

    @property
    def torn_count(self):
        return len(self) - self.enabled_count

    def disable(self, index):
        self.enabled[index] = False

    def touching(self, particle):
        """Indices of every constraint with ``particle`` as an endpoint."""
        mask = (self.point_a == particle) | (self.point_b == particle)
        return np.flatnonzero(mask)

    def disable_touching(self, particle):
        """Detach a particle from all its neighbours; returns how many links broke."""
        hit = self.touching(particle)
        newly = int(np.count_nonzero(self.enabled[hit]))
        self.enabled[hit] = False
        return newly

    def segments(self, particles):
        """(enabled, position_a, position_b) for every constraint index."""
        pos = particles.position
        for k in range(len(self)):
            yield bool(self.enabled[k]), pos[self.point_a[k]].copy(), pos[self.point_b[k]].copy()

    def endpoints(self, particles):
        """Array of shape (M, 2, 3) with both endpoint positions per constraint."""
        pos = particles.position
        return np.stack((pos[self.point_a], pos[self.point_b]), axis=1)
