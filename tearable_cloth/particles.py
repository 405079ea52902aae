import numpy as np

UP = np.array([0.0, 1.0, 0.0])


class ParticleStore:
    """Point masses of one cloth generation, stored as parallel arrays.

    Row ``i`` of every array belongs to particle ``i``; constraints refer to
    particles by that index only.
    """
    __slots__ = ("position", "previous_position", "velocity", "acceleration",
                 "force", "mass", "gravity", "pinned")

    def __init__(self, positions, mass=1.0, gravity=0.0, pinned=None):
        pos = np.array(positions, dtype=float).reshape(-1, 3)
        count = pos.shape[0]
        self.position = pos
        self.previous_position = pos.copy()
        self.velocity = np.zeros((count, 3), dtype=float)
        self.acceleration = np.zeros((count, 3), dtype=float)
        self.force = np.zeros((count, 3), dtype=float)
        self.mass = np.full(count, mass, dtype=float)
        self.gravity = np.full(count, gravity, dtype=float)
        if pinned is None:
            self.pinned = np.zeros(count, dtype=bool)
        else:
            self.pinned = np.array(pinned, dtype=bool).reshape(count)

    def __len__(self):
        return self.position.shape[0]

    @property
    def free(self):
        return ~self.pinned

    def apply_force(self, index, force):
        """Accumulate an external force; the next integration step consumes it."""
        if self.pinned[index]:
            return
        self.force[index] += np.asarray(force, dtype=float)

    def nearest(self, point):
        """Index and distance of the particle closest to ``point``.

        Ties go to the lowest index. Returns ``None`` when the store is empty.
        """
        if len(self) == 0:
            return None
        p = np.asarray(point, dtype=float)
        delta = self.position - p
        d2 = np.einsum("ij,ij->i", delta, delta)
        i = int(np.argmin(d2))
        return i, float(np.sqrt(d2[i]))
