import logging

import numpy as np

from .config import ClothConfig
from .constraints import ConstraintStore
from .particles import ParticleStore

log = logging.getLogger(__name__)


def grid_index(x, y, width):
    return x + y * width


def grid_positions(config):
    """Row-major (width*height, 3) positions; row 0 is the top edge."""
    w, h, s = config.width, config.height, config.spacing
    start_x = config.origin_x - ((w - 1) // 2) * s + s / 2
    start_y = config.origin_y

    pos = np.zeros((w * h, 3), dtype=float)
    for y in range(h):
        for x in range(w):
            idx = grid_index(x, y, w)
            pos[idx, 0] = start_x + x * s
            pos[idx, 1] = start_y - y * s
    return pos


def grid_links(width, height):
    """Constraint endpoint pairs: each particle links left, then up."""
    pairs = []
    for y in range(height):
        for x in range(width):
            i = grid_index(x, y, width)
            if x > 0:
                pairs.append((i, i - 1))
            if y > 0:
                pairs.append((i, grid_index(x, y - 1, width)))
    return pairs


def build_grid(config=None):
    """Fresh particle and constraint stores for a hung rectangular cloth."""
    if config is None:
        config = ClothConfig()
    config.validate()

    pinned = np.zeros(config.particle_count, dtype=bool)
    pinned[:config.width] = True   # top row

    particles = ParticleStore(grid_positions(config), mass=config.mass,
                              gravity=config.gravity, pinned=pinned)
    constraints = ConstraintStore(grid_links(config.width, config.height),
                                  distance=config.spacing,
                                  max_distance=config.tear_distance)

    log.info("Built %dx%d cloth: %d particles, %d constraints",
             config.width, config.height, len(particles), len(constraints))
    return particles, constraints
