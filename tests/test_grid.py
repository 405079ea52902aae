import numpy as np
import pytest

from tearable_cloth import ClothConfig, ConfigError, build_grid
from tearable_cloth.grid import grid_index, grid_links


def test_grid_topology_4x3():
    particles, constraints = build_grid(ClothConfig(width=4, height=3, spacing=1.0))

    assert len(particles) == 12
    assert len(constraints) == 9 + 8
    assert particles.pinned[:4].all()
    assert not particles.pinned[4:].any()
    assert constraints.enabled.all()


def test_grid_positions_follow_row_major_index():
    particles, _ = build_grid(ClothConfig(width=4, height=3, spacing=1.0))

    # start_x = -(3 // 2) * 1.0 + 0.5
    np.testing.assert_allclose(particles.position[0], [-0.5, 5.0, 0.0])
    np.testing.assert_allclose(particles.position[grid_index(2, 1, 4)], [1.5, 4.0, 0.0])
    np.testing.assert_allclose(particles.position[11], [2.5, 3.0, 0.0])
    np.testing.assert_array_equal(particles.previous_position, particles.position)


def test_grid_links_left_then_up():
    pairs = grid_links(4, 3)

    assert pairs[:6] == [(1, 0), (2, 1), (3, 2), (4, 0), (5, 4), (5, 1)]
    assert all(a != b for a, b in pairs)


def test_grid_constraint_parameters():
    cfg = ClothConfig(width=5, height=4, spacing=0.3, tear_distance=0.9)
    particles, constraints = build_grid(cfg)

    assert len(constraints) == cfg.constraint_count
    np.testing.assert_allclose(constraints.distance, 0.3)
    np.testing.assert_allclose(constraints.max_distance, 0.9)
    np.testing.assert_allclose(particles.mass, cfg.mass)
    np.testing.assert_allclose(particles.gravity, cfg.gravity)

    # every link starts at rest length
    ends = constraints.endpoints(particles)
    lengths = np.linalg.norm(ends[:, 0] - ends[:, 1], axis=1)
    np.testing.assert_allclose(lengths, 0.3)


def test_grid_respects_origin():
    particles, _ = build_grid(ClothConfig(width=3, height=2, spacing=1.0, origin_x=10.0, origin_y=-2.0))

    np.testing.assert_allclose(particles.position[0], [9.5, -2.0, 0.0])
    np.testing.assert_allclose(particles.position[5], [11.5, -3.0, 0.0])


@pytest.mark.parametrize("changes", [
    {"width": 1},
    {"height": 0},
    {"width": 2.5},
    {"spacing": 0.0},
    {"mass": -1.0},
    {"tear_distance": 0.0},
    {"iterations": 0},
])
def test_grid_rejects_degenerate_config(changes):
    with pytest.raises(ConfigError):
        ClothConfig(**changes)
