import pytest

from tearable_cloth import ClothConfig, ConfigError


def test_defaults():
    cfg = ClothConfig()

    assert (cfg.width, cfg.height) == (56, 32)
    assert cfg.spacing == pytest.approx(0.2)
    assert cfg.gravity == pytest.approx(9.807)
    assert cfg.tear_distance == pytest.approx(1.0)
    assert cfg.mouse_distance == pytest.approx(0.15)
    assert cfg.mouse_influence == pytest.approx(0.7)
    assert cfg.iterations == 5
    assert cfg.dt == pytest.approx(1 / 60)


def test_counts():
    cfg = ClothConfig(width=4, height=3)

    assert cfg.particle_count == 12
    assert cfg.constraint_count == 17


def test_replace_validates():
    cfg = ClothConfig()

    assert cfg.replace(width=10).width == 10
    with pytest.raises(ConfigError):
        cfg.replace(spacing=-0.1)


def test_zero_gravity_and_influence_allowed():
    cfg = ClothConfig(gravity=0.0, mouse_influence=0.0)

    assert cfg.as_dict()["gravity"] == 0.0


@pytest.mark.parametrize("changes", [
    {"gravity": -1.0},
    {"mouse_influence": -0.5},
    {"mouse_distance": 0.0},
    {"dt": 0.0},
    {"width": True},
    {"spacing": float("nan")},
])
def test_invalid_values(changes):
    with pytest.raises(ConfigError):
        ClothConfig(**changes)
