from dataclasses import dataclass, asdict, replace as _replace

# ---------------------------
# Window / host
# ---------------------------
WIDTH, HEIGHT = 1000, 700
FPS = 120

BG_COLOR = (18, 18, 24)
TEXT_COLOR = (220, 220, 220)
LINK_COLOR = (180, 210, 255)
PIN_COLOR = (255, 120, 120)
CURSOR_COLOR = (0, 255, 180)
LINK_WIDTH = 1

# world -> screen
PIXELS_PER_UNIT = 80.0
CAMERA_CENTER = (0.0, 2.0)   # world point shown in the middle of the window

# ---------------------------
# Cloth defaults
# ---------------------------
CLOTH_WIDTH = 56
CLOTH_HEIGHT = 32
SPACING = 0.2                # rest distance between neighbours
MASS = 1.0
GRAVITY = 9.807
TEAR_DISTANCE = 1.0          # constraint breaks beyond this length
MOUSE_DISTANCE = 0.15        # pick radius (world units)
MOUSE_INFLUENCE = 0.7        # drag nudge length
ITERATIONS = 5               # relaxation passes per tick
ORIGIN = (0.0, 5.0)          # anchor of the pinned top row
TIMESTEP = 1.0 / 60.0


class ConfigError(ValueError):
    """Raised for a cloth configuration the simulation cannot run with."""


@dataclass(frozen=True)
class ClothConfig:
    width: int = CLOTH_WIDTH
    height: int = CLOTH_HEIGHT
    spacing: float = SPACING
    mass: float = MASS
    gravity: float = GRAVITY
    tear_distance: float = TEAR_DISTANCE
    mouse_distance: float = MOUSE_DISTANCE
    mouse_influence: float = MOUSE_INFLUENCE
    iterations: int = ITERATIONS
    origin_x: float = ORIGIN[0]
    origin_y: float = ORIGIN[1]
    dt: float = TIMESTEP

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Reject degenerate grids and non-physical parameters."""
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < 2:
                raise ConfigError(f"{name} must be >= 2, got {value}")

        for name in ("spacing", "mass", "tear_distance", "mouse_distance", "dt"):
            if not getattr(self, name) > 0.0:
                raise ConfigError(f"{name} must be > 0, got {getattr(self, name)!r}")

        for name in ("gravity", "mouse_influence"):
            if not getattr(self, name) >= 0.0:
                raise ConfigError(f"{name} must be >= 0, got {getattr(self, name)!r}")

        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int) or self.iterations < 1:
            raise ConfigError(f"iterations must be an integer >= 1, got {self.iterations!r}")

    @property
    def particle_count(self):
        return self.width * self.height

    @property
    def constraint_count(self):
        # horizontal links per row + vertical links per column
        return (self.width - 1) * self.height + self.width * (self.height - 1)

    def replace(self, **changes):
        """Validated copy with some fields changed."""
        return _replace(self, **changes)

    def as_dict(self):
        return asdict(self)
