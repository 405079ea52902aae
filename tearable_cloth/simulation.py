import logging

from .config import ClothConfig
from .grid import build_grid
from .integrator import integrate
from .pointer import PointerInteraction
from .solver import resolve_constraints

log = logging.getLogger(__name__)


class Simulation:
    """One cloth session: owns the stores and runs the per-tick pipeline.

    Each tick runs integrate -> pointer interaction -> constraint relaxation,
    then calls ``on_tick(simulation)`` so a renderer can sync its primitives.
    """

    def __init__(self, config=None, on_tick=None):
        self.on_tick = on_tick
        self.paused = False
        self._config = config if config is not None else ClothConfig()
        self._particles = None
        self._constraints = None
        self._pointer = None
        self._tick_count = 0
        self._torn_count = 0
        self.reset()

    # ---------------------------
    # Read-only views
    # ---------------------------
    @property
    def config(self):
        return self._config

    @property
    def particles(self):
        return self._particles

    @property
    def constraints(self):
        return self._constraints

    @property
    def tick_count(self):
        return self._tick_count

    @property
    def torn_count(self):
        """Constraints torn by stretching since the last reset (cuts excluded)."""
        return self._torn_count

    # ---------------------------
    # Lifecycle
    # ---------------------------
    def reset(self, config=None):
        """Throw away the current cloth and build a new one."""
        if config is not None:
            config.validate()
            self._config = config
        cfg = self._config
        if self._particles is not None:
            log.debug("Reset after %d ticks, %d constraints torn", self._tick_count, self._torn_count)

        particles, constraints = build_grid(cfg)
        # swap both stores together so no constraint outlives its particles
        self._particles, self._constraints = particles, constraints
        self._pointer = PointerInteraction(cfg.mouse_distance, cfg.mouse_influence)
        self._tick_count = 0
        self._torn_count = 0

    def tick(self, dt=None, pointer=None, primary=False, secondary=False):
        """Advance one fixed step. ``pointer`` is a world-space point or None."""
        if self.paused:
            return None
        if dt is None:
            dt = self._config.dt

        integrate(self._particles, dt)
        result = self._pointer.handle(self._particles, self._constraints,
                                      pointer, primary, secondary)
        self._torn_count += resolve_constraints(self._particles, self._constraints,
                                                self._config.iterations)
        self._tick_count += 1

        if self.on_tick is not None:
            self.on_tick(self)
        return result

    def segments(self):
        return self._constraints.segments(self._particles)
