"""
Tearable cloth: a Verlet particle grid held together by breakable distance constraints.
"""

from .clock import FixedStepClock
from .config import ClothConfig, ConfigError
from .constraints import ConstraintStore
from .grid import build_grid
from .integrator import integrate
from .particles import ParticleStore
from .pointer import PointerInteraction, PointerResult
from .simulation import Simulation
from .solver import resolve_constraints

__all__ = [
    "ClothConfig",
    "ConfigError",
    "ConstraintStore",
    "FixedStepClock",
    "ParticleStore",
    "PointerInteraction",
    "PointerResult",
    "Simulation",
    "build_grid",
    "integrate",
    "resolve_constraints",
]
