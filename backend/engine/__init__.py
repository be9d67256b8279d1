"""
The simulation engine: direction resolution, collisions, damage, movement
and outcome, tied together by SimulationCore.
"""

from .core import SimulationCore
from .collision import Collision, detect
from .direction import physical_direction, resolve_direction, step

__all__ = [
    'SimulationCore',
    'Collision',
    'detect',
    'physical_direction',
    'resolve_direction',
    'step',
]
