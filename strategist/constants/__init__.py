"""Designer-tunable default values grouped by subsystem."""

from .ai import AIConstants
from .combat import CombatConstants
from .movement import MovementConstants

__all__ = ["AIConstants", "CombatConstants", "MovementConstants"]
