"""Domain definition exports."""

from .creature_def import CreatureDef, EvolutionLink
from .status_condition_def import StatusConditionDef

__all__ = [
    "CreatureDef",
    "EvolutionLink",
    "StatusConditionDef",
]
