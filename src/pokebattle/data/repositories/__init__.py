"""Repository exports."""

from .creatures_repo import CreatureLookup, CreaturesRepository
from .status_conditions_repo import StatusConditionsRepository

__all__ = [
    "CreatureLookup",
    "CreaturesRepository",
    "StatusConditionsRepository",
]
