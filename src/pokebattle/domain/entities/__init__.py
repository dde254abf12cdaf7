"""Runtime entity exports."""

from .battle_creature import DEFAULT_SYMBOL, MISS_MOVE, BattleCreature

__all__ = [
    "BattleCreature",
    "DEFAULT_SYMBOL",
    "MISS_MOVE",
]
