"""Factory helpers for runtime entities."""

from .creature_factory import (
    create_battle_creature,
    create_battle_creatures,
    create_by_name,
    create_with_inherited_hp,
    devolve_creature,
    evolve_creature,
)

__all__ = [
    "create_battle_creature",
    "create_battle_creatures",
    "create_by_name",
    "create_with_inherited_hp",
    "devolve_creature",
    "evolve_creature",
]
