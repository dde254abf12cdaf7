"""Factory for building battle creatures and carrying them across stage transitions."""
from __future__ import annotations

import logging
from typing import Iterable, List

from pokebattle.data.repositories import CreatureLookup
from pokebattle.domain.defs import CreatureDef
from pokebattle.domain.entities import BattleCreature

logger = logging.getLogger(__name__)


def create_battle_creature(record: CreatureDef) -> BattleCreature:
    """Instantiate a full-HP battle creature from a definition."""
    return BattleCreature(
        id=record.id,
        name=record.name,
        reference_key=record.reference_key,
        types=record.types,
        max_hp=record.base_max_hp,
        moveset=record.moveset,
        evolutions=record.evolutions,
    )


def create_battle_creatures(records: Iterable[CreatureDef]) -> List[BattleCreature]:
    return [create_battle_creature(record) for record in records]


def create_by_name(records: Iterable[CreatureDef], name: str) -> BattleCreature | None:
    """Build the first record called ``name``, or return None if there is none."""
    for record in records:
        if record.name == name:
            return create_battle_creature(record)
    return None


def create_with_inherited_hp(original: BattleCreature, record: CreatureDef) -> BattleCreature:
    """
    Build the evolved or devolved form of ``original`` from ``record``.

    The absolute damage already taken carries over, not the HP ratio:
    ``new_hp = max(0, record.base_max_hp - (original.max_hp - original.current_hp))``.
    Active status conditions carry over unchanged. The HP history starts
    fresh at ``new_hp``, so the transition itself cannot be undone.
    """
    damage_taken = original.max_hp - original.current_hp
    new_current_hp = max(0, record.base_max_hp - damage_taken)
    logger.debug(
        "Transitioning %s (%d/%d) into %s (%d/%d)",
        original.name,
        original.current_hp,
        original.max_hp,
        record.name,
        new_current_hp,
        record.base_max_hp,
    )
    return BattleCreature.with_state(
        id=record.id,
        name=record.name,
        reference_key=record.reference_key,
        types=record.types,
        max_hp=record.base_max_hp,
        moveset=record.moveset,
        evolutions=record.evolutions,
        current_hp=new_current_hp,
        active_conditions=original.active_conditions,
        symbol=original.symbol,
    )


def evolve_creature(creature: BattleCreature, lookup: CreatureLookup) -> BattleCreature | None:
    """Return the evolved form of ``creature``, or None if it cannot evolve."""
    target = creature.get_evolution_name()
    if target is None:
        logger.debug("%s has no evolution", creature.name)
        return None
    return _transition_to(creature, target, lookup)


def devolve_creature(creature: BattleCreature, lookup: CreatureLookup) -> BattleCreature | None:
    """Return the pre-evolved form of ``creature``, or None if it cannot devolve."""
    target = creature.get_pre_evolution_name()
    if target is None:
        logger.debug("%s has no pre-evolution", creature.name)
        return None
    return _transition_to(creature, target, lookup)


def _transition_to(creature: BattleCreature, target: str, lookup: CreatureLookup) -> BattleCreature | None:
    record = lookup.get_by_name(target)
    if record is None:
        logger.debug("Transition target %s for %s is not defined", target, creature.name)
        return None
    return create_with_inherited_hp(creature, record)
