"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Sequence

from pokebattle.domain.defs import CreatureDef, StatusConditionDef
from pokebattle.domain.entities import BattleCreature

HP_BAR_WIDTH = 20


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def format_hp_bar(creature: BattleCreature, width: int = HP_BAR_WIDTH) -> str:
    """Return a fixed-width bar such as ``[#######.....] 35/60``."""
    filled = round(creature.hp_ratio * width)
    if creature.current_hp > 0:
        filled = max(1, filled)
    bar = "#" * filled + "." * (width - filled)
    return f"[{bar}] {creature.current_hp}/{creature.max_hp}"


def format_types(creature: BattleCreature) -> str:
    primary_type = creature.types[0] if creature.types else "unknown"
    primary = f"{primary_type} ({creature.get_primary_type_color()})"
    secondary = creature.get_secondary_type_color()
    if secondary is None:
        return primary
    return f"{primary} / {creature.types[1]} ({secondary})"


def render_roster(creatures: Sequence[CreatureDef]) -> None:
    render_heading("Choose a creature")
    for idx, record in enumerate(creatures, start=1):
        print(f"{idx}. {record.name} ({'/'.join(record.types)}, {record.base_max_hp} HP)")


def render_battle(
    creature: BattleCreature,
    conditions: Sequence[StatusConditionDef],
    *,
    image_url: str,
    dice_value: int,
    dice_rolling: bool,
) -> None:
    """Print the battle panel for the active creature."""
    render_heading(f"{creature.symbol} {creature.name}")
    print(f"Types: {format_types(creature)}")
    print(f"HP:    {format_hp_bar(creature)}")
    print(f"Image: {image_url}")
    if conditions:
        marks = [
            f"[{'x' if creature.has_condition(condition.id) else ' '}] {condition.id}"
            for condition in conditions
        ]
        print("Status: " + "  ".join(marks))
    links = []
    if creature.has_pre_evolution():
        links.append(f"devolves to {creature.get_pre_evolution_name()}")
    if creature.has_evolution():
        links.append(f"evolves to {creature.get_evolution_name()}")
    if links:
        print("Stage: " + ", ".join(links))
    if dice_rolling:
        print(f"Dice:  rolling... {dice_value}")
    elif dice_value:
        print(f"Dice:  {dice_value}")
