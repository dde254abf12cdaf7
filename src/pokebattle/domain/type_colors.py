"""Static elemental type to display colour table."""
from __future__ import annotations

from typing import Dict

DEFAULT_TYPE_COLOR = "#68A090"

TYPE_COLORS: Dict[str, str] = {
    "normal": "#A8A878",
    "fighting": "#C03028",
    "flying": "#A890F0",
    "fire": "#F08030",
    "grass": "#78C850",
    "water": "#6890F0",
    "ice": "#98D8D8",
    "poison": "#A040A0",
    "ghost": "#705898",
    "dark": "#705848",
    "psychic": "#F85888",
    "fairy": "#EE99AC",
    "rock": "#B8A038",
    "ground": "#E0C068",
    "electric": "#F8D030",
    "dragon": "#7038F8",
    "steel": "#B8B8D0",
    "bug": "#A8B820",
}


def type_color(type_tag: str) -> str:
    """Return the colour for a type tag, or the default for unknown tags."""
    return TYPE_COLORS.get(type_tag, DEFAULT_TYPE_COLOR)
