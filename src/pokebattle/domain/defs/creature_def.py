"""Creature definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True, slots=True)
class EvolutionLink:
    """One adjacency entry naming a predecessor and/or a successor."""

    before: str | None = None
    after: str | None = None


@dataclass(frozen=True, slots=True)
class CreatureDef:
    """Immutable description of a single creature variant."""

    id: int
    name: str
    reference_key: str
    types: Tuple[str, ...]
    base_max_hp: int
    moveset: Mapping[str, str] = field(default_factory=dict)
    evolutions: Tuple[EvolutionLink, ...] = ()
    seeded: bool = False

    def __post_init__(self) -> None:
        # Records are shared between battle creatures; keep the moveset read-only.
        object.__setattr__(self, "moveset", MappingProxyType(dict(self.moveset)))
