"""Live battle state for a single creature."""
from __future__ import annotations

from typing import Iterable, List, Mapping, Tuple

from pokebattle.domain.defs import EvolutionLink
from pokebattle.domain.type_colors import type_color

MISS_MOVE = "Miss"
DEFAULT_SYMBOL = "●"


class BattleCreature:
    """
    Wraps one creature definition with mutable battle state.

    Tracks current HP, the stack of prior HP values used for undo, and the set
    of active status conditions. Identity fields are fixed for the lifetime of
    the instance; stage transitions build a new instance instead of mutating
    this one.

    Nothing here raises for well-formed input. Missing moves, an empty undo
    stack, unknown types and absent evolution links all resolve to fallback
    values.
    """

    __slots__ = (
        "_id",
        "_name",
        "_reference_key",
        "_types",
        "_max_hp",
        "_moveset",
        "_evolutions",
        "_symbol",
        "_current_hp",
        "_hp_history",
        "_active_conditions",
    )

    def __init__(
        self,
        id: int,
        name: str,
        reference_key: str,
        types: Iterable[str],
        max_hp: int,
        moveset: Mapping[str, str],
        evolutions: Iterable[EvolutionLink],
        symbol: str = DEFAULT_SYMBOL,
    ) -> None:
        self._id = id
        self._name = name
        self._reference_key = reference_key
        self._types: Tuple[str, ...] = tuple(types)
        self._max_hp = max_hp
        self._moveset: Mapping[str, str] = moveset
        self._evolutions: Tuple[EvolutionLink, ...] = tuple(evolutions)
        self._symbol = symbol
        self._current_hp = max_hp
        self._hp_history: List[int] = [max_hp]
        self._active_conditions: List[str] = []

    @classmethod
    def with_state(
        cls,
        id: int,
        name: str,
        reference_key: str,
        types: Iterable[str],
        max_hp: int,
        moveset: Mapping[str, str],
        evolutions: Iterable[EvolutionLink],
        *,
        current_hp: int,
        active_conditions: Iterable[str] = (),
        symbol: str = DEFAULT_SYMBOL,
    ) -> "BattleCreature":
        """
        Build a creature that starts at an explicit HP instead of full HP.

        The history is reset to a single entry holding the starting HP, so the
        first undo on the new instance is a no-op.
        """
        creature = cls(id, name, reference_key, types, max_hp, moveset, evolutions, symbol)
        starting_hp = max(0, min(max_hp, current_hp))
        creature._current_hp = starting_hp
        creature._hp_history = [starting_hp]
        for condition_id in active_conditions:
            if condition_id not in creature._active_conditions:
                creature._active_conditions.append(condition_id)
        return creature

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def reference_key(self) -> str:
        return self._reference_key

    @property
    def types(self) -> Tuple[str, ...]:
        return self._types

    @property
    def max_hp(self) -> int:
        return self._max_hp

    @property
    def current_hp(self) -> int:
        return self._current_hp

    @property
    def moveset(self) -> Mapping[str, str]:
        return self._moveset

    @property
    def evolutions(self) -> Tuple[EvolutionLink, ...]:
        return self._evolutions

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def hp_history(self) -> Tuple[int, ...]:
        return tuple(self._hp_history)

    @property
    def active_conditions(self) -> Tuple[str, ...]:
        return tuple(self._active_conditions)

    @property
    def hp_ratio(self) -> float:
        """Fraction of max HP remaining, for HP bar rendering."""
        if self._max_hp <= 0:
            return 0.0
        return self._current_hp / self._max_hp

    def get_move(self, slot: int) -> str:
        """Return the move in a 1-based slot, or the miss sentinel if the slot is empty."""
        return self._moveset.get(str(slot)) or MISS_MOVE

    def take_damage(self, amount: int) -> None:
        self._hp_history.append(self._current_hp)
        self._current_hp = max(0, self._current_hp - amount)

    def heal(self, amount: int) -> None:
        self._hp_history.append(self._current_hp)
        self._current_hp = min(self._max_hp, self._current_hp + amount)

    def can_undo(self) -> bool:
        return len(self._hp_history) > 1

    def undo_hp_change(self) -> None:
        """
        Pop the most recent history entry and restore HP to the new top.

        No-op when the history holds a single entry. The first entry is never
        popped.
        """
        if len(self._hp_history) > 1:
            self._hp_history.pop()
            self._current_hp = self._hp_history[-1]

    def toggle_status_condition(self, condition_id: str) -> None:
        if condition_id in self._active_conditions:
            self._active_conditions.remove(condition_id)
        else:
            self._active_conditions.append(condition_id)

    def has_condition(self, condition_id: str) -> bool:
        return condition_id in self._active_conditions

    def has_evolution(self) -> bool:
        return self.get_evolution_name() is not None

    def has_pre_evolution(self) -> bool:
        return self.get_pre_evolution_name() is not None

    def get_evolution_name(self) -> str | None:
        for link in self._evolutions:
            if link.after:
                return link.after
        return None

    def get_pre_evolution_name(self) -> str | None:
        for link in self._evolutions:
            if link.before:
                return link.before
        return None

    def is_defeated(self) -> bool:
        return self._current_hp <= 0

    def get_primary_type_color(self) -> str:
        primary = self._types[0] if self._types else ""
        return type_color(primary)

    def get_secondary_type_color(self) -> str | None:
        if len(self._types) < 2:
            return None
        return type_color(self._types[1])

    def __repr__(self) -> str:
        return f"BattleCreature(name={self._name!r}, hp={self._current_hp}/{self._max_hp})"
