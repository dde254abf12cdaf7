"""Creatures repository."""
from __future__ import annotations

from typing import Dict, List, Protocol

from pokebattle.data.errors import DataReferenceError, DataValidationError
from pokebattle.data.repositories.base import RepositoryBase
from pokebattle.domain.defs import CreatureDef, EvolutionLink


class CreatureLookup(Protocol):
    """Anything that can resolve creature records by name."""

    def get_by_name(self, name: str) -> CreatureDef | None:
        ...

    def get_seeded(self) -> list[CreatureDef]:
        ...


class CreaturesRepository(RepositoryBase[CreatureDef]):
    """Loads and validates creature definitions keyed by creature name."""

    def __init__(self, base_path=None) -> None:
        super().__init__("creatures.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CreatureDef]:
        creatures: Dict[str, CreatureDef] = {}
        seen_ids: Dict[int, str] = {}
        for raw_name, payload in raw.items():
            context = f"creature '{raw_name}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                data,
                {"id", "reference_key", "types", "base_hp"},
                context,
                optional_fields={"seeded", "moveset", "evolutions"},
            )

            creature_id = self._require_int(data["id"], f"{context} id")
            if creature_id in seen_ids:
                raise DataValidationError(
                    f"{context} reuses id {creature_id} already assigned to '{seen_ids[creature_id]}'."
                )
            seen_ids[creature_id] = raw_name

            types = self._require_str_list(data["types"], f"{context} types")
            if not 1 <= len(types) <= 2:
                raise DataValidationError(f"{context} types must have one or two entries.")

            base_hp = self._require_int(data["base_hp"], f"{context} base_hp")
            if base_hp <= 0:
                raise DataValidationError(f"{context} base_hp must be positive.")

            creatures[raw_name] = CreatureDef(
                id=creature_id,
                name=raw_name,
                reference_key=self._require_str(data["reference_key"], f"{context} reference_key"),
                types=tuple(types),
                base_max_hp=base_hp,
                moveset=self._parse_moveset(data.get("moveset", {}), context),
                evolutions=self._parse_evolutions(data.get("evolutions", []), context),
                seeded=self._require_bool(data.get("seeded", False), f"{context} seeded"),
            )
        return creatures

    def get_by_name(self, name: str) -> CreatureDef | None:
        """Return the creature called ``name``, or None when it is not defined."""
        try:
            return self.get(name)
        except KeyError:
            return None

    def get_seeded(self) -> list[CreatureDef]:
        """Return the initial roster in id order."""
        seeded = [creature for creature in self.all() if creature.seeded]
        return sorted(seeded, key=lambda creature: creature.id)

    def validate_links(self) -> None:
        """Raise DataReferenceError if any evolution link names an unknown creature."""
        creatures = {creature.name for creature in self.all()}
        for creature in self.all():
            for link in creature.evolutions:
                for target in (link.before, link.after):
                    if target is not None and target not in creatures:
                        raise DataReferenceError(
                            f"creature '{creature.name}' links to unknown creature '{target}'."
                        )

    def _parse_moveset(self, value: object, context: str) -> Dict[str, str]:
        mapping = self._require_mapping(value, f"{context} moveset")
        moves: Dict[str, str] = {}
        for slot, move_name in mapping.items():
            if not (slot.isdecimal() and str(int(slot)) == slot and int(slot) >= 1):
                raise DataValidationError(f"{context} moveset slot '{slot}' must be a positive integer key.")
            moves[slot] = self._require_str(move_name, f"{context} moveset slot '{slot}'")
        return moves

    def _parse_evolutions(self, value: object, context: str) -> tuple[EvolutionLink, ...]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} evolutions must be a list.")
        links: List[EvolutionLink] = []
        for index, entry in enumerate(value):
            entry_context = f"{context} evolutions[{index}]"
            link_data = self._require_mapping(entry, entry_context)
            self._assert_exact_fields(link_data, set(), entry_context, optional_fields={"before", "after"})
            before = link_data.get("before")
            after = link_data.get("after")
            if before is None and after is None:
                raise DataValidationError(f"{entry_context} must name 'before' or 'after'.")
            links.append(
                EvolutionLink(
                    before=self._require_str(before, f"{entry_context} before") if before is not None else None,
                    after=self._require_str(after, f"{entry_context} after") if after is not None else None,
                )
            )
        return tuple(links)
