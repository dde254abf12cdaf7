"""Status conditions repository."""
from __future__ import annotations

from typing import Dict

from pokebattle.data.repositories.base import RepositoryBase
from pokebattle.domain.defs import StatusConditionDef


class StatusConditionsRepository(RepositoryBase[StatusConditionDef]):
    """Loads status condition definitions keyed by condition id."""

    def __init__(self, base_path=None) -> None:
        super().__init__("status_conditions.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, StatusConditionDef]:
        conditions: Dict[str, StatusConditionDef] = {}
        for raw_id, payload in raw.items():
            context = f"status condition '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(data, {"name", "description"}, context)
            conditions[raw_id] = StatusConditionDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                description=self._require_str(data["description"], f"{context} description"),
            )
        return conditions
