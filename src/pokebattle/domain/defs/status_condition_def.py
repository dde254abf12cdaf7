"""Status condition definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StatusConditionDef:
    """A toggleable battle effect shown in the condition list."""

    id: str
    name: str
    description: str
