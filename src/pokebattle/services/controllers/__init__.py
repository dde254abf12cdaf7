"""UI-agnostic controllers for game flow orchestration."""
from __future__ import annotations

from .game_controller import DICE_SIDES, GameController

__all__ = [
    "DICE_SIDES",
    "GameController",
]
