"""Service layer exports."""

from .controllers import GameController
from .errors import CreatureNotFoundError

__all__ = [
    "CreatureNotFoundError",
    "GameController",
]
