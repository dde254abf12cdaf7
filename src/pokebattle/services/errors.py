"""Service-layer exceptions."""


class CreatureNotFoundError(Exception):
    """Raised when a battle is started for a creature name that is not defined."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Creature '{name}' not found.")
        self.name = name
