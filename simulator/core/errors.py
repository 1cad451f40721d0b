"""
Exceptions raised by the balance engine.

Stat aggregation tolerates holes in the player's equipment, but a player whose
race is unknown, or loot tables that reference missing templates, indicate a
bug in the supplied data and are raised to the caller.
"""


class InvalidRaceError(ValueError):
    """Raised when a player references a race that is not in the race table."""

    def __init__(self, race: str) -> None:
        self.race = race
        super().__init__(f"Invalid race: '{race}'")


class MissingContentError(KeyError):
    """Raised when a content table lookup that must succeed fails."""

    def __init__(self, table: str, key: object) -> None:
        self.table = table
        self.key = key
        super().__init__(f"'{key}' not found in {table}")

    def __str__(self) -> str:
        return str(self.args[0])
