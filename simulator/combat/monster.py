"""
Monster module for the simulator.

Defines the Monster entity of the bestiary and the loader for bestiary files.
"""

from pathlib import Path

from core.content import _load_json_file
from pydantic import BaseModel, ConfigDict, Field


class Monster(BaseModel):
    """
    Represents a monster. Base definitions come from the bestiary; the
    current HP is only set on the copy used during a simulation.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(
        description="The name of the monster.",
    )
    hp: float = Field(
        description="The maximum hit points.",
        gt=0,
    )
    atk: float = Field(
        description="The attack value, damage dealt before the player's armor.",
        ge=0,
    )
    defense: float = Field(
        alias="def",
        description="The defense value, dividing the player's damage.",
        gt=0,
    )
    xp: float = Field(
        default=0.0,
        description="The experience granted on defeat.",
        ge=0,
    )
    gold: float = Field(
        default=0.0,
        description="The gold granted on defeat.",
        ge=0,
    )
    current_hp: float | None = Field(
        default=None,
        description="The remaining hit points, set only during a simulation.",
    )


def load_monsters(file_path: Path) -> dict[str, Monster]:
    """
    Loads a bestiary from a JSON file.

    Args:
        file_path (Path):
            The path to the JSON file containing a list of monsters.

    Returns:
        dict[str, Monster]: A dictionary mapping monster names to monsters.

    Raises:
        ValueError: If the file is invalid or contains duplicate names.

    """

    def _load(data: list[dict]) -> dict[str, Monster]:
        monsters: dict[str, Monster] = {}
        for monster_data in data:
            monster = Monster.model_validate(monster_data)
            if monster.name in monsters:
                raise ValueError(f"Duplicate monster name: {monster.name}")
            monsters[monster.name] = monster
        return monsters

    return _load_json_file(file_path, _load, "monsters")
