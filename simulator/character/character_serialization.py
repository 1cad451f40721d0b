"""
Player serialization and deserialization functions.

This module provides functions to build Player instances from dictionaries and
JSON files, and to turn them back into plain dictionaries for storage.
"""

import json
from pathlib import Path
from typing import Any

from catchery import log_warning
from core.content import ContentTables

from .main import Player


def player_from_dict(data: dict[str, Any], content: ContentTables | None = None) -> Player:
    """
    Creates a Player instance from a dictionary of data.

    Args:
        data (dict[str, Any]):
            The dictionary containing player data.
        content (ContentTables | None):
            When provided, the race and equipment are checked against it.

    Returns:
        Player:
            The created Player instance.

    Raises:
        ValueError: If the data is invalid or the race is unknown.

    """
    player = Player.model_validate(data)

    if content is None:
        return player

    if content.get_race(player.race) is None:
        raise ValueError(f"Player race '{player.race}' not found.")

    # Dangling equipment is tolerated, the stat calculator skips it.
    for slot, instance_id in player.equipment.items():
        if instance_id and player.find_item(instance_id) is None:
            log_warning(
                f"{player.name} has '{instance_id}' equipped in '{slot}' but does not own it.",
                {"player": player.name, "slot": slot, "instance_id": instance_id},
            )
    return player


def player_to_dict(player: Player) -> dict[str, Any]:
    """
    Converts a Player into a JSON-compatible dictionary. Derived stats are
    not persisted, they are recomputed on load.

    Args:
        player (Player):
            The player to convert.

    Returns:
        dict[str, Any]:
            The player data.

    """
    return player.model_dump(mode="json", exclude={"derived_stats"})


def load_player(file_path: Path, content: ContentTables | None = None) -> Player | None:
    """
    Loads a player from a JSON file.

    Args:
        file_path (Path): The path to the JSON file containing player data.
        content (ContentTables | None): Optional tables to check the player against.

    Returns:
        Player | None: A Player instance if the file is valid, None otherwise.

    """
    try:
        with open(file_path, encoding="utf-8") as f:
            return player_from_dict(json.load(f), content)
    except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
        log_warning(
            f"Failed to load player from {file_path}: {e}",
            {
                "file_path": str(file_path),
                "error": str(e),
                "context": "player_file_loading",
            },
        )
        return None
