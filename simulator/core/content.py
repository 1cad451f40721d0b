import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_critical, log_debug, log_warning
from character.character_race import RaceDefinition
from items.item import BaseItemTemplate, GemTemplate
from items.progression import ProgressionTables
from pydantic import BaseModel, ConfigDict, Field

from core.balance import BalanceConstants
from core.errors import MissingContentError


class ContentTables(BaseModel):
    """
    Read-only registry of every content table the balance engine needs, with
    fast by-id access. An instance is passed explicitly into each operation.
    """

    model_config = ConfigDict(frozen=True)

    races: dict[str, RaceDefinition] = Field(
        default_factory=dict,
        description="Race definitions keyed by race id.",
    )
    base_items: dict[str, BaseItemTemplate] = Field(
        default_factory=dict,
        description="Base item templates keyed by template id.",
    )
    gems: dict[str, GemTemplate] = Field(
        default_factory=dict,
        description="The standard gem set keyed by gem id.",
    )
    progression: ProgressionTables = Field(
        default_factory=ProgressionTables,
        description="Slot modifiers, tier values and gem grade tiers.",
    )
    balance: BalanceConstants = Field(
        default_factory=BalanceConstants,
        description="Tunable balance constants.",
    )

    def _get_from_collection(
        self,
        collection_name: str,
        item_id: str,
    ) -> Any | None:
        """
        Generic helper to get an entry from any collection.

        Args:
            collection_name (str):
                Name of the collection attribute (e.g., 'races', 'gems')
            item_id (str):
                Id of the entry to retrieve

        Returns:
            Any | None:
                The entry if found, None otherwise

        """
        collection = getattr(self, collection_name)
        entry = collection.get(item_id)
        if entry is None:
            log_debug(
                f"Entry '{item_id}' not found in collection '{collection_name}'.",
                {
                    "collection_name": collection_name,
                    "item_id": item_id,
                },
            )
        return entry

    def get_race(self, race_id: str) -> RaceDefinition | None:
        """Get a race by id, or None if not found."""
        return self._get_from_collection("races", race_id)

    def get_base_item(self, item_id: str) -> BaseItemTemplate | None:
        """Get a base item template by id, or None if not found."""
        return self._get_from_collection("base_items", item_id)

    def require_base_item(self, item_id: str) -> BaseItemTemplate:
        """Get a base item template by id, raising if not found."""
        base_item = self.get_base_item(item_id)
        if base_item is None:
            log_critical(
                f"Base item template '{item_id}' is required but missing.",
                {"item_id": item_id},
            )
            raise MissingContentError("base_items", item_id)
        return base_item

    def standard_gems(self) -> list[GemTemplate]:
        """Returns the standard gem set in table order."""
        return list(self.gems.values())


def load_content(root: Path) -> ContentTables:
    """
    Load all content tables from a directory of JSON files.

    Args:
        root (Path):
            The directory containing the content files.

    Returns:
        ContentTables:
            The loaded tables.

    """
    races = _load_json_file(
        root / "races.json",
        lambda data: _index_by_id(data, RaceDefinition, "race"),
        "races",
    )
    base_items = _load_json_file(
        root / "base_items.json",
        lambda data: _index_by_id(data, BaseItemTemplate, "base item"),
        "base items",
    )
    gems = _load_json_file(
        root / "gems.json",
        lambda data: _index_by_id(data, GemTemplate, "gem"),
        "gems",
    )
    progression = _load_json_file(
        root / "progression.json",
        ProgressionTables.model_validate,
        "progression tables",
        expected_type=dict,
    )
    balance_file = root / "balance.json"
    if balance_file.exists():
        balance = _load_json_file(
            balance_file,
            BalanceConstants.model_validate,
            "balance constants",
            expected_type=dict,
        )
    else:
        log_warning(
            "No balance file found, using default balance constants.",
            {"path": str(balance_file)},
        )
        balance = BalanceConstants()
    return ContentTables(
        races=races,
        base_items=base_items,
        gems=gems,
        progression=progression,
        balance=balance,
    )


def _index_by_id(data: list[dict], model: type[BaseModel], description: str) -> dict:
    """
    Validate a list of entries and index them by their id.

    Raises:
        ValueError: If duplicate ids are found.

    """
    entries = {}
    for entry_data in data:
        entry = model.model_validate(entry_data)
        if entry.id in entries:
            raise ValueError(f"Duplicate {description} id: {entry.id}")
        entries[entry.id] = entry
    return entries


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[Any], Any],
    description: str,
    expected_type: type = list,
) -> Any:
    """Helper to load and validate JSON files"""
    try:
        log_debug(f"Loading {description} from {filepath}...", {"path": str(filepath)})
        # Validate file path
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        # Load and validate JSON
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data in {filepath}")
        if not isinstance(data, expected_type):
            raise ValueError(
                f"Expected {expected_type.__name__} in {filepath}, got {type(data).__name__}"
            )
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
