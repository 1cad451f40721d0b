"""
Player module for the simulator.

Defines the Player entity handed to the balance engine by the persistence
layer, together with the combat statistics derived from it.
"""

from typing import Any

from core.constants import ItemType
from items.item import Gem, ItemInstance
from pydantic import BaseModel, Field


class DerivedStats(BaseModel):
    """
    Combat statistics derived from base stats, race and equipment. Always
    recomputed as a whole, never patched.
    """

    max_hp: float = Field(
        description="The maximum hit points.",
    )
    ac: float = Field(
        default=0.0,
        description="The armor coefficient, reducing incoming damage.",
    )
    wc: float = Field(
        default=0.0,
        description="The weapon coefficient.",
    )
    sc: float = Field(
        default=0.0,
        description="The spell coefficient.",
    )
    hit_chance: float = Field(
        default=0.0,
        description="The chance to hit, in percent.",
    )
    crit_chance: float = Field(
        default=0.0,
        description="The chance to land a critical hit, in percent.",
    )


class Player(BaseModel):
    """
    Represents a player, including base stats, equipment, inventory, currency
    and the derived combat stats.

    Attributes:
        name (str):
            The name of the player.
        race (str):
            The race id, key into the race table.
        base_stats (dict[str, int]):
            The base attributes (STR, DEX, WIS, VIT).
        equipment (dict[str, str | None]):
            The instance id equipped in each slot, None for empty slots.
        inventory (list[ItemInstance]):
            The items owned by the player, in acquisition order.
        gold (float):
            The gold owned by the player.
        xp (float):
            The experience of the player.
        hp (float | None):
            The current hit points, None until first computed.
        derived_stats (DerivedStats | None):
            The derived combat stats, None until first computed.
        gems (list[Gem]):
            The gems owned by the player.

    """

    name: str = Field(
        description="The name of the player.",
    )
    race: str = Field(
        description="The race id, key into the race table.",
    )
    base_stats: dict[str, int] = Field(
        default_factory=dict,
        description="The base attributes (STR, DEX, WIS, VIT).",
    )
    equipment: dict[str, str | None] = Field(
        default_factory=dict,
        description="The instance id equipped in each slot.",
    )
    inventory: list[ItemInstance] = Field(
        default_factory=list,
        description="The items owned by the player.",
    )
    gold: float = Field(
        default=0.0,
        description="The gold owned by the player.",
        ge=0,
    )
    xp: float = Field(
        default=0.0,
        description="The experience of the player.",
        ge=0,
    )
    hp: float | None = Field(
        default=None,
        description="The current hit points.",
    )
    derived_stats: DerivedStats | None = Field(
        default=None,
        description="The derived combat stats.",
    )
    gems: list[Gem] = Field(
        default_factory=list,
        description="The gems owned by the player.",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.name:
            raise ValueError("Player name must be a non-empty string")
        ids = [item.instance_id for item in self.inventory]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate instance ids in inventory of {self.name}")

    # ============================================================================
    # STATS
    # ============================================================================

    def get_stat(self, name: str) -> int:
        """
        Returns a base stat, treating missing stats as zero.

        Args:
            name (str): The stat name (e.g., "VIT").

        Returns:
            int: The stat value.

        """
        return self.base_stats.get(name, 0)

    # ============================================================================
    # INVENTORY
    # ============================================================================

    def find_item(self, instance_id: str) -> ItemInstance | None:
        """
        Finds an item of the inventory by instance id.

        Args:
            instance_id (str): The instance id.

        Returns:
            ItemInstance | None: The item, or None if not owned.

        """
        for item in self.inventory:
            if item.instance_id == instance_id:
                return item
        return None

    def equipped_items(self) -> list[ItemInstance]:
        """
        Returns the equipped items, skipping empty slots and slots referencing
        items no longer in the inventory.

        Returns:
            list[ItemInstance]: The equipped items, in slot order.

        """
        by_id = {item.instance_id: item for item in self.inventory}
        return [
            by_id[instance_id]
            for instance_id in self.equipment.values()
            if instance_id and instance_id in by_id
        ]

    def owns_variant(self, base_item_id: str, item_type: ItemType) -> bool:
        """
        Checks whether the inventory holds an item of the given base item and
        variant kind.

        Args:
            base_item_id (str): The base item template id.
            item_type (ItemType): The variant kind.

        Returns:
            bool: True if such an item is owned.

        """
        return any(
            item.base_item_id == base_item_id and item.item_type == item_type
            for item in self.inventory
        )
