"""
Item module for the simulator.

Defines base item templates, the item instances a player owns and equips, and
the gem templates and owned gems handed out as loot.
"""

from typing import Any

from core.constants import ItemType
from pydantic import BaseModel, Field


class BaseItemTemplate(BaseModel):
    """
    Represents the immutable definition of an item, shared by every instance
    of it. The sub type selects the slot modifier that turns the item tier
    into combat stats.
    """

    id: str = Field(
        description="The unique identifier of the template.",
    )
    name: str = Field(
        description="The display name of the item.",
    )
    sub_type: str = Field(
        description="The equipment sub type, key into the slot modifier table.",
    )


class ItemInstance(BaseModel):
    """
    Represents a concrete item owned by a player.

    Droppers are regular equipment. Shadows and Echoes are bonus duplicates of
    an equipped Dropper and always carry a quality multiplier.
    """

    instance_id: str = Field(
        description="The unique identifier of this instance.",
    )
    base_item_id: str = Field(
        description="The identifier of the base item template.",
    )
    tier: int = Field(
        description="The gear tier of this instance.",
    )
    item_type: ItemType = Field(
        default=ItemType.DROPPER,
        description="The variant kind of this instance.",
    )
    quality_multiplier: float | None = Field(
        default=None,
        description="The quality multiplier, present on Shadow and Echo variants only.",
        ge=0,
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if self.item_type == ItemType.DROPPER:
            if self.quality_multiplier is not None:
                raise ValueError("Dropper items cannot have a quality multiplier")
        elif self.quality_multiplier is None:
            raise ValueError(
                f"{self.item_type.display_name} items require a quality multiplier"
            )


class GemTemplate(BaseModel):
    """Represents a gem from the standard gem set."""

    id: str = Field(
        description="The unique identifier of the gem.",
    )
    name: str = Field(
        description="The display name of the gem.",
    )


class Gem(BaseModel):
    """Represents a gem owned by a player."""

    id: str = Field(
        description="The identifier of the gem template.",
    )
    grade: int = Field(
        description="The grade of the gem, derived from the zone it dropped in.",
        ge=1,
    )
