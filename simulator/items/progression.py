"""
Progression tables module for the simulator.

Defines how an equipped item turns into combat stats: the slot modifier of its
sub type says which coefficient it feeds and in what proportion, and the tier
table gives the class value that proportion is applied to. Also maps zones to
the grade of the gems that drop there.
"""

from catchery import log_debug
from core.constants import BonusStat, GearStat
from pydantic import BaseModel, Field, field_validator


class SpecialBonus(BaseModel):
    """A bonus granted by a slot on top of its regular stat contribution."""

    stat: BonusStat = Field(
        description="The stat the bonus applies to (Hit Chance or WC/SC).",
    )
    value: float = Field(
        description="The bonus value, relative (e.g., 0.05 for +5%).",
    )


class SlotModifier(BaseModel):
    """Describes how an equipment sub type contributes to combat stats."""

    stat_type: GearStat = Field(
        description="The coefficient this slot contributes to (AC, WC or SC).",
    )
    stat_proportionality: float = Field(
        default=0.0,
        description="The share of the tier class value this slot contributes.",
        ge=0,
    )
    special_bonus: SpecialBonus | None = Field(
        default=None,
        description="An optional special bonus granted by this slot.",
    )


class TierEntry(BaseModel):
    """The class value associated with a gear tier."""

    tier: int = Field(
        description="The gear tier.",
        ge=1,
    )
    class_value: float = Field(
        description="The stat budget of an item of this tier.",
        ge=0,
    )


class GemGradeTier(BaseModel):
    """Associates a gem grade with the zones where it drops."""

    grade_tier: int = Field(
        description="The gem grade.",
        ge=1,
    )
    corresponding_zones: list[str] = Field(
        default_factory=list,
        description="The zone identifiers that drop gems of this grade.",
    )


class ProgressionTables(BaseModel):
    """
    Indexed progression tables. Lookups return None on a miss so that stat
    aggregation can treat missing entries as contributing nothing.
    """

    slot_modifiers: dict[str, SlotModifier] = Field(
        default_factory=dict,
        description="Slot modifiers keyed by equipment sub type.",
    )
    tiers: dict[int, TierEntry] = Field(
        default_factory=dict,
        description="Tier entries keyed by tier.",
    )
    gem_grade_tiers: list[GemGradeTier] = Field(
        default_factory=list,
        description="Gem grade tiers, searched in order.",
    )

    @field_validator("tiers", mode="before")
    @classmethod
    def _index_tiers(cls, value):
        # Accept the list form used by content files.
        if isinstance(value, list):
            indexed = {}
            for entry in value:
                tier = entry.tier if isinstance(entry, TierEntry) else entry["tier"]
                if tier in indexed:
                    raise ValueError(f"Duplicate tier: {tier}")
                indexed[tier] = entry
            return indexed
        return value

    def model_post_init(self, _) -> None:
        """Checks that every tier entry is stored under its own tier."""
        for key, entry in self.tiers.items():
            if key != entry.tier:
                raise ValueError(f"Tier entry {entry.tier} stored under key {key}")

    def get_slot_modifier(self, sub_type: str) -> SlotModifier | None:
        """Get the slot modifier of a sub type, or None if not found."""
        modifier = self.slot_modifiers.get(sub_type)
        if modifier is None:
            log_debug(
                f"No slot modifier for sub type '{sub_type}'.",
                {"sub_type": sub_type},
            )
        return modifier

    def get_class_value(self, tier: int) -> float | None:
        """Get the class value of a tier, or None if not found."""
        entry = self.tiers.get(tier)
        if entry is None:
            log_debug(
                f"No tier entry for tier {tier}.",
                {"tier": tier, "known_tiers": sorted(self.tiers)},
            )
            return None
        return entry.class_value

    def get_gem_grade(self, zone_id: str, default: int = 1) -> int:
        """
        Get the gem grade of the first tier that lists the zone.

        Args:
            zone_id (str):
                The zone the gem dropped in.
            default (int):
                The grade to use when no tier lists the zone.

        Returns:
            int:
                The gem grade.

        """
        for grade_tier in self.gem_grade_tiers:
            if zone_id in grade_tier.corresponding_zones:
                return grade_tier.grade_tier
        return default
