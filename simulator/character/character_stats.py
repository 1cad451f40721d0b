"""
Character stats module for the simulator.

Derives a player's combat statistics (HP, AC, WC, SC, hit and critical
chance) from base stats, race archetype and equipped items.
"""

from collections.abc import Callable
from dataclasses import dataclass

from catchery import log_debug, log_warning
from core.constants import (
    AC_SCALING_PER_VIT,
    BASE_CRIT_CHANCE,
    BASE_HIT_CHANCE,
    BASE_HP,
    CRIT_CHANCE_PER_STAT,
    GEAR_SCALING_PER_STAT,
    HIT_CHANCE_PER_STAT,
    HP_PER_VIT,
    Archetype,
    BonusStat,
    GearStat,
    PrimaryStat,
)
from core.content import ContentTables
from core.errors import InvalidRaceError

from .character_race import RaceDefinition
from .main import DerivedStats, Player


@dataclass
class GearTotals:
    """Accumulated contribution of the equipped items."""

    ac: float = 0.0
    wc: float = 0.0
    sc: float = 0.0
    bonus_hit_chance: float = 0.0
    bonus_wc_sc_multiplier: float = 1.0

    def add(self, stat_type: GearStat, value: float) -> None:
        """Routes a contribution into the coefficient it belongs to."""
        if stat_type == GearStat.AC:
            self.ac += value
        elif stat_type == GearStat.WC:
            self.wc += value
        elif stat_type == GearStat.SC:
            self.sc += value


def scale_gear_value(gear_value: float, scaling_stat: int) -> float:
    """
    Scales a gear coefficient with the value of the scaling stat.

    Args:
        gear_value (float): The raw gear total.
        scaling_stat (int): The value of the scaling stat.

    Returns:
        float: The scaled coefficient.

    """
    return gear_value * (1 + scaling_stat * GEAR_SCALING_PER_STAT)


# Each archetype maps (gear totals, scaling stat value) to (WC, SC).
_ARCHETYPE_SCALING: dict[Archetype, Callable[[GearTotals, int], tuple[float, float]]] = {
    Archetype.TRUE_FIGHTER: lambda gear, stat: (scale_gear_value(gear.wc, stat), 0.0),
    Archetype.TRUE_CASTER: lambda gear, stat: (0.0, scale_gear_value(gear.sc, stat)),
    Archetype.HYBRID: lambda gear, stat: (
        scale_gear_value(gear.wc, stat),
        scale_gear_value(gear.sc, stat),
    ),
}


def collect_gear_totals(player: Player, content: ContentTables) -> GearTotals:
    """
    Sums the contribution of every equipped item. Slots whose item, template,
    slot modifier or tier cannot be resolved contribute nothing.

    Args:
        player (Player): The player whose equipment is scanned.
        content (ContentTables): The content tables.

    Returns:
        GearTotals: The accumulated gear totals.

    """
    totals = GearTotals()
    progression = content.progression
    for slot, instance_id in player.equipment.items():
        if not instance_id:
            continue
        item = player.find_item(instance_id)
        if item is None:
            log_debug(
                f"Slot '{slot}' of {player.name} references a missing item.",
                {"slot": slot, "instance_id": instance_id},
            )
            continue
        base_item = content.get_base_item(item.base_item_id)
        if base_item is None:
            continue
        modifier = progression.get_slot_modifier(base_item.sub_type)
        class_value = progression.get_class_value(item.tier)
        if modifier is None or class_value is None:
            continue
        totals.add(modifier.stat_type, class_value * modifier.stat_proportionality)
        # Apply the special bonus, if any.
        bonus = modifier.special_bonus
        if bonus is not None:
            if bonus.stat == BonusStat.HIT_CHANCE:
                totals.bonus_hit_chance += bonus.value
            elif bonus.stat == BonusStat.WC_SC:
                totals.bonus_wc_sc_multiplier += bonus.value
    return totals


def _hit_and_crit(player: Player, race: RaceDefinition) -> tuple[float, float]:
    # DEX and VIT races key off DEX, WIS races off WIS.
    if race.primary_stat == PrimaryStat.WIS:
        stat = player.get_stat(PrimaryStat.WIS.value)
    else:
        stat = player.get_stat(PrimaryStat.DEX.value)
    hit_chance = BASE_HIT_CHANCE + stat * HIT_CHANCE_PER_STAT
    crit_chance = BASE_CRIT_CHANCE + stat * CRIT_CHANCE_PER_STAT
    return hit_chance, crit_chance


def calculate_derived_stats(player: Player, content: ContentTables) -> Player:
    """
    Recomputes the derived stats of a player from scratch.

    If the player's hp is unset or above the new maximum, it is reset to the
    maximum.

    Args:
        player (Player):
            The player to update in place.
        content (ContentTables):
            The content tables.

    Returns:
        Player:
            The same player, with updated derived stats.

    Raises:
        InvalidRaceError: If the player's race is not in the race table.

    """
    race = content.get_race(player.race)
    if race is None:
        log_warning(
            f"Invalid race for {player.name}: {player.race}",
            {"player": player.name, "race": player.race},
        )
        raise InvalidRaceError(player.race)

    gear = collect_gear_totals(player, content)
    vit = player.get_stat(PrimaryStat.VIT.value)

    wc, sc = _ARCHETYPE_SCALING[race.archetype](
        gear, player.get_stat(race.scaling_stat.value)
    )
    hit_chance, crit_chance = _hit_and_crit(player, race)

    player.derived_stats = DerivedStats(
        max_hp=BASE_HP + vit * HP_PER_VIT,
        ac=gear.ac * (1 + vit * AC_SCALING_PER_VIT),
        wc=wc * gear.bonus_wc_sc_multiplier,
        sc=sc * gear.bonus_wc_sc_multiplier,
        hit_chance=hit_chance + hit_chance * gear.bonus_hit_chance,
        crit_chance=crit_chance,
    )

    if player.hp is None or player.hp > player.derived_stats.max_hp:
        player.hp = player.derived_stats.max_hp
    return player
