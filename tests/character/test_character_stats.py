"""
Tests for the derived stat calculation.
"""

import pytest
from character.character_stats import calculate_derived_stats, collect_gear_totals
from core.errors import InvalidRaceError


@pytest.mark.parametrize("vit, expected", [(0, 100), (10, 200), (25, 350)])
def test_max_hp_follows_vit(content, make_player, vit, expected):
    """
    Test that maximum HP is 100 plus 10 per point of VIT.
    """
    player = calculate_derived_stats(make_player(stats={"VIT": vit}), content)
    assert player.derived_stats.max_hp == expected


def test_missing_base_stats_read_as_zero(content, make_player):
    """
    Test that a player without base stats gets the baseline values.
    """
    player = calculate_derived_stats(make_player(stats={}), content)
    stats = player.derived_stats
    assert stats.max_hp == 100
    assert stats.hit_chance == pytest.approx(90.0)
    assert stats.crit_chance == pytest.approx(5.0)


def test_fighter_scales_wc_with_primary_stat(content, make_player):
    """
    Test that 50 gear WC on a True Fighter with DEX 20 scales to 55.5.
    """
    player = make_player(race="orc", stats={"DEX": 20}, gear=[("weapon", "sword", 2)])
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.wc == pytest.approx(55.5)
    assert stats.sc == 0


def test_fighter_ignores_spell_gear(content, make_player):
    """
    Test that a True Fighter never gets SC, even with a focus equipped.
    """
    player = make_player(
        race="orc",
        stats={"DEX": 20},
        gear=[("weapon", "sword", 2), ("focus", "staff", 3)],
    )
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.sc == 0
    assert stats.wc == pytest.approx(55.5)


def test_caster_scales_sc_and_ignores_weapon_gear(content, make_player):
    """
    Test that a True Caster scales SC with WIS and never gets WC.
    """
    player = make_player(
        race="elf",
        stats={"WIS": 20, "DEX": 40},
        gear=[("weapon", "sword", 3), ("focus", "staff", 2)],
    )
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.wc == 0
    assert stats.sc == pytest.approx(55.5)


def test_hybrid_scales_both_from_same_stat(content, make_player):
    """
    Test that a Hybrid scales WC and SC from its primary stat.
    """
    player = make_player(
        race="human",
        stats={"DEX": 20, "WIS": 100},
        gear=[("weapon", "sword", 2), ("focus", "staff", 3)],
    )
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.wc == pytest.approx(50 * 1.11)
    assert stats.sc == pytest.approx(100 * 1.11)


def test_special_case_fighter_scales_with_vit(content, make_player):
    """
    Test that a special-case fighter scales WC with VIT instead of its
    primary stat, while hit chance still keys on DEX.
    """
    player = make_player(
        race="troll",
        stats={"VIT": 20, "DEX": 0},
        gear=[("weapon", "sword", 2)],
    )
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.wc == pytest.approx(55.5)
    assert stats.hit_chance == pytest.approx(90.0)


def test_special_case_caster_scales_with_vit(content, make_player):
    """
    Test that a special-case caster scales SC with VIT, keeping WIS for hit
    chance.
    """
    player = make_player(
        race="vampire",
        stats={"VIT": 20, "WIS": 40},
        gear=[("focus", "staff", 2)],
    )
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.sc == pytest.approx(55.5)
    assert stats.hit_chance == pytest.approx(92.0)
    assert stats.crit_chance == pytest.approx(5.4)


def test_special_case_is_ignored_for_hybrids(content, make_player):
    """
    Test that hybrids always scale with their primary stat.
    """
    player = make_player(
        race="sylph",
        stats={"VIT": 100, "WIS": 20},
        gear=[("weapon", "sword", 2), ("focus", "staff", 2)],
    )
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.wc == pytest.approx(55.5)
    assert stats.sc == pytest.approx(55.5)


def test_ac_scales_with_vit(content, make_player):
    """
    Test that armor contributes its proportion of the tier value, scaled by VIT.
    """
    player = make_player(stats={"VIT": 10}, gear=[("chest", "vest", 2)])
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.ac == pytest.approx(25 * 1.075)


def test_wc_sc_bonus_multiplies_both_coefficients(content, make_player):
    """
    Test that the WC/SC special bonus multiplies the scaled coefficients.
    """
    player = make_player(
        race="human",
        stats={"DEX": 20},
        gear=[("weapon", "sword", 2), ("focus", "staff", 2), ("ring", "ring", 1)],
    )
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.wc == pytest.approx(55.5 * 1.1)
    assert stats.sc == pytest.approx(55.5 * 1.1)


def test_wc_sc_bonus_keeps_zero_side_at_zero(content, make_player):
    """
    Test that the multiplier leaves the unused coefficient at zero.
    """
    player = make_player(
        race="orc",
        stats={"DEX": 20},
        gear=[("weapon", "sword", 2), ("ring", "ring", 1)],
    )
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.sc == 0


def test_hit_chance_bonus_is_relative(content, make_player):
    """
    Test that the hit chance bonus is applied as a fraction of the hit chance.
    """
    player = make_player(stats={"DEX": 20}, gear=[("charm", "charm", 1)])
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.hit_chance == pytest.approx(91.0 * 1.1)
    assert stats.crit_chance == pytest.approx(5.2)


def test_wis_race_uses_wis_for_hit_and_crit(content, make_player):
    """
    Test that WIS races key hit and critical chance on WIS, not DEX.
    """
    player = make_player(race="elf", stats={"DEX": 100, "WIS": 20})
    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.hit_chance == pytest.approx(91.0)
    assert stats.crit_chance == pytest.approx(5.2)


def test_unresolvable_equipment_contributes_nothing(content, make_player):
    """
    Test that empty slots, dangling instance ids, unknown templates, sub types
    without a slot modifier and unknown tiers are all skipped.
    """
    player = make_player(
        stats={"DEX": 20},
        gear=[
            ("weapon", "sword", 2),
            ("trinket", "relic", 1),
            ("offhand", "sword", 9),
            ("pocket", "vest", 1),
        ],
    )
    player.equipment["helm"] = None
    player.equipment["boots"] = "not_in_inventory"
    player.inventory[3] = player.inventory[3].model_copy(update={"base_item_id": "ghost"})

    totals = collect_gear_totals(player, content)
    assert totals.wc == pytest.approx(50.0)
    assert totals.ac == 0
    assert totals.sc == 0
    assert totals.bonus_wc_sc_multiplier == 1.0

    stats = calculate_derived_stats(player, content).derived_stats
    assert stats.wc == pytest.approx(55.5)


def test_invalid_race_raises(content, make_player):
    """
    Test that an unknown race raises and leaves the player untouched.
    """
    player = make_player(race="dragon", stats={"VIT": 10})
    with pytest.raises(InvalidRaceError) as exc_info:
        calculate_derived_stats(player, content)
    assert exc_info.value.race == "dragon"
    assert player.derived_stats is None
    assert player.hp is None


def test_unset_hp_is_set_to_max(content, make_player):
    """
    Test that a player without hp starts at full health.
    """
    player = calculate_derived_stats(make_player(stats={"VIT": 10}), content)
    assert player.hp == 200


def test_hp_above_max_is_capped(content, make_player):
    """
    Test that hp above the new maximum is brought down to it.
    """
    player = make_player(stats={"VIT": 0}, hp=500)
    assert calculate_derived_stats(player, content).hp == 100


def test_hp_below_max_is_kept(content, make_player):
    """
    Test that a wounded player stays wounded after a recomputation.
    """
    player = make_player(stats={"VIT": 10}, hp=42)
    assert calculate_derived_stats(player, content).hp == 42


def test_recomputation_replaces_previous_stats(content, make_player):
    """
    Test that unequipping an item removes its contribution entirely.
    """
    player = make_player(stats={"DEX": 20}, gear=[("weapon", "sword", 2)])
    calculate_derived_stats(player, content)
    assert player.derived_stats.wc > 0

    player.equipment["weapon"] = None
    calculate_derived_stats(player, content)
    assert player.derived_stats.wc == 0


def test_tier_zero_item_loads_and_contributes_nothing(content, make_player):
    """
    Test that an item with a tier missing from the tier table is skipped
    rather than rejected.
    """
    player = make_player(
        stats={"DEX": 20},
        gear=[("weapon", "sword", 2), ("offhand", "sword", 0)],
    )
    assert player.inventory[1].tier == 0
    assert collect_gear_totals(player, content).wc == pytest.approx(50.0)
