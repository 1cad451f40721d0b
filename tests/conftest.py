"""
Shared fixtures for the balance engine tests.
"""

import random

import pytest
from character.character_race import RaceDefinition
from character.main import Player
from combat.monster import Monster
from core.balance import BalanceConstants
from core.constants import Archetype, BonusStat, GearStat, ItemType, PrimaryStat
from core.content import ContentTables
from items.ids import InstanceIdGenerator
from items.item import BaseItemTemplate, GemTemplate, ItemInstance
from items.progression import (
    GemGradeTier,
    ProgressionTables,
    SlotModifier,
    SpecialBonus,
    TierEntry,
)


class FixedRandom(random.Random):
    """A random source whose random() always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def balance():
    return BalanceConstants(
        player_damage_constant=10.0,
        hybrid_spellstrike_multiplier=0.5,
        monster_damage_ac_reduction_factor=0.5,
        monster_scaling_hp_rate=2.0,
        monster_scaling_atk_rate=1.5,
        monster_scaling_def_rate=1.1,
        monster_scaling_reward_rate=3.0,
        base_gem_drop_chance=0.5,
        base_shadow_drop_chance=0.5,
        shadow_qm_min=0.5,
        shadow_qm_max=1.0,
        echo_qm=0.25,
    )


@pytest.fixture
def content(balance):
    races = [
        RaceDefinition(
            id="orc",
            race_name="Orc",
            primary_stat=PrimaryStat.DEX,
            archetype=Archetype.TRUE_FIGHTER,
        ),
        RaceDefinition(
            id="elf",
            race_name="Elf",
            primary_stat=PrimaryStat.WIS,
            archetype=Archetype.TRUE_CASTER,
        ),
        RaceDefinition(
            id="human",
            race_name="Human",
            primary_stat=PrimaryStat.DEX,
            archetype=Archetype.HYBRID,
        ),
        RaceDefinition(
            id="troll",
            race_name="Troll",
            primary_stat=PrimaryStat.VIT,
            archetype=Archetype.TRUE_FIGHTER,
            special_case=True,
        ),
        RaceDefinition(
            id="vampire",
            race_name="Vampire",
            primary_stat=PrimaryStat.WIS,
            archetype=Archetype.TRUE_CASTER,
            special_case=True,
        ),
        RaceDefinition(
            id="sylph",
            race_name="Sylph",
            primary_stat=PrimaryStat.WIS,
            archetype=Archetype.HYBRID,
            special_case=True,
        ),
    ]
    base_items = [
        BaseItemTemplate(id="sword", name="Iron Sword", sub_type="Weapon"),
        BaseItemTemplate(id="staff", name="Oak Staff", sub_type="Focus"),
        BaseItemTemplate(id="vest", name="Chain Vest", sub_type="Chest"),
        BaseItemTemplate(id="ring", name="Copper Ring", sub_type="Ring"),
        BaseItemTemplate(id="charm", name="Lucky Charm", sub_type="Charm"),
        BaseItemTemplate(id="relic", name="Odd Relic", sub_type="Relic"),
    ]
    progression = ProgressionTables(
        slot_modifiers={
            "Weapon": SlotModifier(stat_type=GearStat.WC, stat_proportionality=1.0),
            "Focus": SlotModifier(stat_type=GearStat.SC, stat_proportionality=1.0),
            "Chest": SlotModifier(stat_type=GearStat.AC, stat_proportionality=0.5),
            "Ring": SlotModifier(
                stat_type=GearStat.WC,
                stat_proportionality=0.0,
                special_bonus=SpecialBonus(stat=BonusStat.WC_SC, value=0.1),
            ),
            "Charm": SlotModifier(
                stat_type=GearStat.AC,
                stat_proportionality=0.0,
                special_bonus=SpecialBonus(stat=BonusStat.HIT_CHANCE, value=0.1),
            ),
        },
        tiers=[
            TierEntry(tier=1, class_value=10),
            TierEntry(tier=2, class_value=50),
            TierEntry(tier=3, class_value=100),
        ],
        gem_grade_tiers=[
            GemGradeTier(grade_tier=1, corresponding_zones=["Z01", "Z02"]),
            GemGradeTier(grade_tier=2, corresponding_zones=["Z03", "Z04"]),
        ],
    )
    gems = [
        GemTemplate(id="ruby", name="Ruby"),
        GemTemplate(id="sapphire", name="Sapphire"),
    ]
    return ContentTables(
        races={race.id: race for race in races},
        base_items={item.id: item for item in base_items},
        gems={gem.id: gem for gem in gems},
        progression=progression,
        balance=balance,
    )


@pytest.fixture
def make_player():
    """
    Factory building a player from (slot, base item id, tier) triples. Each
    item gets the instance id ``{slot}_item``.
    """

    def _make(
        race: str = "orc",
        stats: dict[str, int] | None = None,
        gear: list[tuple[str, str, int]] | None = None,
        name: str = "Hero",
        **kwargs,
    ) -> Player:
        inventory = [
            ItemInstance(instance_id=f"{slot}_item", base_item_id=base_item_id, tier=tier)
            for slot, base_item_id, tier in gear or []
        ]
        equipment = {slot: f"{slot}_item" for slot, _, _ in gear or []}
        return Player(
            name=name,
            race=race,
            base_stats=stats if stats is not None else {},
            equipment=equipment,
            inventory=inventory,
            **kwargs,
        )

    return _make


@pytest.fixture
def slime():
    return Monster(name="Slime", hp=100, atk=20, defense=10, xp=12.9, gold=7.5)


@pytest.fixture
def always_rng():
    """Every Bernoulli draw succeeds and every choice picks the first entry."""
    return FixedRandom(0.0)


@pytest.fixture
def never_rng():
    """Every Bernoulli draw fails."""
    return FixedRandom(0.99)


@pytest.fixture
def id_generator():
    return InstanceIdGenerator(session="test")


@pytest.fixture
def shadow_of():
    """Factory building a Shadow instance of a base item."""

    def _make(base_item_id: str, instance_id: str = "old_shadow", tier: int = 1) -> ItemInstance:
        return ItemInstance(
            instance_id=instance_id,
            base_item_id=base_item_id,
            tier=tier,
            item_type=ItemType.SHADOW,
            quality_multiplier=0.8,
        )

    return _make
