"""
Encounter module for the simulator.

Glues the engine together for a real fight: derive the player's stats,
preview the fight on copies, and only if the player wins apply the loot to
the canonical player.
"""

import random

from catchery import log_debug
from character.character_stats import calculate_derived_stats
from character.main import Player
from core.constants import CombatStatus
from core.content import ContentTables
from items.ids import InstanceIdGenerator
from pydantic import BaseModel, Field

from combat.loot import generate_loot
from combat.monster import Monster
from combat.simulator import CombatResult, simulate_combat


class EncounterReport(BaseModel):
    """The outcome of an encounter and the loot it produced."""

    result: CombatResult = Field(
        description="The simulated fight.",
    )
    loot: list[str] = Field(
        default_factory=list,
        description="The loot messages, empty unless the player won.",
    )

    @property
    def won(self) -> bool:
        """Whether the player won the fight."""
        return self.result.outcome == CombatStatus.VICTORY


def run_encounter(
    player: Player,
    monster: Monster,
    zone_id: str,
    content: ContentTables,
    target_tier: int = 1,
    rng: random.Random | None = None,
    id_generator: InstanceIdGenerator | None = None,
) -> EncounterReport:
    """
    Runs a fight against a bestiary monster in a zone.

    The canonical player gets its derived stats refreshed and, on victory,
    receives the rewards of the scaled monster. Damage taken during the fight
    stays on the simulated copy.

    Args:
        player (Player):
            The canonical player.
        monster (Monster):
            The base bestiary monster. Not modified.
        zone_id (str):
            The zone the fight takes place in.
        content (ContentTables):
            The content tables.
        target_tier (int):
            The gear tier of the zone.
        rng (random.Random | None):
            The random source for loot.
        id_generator (InstanceIdGenerator | None):
            The instance id source for dropped items.

    Returns:
        EncounterReport:
            The fight result and the loot messages.

    """
    calculate_derived_stats(player, content)
    result = simulate_combat(player, monster, content, target_tier=target_tier)

    loot: list[str] = []
    if result.outcome == CombatStatus.VICTORY:
        loot = generate_loot(
            player,
            result.monster,
            zone_id,
            content,
            rng=rng,
            id_generator=id_generator,
        )
    else:
        log_debug(
            f"{player.name} did not win against {monster.name}, no loot.",
            {"outcome": result.outcome.value, "zone_id": zone_id},
        )
    return EncounterReport(result=result, loot=loot)
