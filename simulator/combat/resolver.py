"""
Combat resolver module for the simulator.

Resolves a single turn of combat: the player strikes first, and the monster
only retaliates if it survives.
"""

from character.main import Player
from core.constants import CombatStatus
from core.content import ContentTables
from core.errors import InvalidRaceError
from pydantic import BaseModel, Field

from combat.damage import monster_damage, player_damage
from combat.monster import Monster


class TurnResult(BaseModel):
    """The outcome of one turn of combat."""

    status: CombatStatus = Field(
        description="CONTINUE, or the terminal VICTORY/DEFEAT status.",
    )
    damage_dealt: float = Field(
        default=0.0,
        description="The damage dealt by the player.",
        ge=0,
    )
    damage_taken: float = Field(
        default=0.0,
        description="The damage dealt by the monster.",
        ge=0,
    )


def resolve_turn(player: Player, monster: Monster, content: ContentTables) -> TurnResult:
    """
    Resolves one turn of combat, mutating both combatants. Callers must pass
    disposable copies when the canonical objects have to stay untouched.

    Args:
        player (Player):
            The player, with derived stats already computed.
        monster (Monster):
            The monster, with its current HP set.
        content (ContentTables):
            The content tables.

    Returns:
        TurnResult:
            The status of the turn and the damage exchanged.

    Raises:
        InvalidRaceError: If the player's race is unknown.
        ValueError: If the player has no derived stats.

    """
    race = content.get_race(player.race)
    if race is None:
        raise InvalidRaceError(player.race)
    stats = player.derived_stats
    if stats is None:
        raise ValueError(f"Derived stats of {player.name} have not been computed")
    if player.hp is None:
        player.hp = stats.max_hp
    if monster.current_hp is None:
        monster.current_hp = monster.hp

    balance = content.balance

    # The player strikes first.
    damage_dealt = player_damage(race.archetype, stats, monster.defense, balance)
    monster.current_hp = max(0.0, monster.current_hp - damage_dealt)
    if monster.current_hp <= 0:
        return TurnResult(
            status=CombatStatus.VICTORY,
            damage_dealt=damage_dealt,
            damage_taken=0.0,
        )

    # The monster retaliates.
    damage_taken = monster_damage(monster.atk, stats.ac, balance)
    player.hp = max(0.0, player.hp - damage_taken)
    if player.hp <= 0:
        return TurnResult(
            status=CombatStatus.DEFEAT,
            damage_dealt=damage_dealt,
            damage_taken=damage_taken,
        )

    return TurnResult(
        status=CombatStatus.CONTINUE,
        damage_dealt=damage_dealt,
        damage_taken=damage_taken,
    )
