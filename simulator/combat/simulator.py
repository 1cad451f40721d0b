"""
Combat simulator module for the simulator.

Runs a whole fight turn by turn on isolated copies of the combatants, so a
preview never touches the canonical player or bestiary entry.
"""

from catchery import log_debug
from character.main import Player
from core.constants import MAX_COMBAT_TURNS, CombatStatus
from core.content import ContentTables
from pydantic import BaseModel, Field

from combat.monster import Monster
from combat.resolver import resolve_turn
from combat.scaling import scale_monster


class CombatResult(BaseModel):
    """The outcome of a simulated fight, with the final state of the copies."""

    outcome: CombatStatus = Field(
        description="VICTORY, DEFEAT or STALEMATE.",
    )
    player: Player = Field(
        description="The simulated copy of the player, in its final state.",
    )
    monster: Monster = Field(
        description="The simulated copy of the monster, in its final state.",
    )
    log: list[str] = Field(
        default_factory=list,
        description="The human-readable combat log.",
    )
    turns: int = Field(
        default=0,
        description="The number of turns played.",
        ge=0,
    )


def simulate_combat(
    player: Player,
    monster: Monster,
    content: ContentTables,
    target_tier: int | None = None,
    max_turns: int = MAX_COMBAT_TURNS,
) -> CombatResult:
    """
    Simulates a fight until one side falls or the turn cap is reached.

    Args:
        player (Player):
            The player, with derived stats already computed. Not modified.
        monster (Monster):
            The base monster. Not modified.
        content (ContentTables):
            The content tables.
        target_tier (int | None):
            When given, the monster copy is scaled to this tier once before
            the fight.
        max_turns (int):
            The turn cap, after which the fight is a stalemate.

    Returns:
        CombatResult:
            The outcome, the final state of the copies and the combat log.

    """
    sim_player = player.model_copy(deep=True)
    sim_monster = monster.model_copy(deep=True)
    if target_tier is not None:
        sim_monster = scale_monster(sim_monster, target_tier, content.balance)
    sim_monster.current_hp = sim_monster.hp

    log = [f"Combat Start: {sim_player.name} vs. {sim_monster.name}"]
    status = CombatStatus.CONTINUE
    turn = 0

    while turn < max_turns:
        turn += 1
        result = resolve_turn(sim_player, sim_monster, content)
        status = result.status

        log.append(
            f"Turn {turn}: {sim_player.name} deals {result.damage_dealt:.2f} damage. "
            f"[Monster HP: {sim_monster.current_hp:.2f}]"
        )
        if status == CombatStatus.VICTORY:
            log.append(f"{sim_monster.name} has been defeated!")
            break

        log.append(
            f"Turn {turn}: {sim_monster.name} deals {result.damage_taken:.2f} damage. "
            f"[Player HP: {sim_player.hp:.2f}]"
        )
        if status == CombatStatus.DEFEAT:
            log.append(f"{sim_player.name} has been defeated!")
            break

    if not status.is_terminal:
        log.append(f"Combat exceeded {max_turns} turns. Halting simulation.")
        status = CombatStatus.STALEMATE

    log_debug(
        f"Simulated {sim_player.name} vs. {sim_monster.name}: {status} after {turn} turns.",
        {"outcome": status.value, "turns": turn},
    )
    return CombatResult(
        outcome=status,
        player=sim_player,
        monster=sim_monster,
        log=log,
        turns=turn,
    )
