"""
Damage module for the simulator.

Computes the damage a player deals according to their archetype, and the
damage a monster deals through the player's armor.
"""

from collections.abc import Callable

from character.main import DerivedStats
from core.balance import BalanceConstants
from core.constants import Archetype


def coefficient_damage(coefficient: float, defense: float, balance: BalanceConstants) -> float:
    """
    Damage of a single coefficient against a defense value.

    Args:
        coefficient (float): The WC or SC of the attacker.
        defense (float): The defense of the target, must be positive.
        balance (BalanceConstants): The balance constants.

    Returns:
        float: The damage dealt.

    """
    return balance.player_damage_constant * coefficient / defense


def _fighter_damage(stats: DerivedStats, defense: float, balance: BalanceConstants) -> float:
    return coefficient_damage(stats.wc, defense, balance)


def _caster_damage(stats: DerivedStats, defense: float, balance: BalanceConstants) -> float:
    return coefficient_damage(stats.sc, defense, balance)


def _hybrid_damage(stats: DerivedStats, defense: float, balance: BalanceConstants) -> float:
    wc_damage = coefficient_damage(stats.wc, defense, balance)
    sc_damage = coefficient_damage(stats.sc, defense, balance)
    return (wc_damage + sc_damage) * balance.hybrid_spellstrike_multiplier


ARCHETYPE_DAMAGE: dict[Archetype, Callable[[DerivedStats, float, BalanceConstants], float]] = {
    Archetype.TRUE_FIGHTER: _fighter_damage,
    Archetype.TRUE_CASTER: _caster_damage,
    Archetype.HYBRID: _hybrid_damage,
}


def player_damage(
    archetype: Archetype,
    stats: DerivedStats,
    defense: float,
    balance: BalanceConstants,
) -> float:
    """
    Damage dealt by a player of the given archetype, never negative.

    Args:
        archetype (Archetype): The archetype of the player's race.
        stats (DerivedStats): The player's derived stats.
        defense (float): The monster's defense.
        balance (BalanceConstants): The balance constants.

    Returns:
        float: The damage dealt.

    """
    return max(0.0, ARCHETYPE_DAMAGE[archetype](stats, defense, balance))


def monster_damage(atk: float, player_ac: float, balance: BalanceConstants) -> float:
    """
    Damage dealt by a monster after the player's armor reduction, never
    negative.

    Args:
        atk (float): The monster's attack.
        player_ac (float): The player's armor coefficient.
        balance (BalanceConstants): The balance constants.

    Returns:
        float: The damage dealt.

    """
    return max(0.0, atk - player_ac * balance.monster_damage_ac_reduction_factor)
