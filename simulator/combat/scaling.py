"""
Monster scaling module for the simulator.

Scales a bestiary monster to the gear tier of the zone it is fought in.
"""

from catchery import log_debug
from core.balance import BalanceConstants

from combat.monster import Monster


def scale_monster(
    monster: Monster,
    target_tier: int,
    balance: BalanceConstants,
) -> Monster:
    """
    Returns a copy of the monster scaled to a gear tier. The original is left
    untouched.

    Each tier above the first multiplies HP, attack and defense by their own
    growth rate, and XP and gold by the shared reward rate.

    Args:
        monster (Monster):
            The base monster.
        target_tier (int):
            The gear tier of the zone.
        balance (BalanceConstants):
            The growth rates.

    Returns:
        Monster:
            The scaled copy.

    """
    scaled = monster.model_copy(deep=True)
    if target_tier <= 1:
        return scaled

    tier_diff = target_tier - 1
    reward_factor = balance.monster_scaling_reward_rate**tier_diff
    scaled.hp *= balance.monster_scaling_hp_rate**tier_diff
    scaled.atk *= balance.monster_scaling_atk_rate**tier_diff
    scaled.defense *= balance.monster_scaling_def_rate**tier_diff
    scaled.xp *= reward_factor
    scaled.gold *= reward_factor

    log_debug(
        f"Scaled {monster.name} to tier {target_tier}.",
        {
            "hp": round(scaled.hp, 2),
            "atk": round(scaled.atk, 2),
            "def": round(scaled.defense, 2),
        },
    )
    return scaled
