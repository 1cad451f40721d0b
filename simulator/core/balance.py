"""
Balance constants module for the simulator.

Holds the tunable numbers of the game design (damage constant, monster growth
rates, drop chances and quality multipliers). Defaults can be overridden by a
``balance.json`` file in the content directory.
"""

from typing import Any

from pydantic import BaseModel, Field


class BalanceConstants(BaseModel):
    """
    Tunable balance values shared by combat, monster scaling and loot.
    """

    player_damage_constant: float = Field(
        default=5.0,
        description="Global constant K in the player damage formula K * coefficient / def.",
        gt=0,
    )
    hybrid_spellstrike_multiplier: float = Field(
        default=0.6,
        description="Multiplier applied to the combined WC and SC damage of hybrids.",
        ge=0,
    )
    monster_damage_ac_reduction_factor: float = Field(
        default=0.5,
        description="Fraction of the player's AC subtracted from monster attacks.",
        ge=0,
    )
    monster_scaling_hp_rate: float = Field(
        default=1.25,
        description="Per-tier growth rate of monster HP.",
        gt=0,
    )
    monster_scaling_atk_rate: float = Field(
        default=1.2,
        description="Per-tier growth rate of monster attack.",
        gt=0,
    )
    monster_scaling_def_rate: float = Field(
        default=1.15,
        description="Per-tier growth rate of monster defense.",
        gt=0,
    )
    monster_scaling_reward_rate: float = Field(
        default=1.3,
        description="Per-tier growth rate of monster XP and gold rewards.",
        gt=0,
    )
    base_gem_drop_chance: float = Field(
        default=0.1,
        description="Probability of a gem dropping after a victory.",
        ge=0,
        le=1,
    )
    base_shadow_drop_chance: float = Field(
        default=0.05,
        description="Probability of a Shadow or Echo dropping after a victory.",
        ge=0,
        le=1,
    )
    shadow_qm_min: float = Field(
        default=0.5,
        description="Lower bound of the quality multiplier rolled for a Shadow.",
        ge=0,
    )
    shadow_qm_max: float = Field(
        default=1.0,
        description="Upper bound of the quality multiplier rolled for a Shadow.",
        ge=0,
    )
    echo_qm: float = Field(
        default=0.25,
        description="Fixed quality multiplier of an Echo.",
        ge=0,
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if self.shadow_qm_min > self.shadow_qm_max:
            raise ValueError(
                f"shadow_qm_min ({self.shadow_qm_min}) cannot exceed "
                f"shadow_qm_max ({self.shadow_qm_max})"
            )
