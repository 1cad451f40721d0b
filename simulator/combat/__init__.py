"""
Combat system module for the Geminus balance simulator.

This module handles monsters and their tier scaling, the damage formulas,
single-turn resolution, whole-fight simulation and post-combat loot.
"""

from .encounter import EncounterReport, run_encounter
from .loot import generate_loot
from .monster import Monster, load_monsters
from .resolver import TurnResult, resolve_turn
from .scaling import scale_monster
from .simulator import CombatResult, simulate_combat

__all__ = [
    # Import from encounter.py
    "EncounterReport",
    "run_encounter",
    # Import from loot.py
    "generate_loot",
    # Import from monster.py
    "Monster",
    "load_monsters",
    # Import from resolver.py
    "TurnResult",
    "resolve_turn",
    # Import from scaling.py
    "scale_monster",
    # Import from simulator.py
    "CombatResult",
    "simulate_combat",
]
