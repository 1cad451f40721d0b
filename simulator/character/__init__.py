"""
Character system module for the Geminus balance simulator.

This module holds the player entity, race definitions, the derived stat
calculation and player serialization.
"""

from .character_race import RaceDefinition
from .main import DerivedStats, Player

__all__ = [
    # Import from character_race.py
    "RaceDefinition",
    # Import from main.py
    "DerivedStats",
    "Player",
]
