"""
Core system module for the Geminus balance simulator.

This module contains the fundamental components shared by the engine: formula
constants and enumerations, balance constants, exceptions and console
utilities. Content loading lives in ``core.content`` and is imported directly.
"""

from .balance import BalanceConstants
from .constants import (
    MAX_COMBAT_TURNS,
    Archetype,
    BonusStat,
    CombatStatus,
    GearStat,
    ItemType,
    PrimaryStat,
)
from .errors import InvalidRaceError, MissingContentError
from .utils import cprint, crule, make_bar

__all__ = [
    # Import from balance.py
    "BalanceConstants",
    # Import from constants.py
    "MAX_COMBAT_TURNS",
    "Archetype",
    "BonusStat",
    "CombatStatus",
    "GearStat",
    "ItemType",
    "PrimaryStat",
    # Import from errors.py
    "InvalidRaceError",
    "MissingContentError",
    # Import from utils.py
    "cprint",
    "crule",
    "make_bar",
]
