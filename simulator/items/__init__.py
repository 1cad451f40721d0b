"""
Items system module for the Geminus balance simulator.

This module contains item templates and instances, gems, the progression
tables that turn equipment into combat stats, and instance id generation.
"""

from .ids import InstanceIdGenerator
from .item import BaseItemTemplate, Gem, GemTemplate, ItemInstance
from .progression import (
    GemGradeTier,
    ProgressionTables,
    SlotModifier,
    SpecialBonus,
    TierEntry,
)

__all__ = [
    # Import from ids.py
    "InstanceIdGenerator",
    # Import from item.py
    "BaseItemTemplate",
    "Gem",
    "GemTemplate",
    "ItemInstance",
    # Import from progression.py
    "GemGradeTier",
    "ProgressionTables",
    "SlotModifier",
    "SpecialBonus",
    "TierEntry",
]
