"""
Constants and enumerations for the simulator.

Defines the fixed formula constants of the balance model and the closed
enumerations used for archetypes, primary stats, item kinds, gear stat
routing, special bonuses and combat outcomes.
"""

from enum import Enum

# Hard cap on simulated turns, protects against balance configurations where
# neither side can bring the other to zero HP.
MAX_COMBAT_TURNS = 100

# Hit points formula: BASE_HP + VIT * HP_PER_VIT.
BASE_HP = 100
HP_PER_VIT = 10

# Offensive gear scaling per point of the scaling stat.
GEAR_SCALING_PER_STAT = 0.0055
# Armor scaling per point of VIT.
AC_SCALING_PER_VIT = 0.0075

# Hit and critical chance formulas (percent).
BASE_HIT_CHANCE = 90.0
HIT_CHANCE_PER_STAT = 0.05
BASE_CRIT_CHANCE = 5.0
CRIT_CHANCE_PER_STAT = 0.01


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class PrimaryStat(NiceEnum):
    """Defines the base attributes a race can use as its primary stat."""

    DEX = "DEX"
    WIS = "WIS"
    VIT = "VIT"

    @property
    def display_name(self) -> str:
        return self.name


class Archetype(NiceEnum):
    """Defines how a race turns gear into offensive power."""

    TRUE_FIGHTER = "True Fighter"
    TRUE_CASTER = "True Caster"
    HYBRID = "Hybrid"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def color(self) -> str:
        """Returns the color string associated with this archetype."""
        return {
            Archetype.TRUE_FIGHTER: "bold red",
            Archetype.TRUE_CASTER: "bold blue",
            Archetype.HYBRID: "bold magenta",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies archetype color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class ItemType(NiceEnum):
    """Defines the variant kind of an item instance."""

    DROPPER = "Dropper"
    SHADOW = "Shadow"
    ECHO = "Echo"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def color(self) -> str:
        """Returns the color string associated with this item type."""
        return {
            ItemType.DROPPER: "bold white",
            ItemType.SHADOW: "bold magenta",
            ItemType.ECHO: "bold cyan",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies item type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class GearStat(NiceEnum):
    """Defines which combat coefficient an equipment slot contributes to."""

    AC = "AC"
    WC = "WC"
    SC = "SC"


class BonusStat(NiceEnum):
    """Defines the special bonuses a slot modifier can grant."""

    HIT_CHANCE = "Hit Chance"
    WC_SC = "WC/SC"


class CombatStatus(NiceEnum):
    """Defines the status of a combat turn or of a whole simulation."""

    CONTINUE = "CONTINUE"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"
    STALEMATE = "STALEMATE"

    @property
    def is_terminal(self) -> bool:
        """Whether the status ends the combat."""
        return self != CombatStatus.CONTINUE

    @property
    def color(self) -> str:
        """Returns the color string associated with this status."""
        return {
            CombatStatus.VICTORY: "bold green",
            CombatStatus.DEFEAT: "bold red",
            CombatStatus.STALEMATE: "bold yellow",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies status color formatting to a message."""
        return f"[{self.color}]{message}[/]"

