"""
Module for printing players, monsters and combat results in a formatted way.
"""

from character.main import Player
from combat.monster import Monster
from combat.simulator import CombatResult
from rich.padding import Padding
from rich.table import Table

from core.constants import CombatStatus
from core.content import ContentTables
from core.utils import cprint, make_bar


def print_player_sheet(player: Player, content: ContentTables) -> None:
    """
    Prints the details of a player in a formatted way.

    Args:
        player (Player): The player to display.
        content (ContentTables): The content tables, used to resolve names.

    """
    race = content.get_race(player.race)
    race_str = race.archetype.colorize(race.race_name) if race else f"[red]{player.race}?[/]"
    cprint(f"👤 [bold blue]{player.name}[/], {race_str}")

    stats = ", ".join(f"{name}: {value}" for name, value in player.base_stats.items())
    cprint(f"  {stats}")
    cprint(f"  Gold: [yellow]{player.gold:.0f}[/], XP: [green]{player.xp:.0f}[/]")

    derived = player.derived_stats
    if derived is not None:
        hp = player.hp if player.hp is not None else derived.max_hp
        cprint(
            f"  HP: {make_bar(hp, derived.max_hp, color='green')} "
            f"[green]{hp:.0f}/{derived.max_hp:.0f}[/]"
        )
        cprint(
            f"  AC: [yellow]{derived.ac:.2f}[/], WC: [red]{derived.wc:.2f}[/], "
            f"SC: [blue]{derived.sc:.2f}[/], Hit: {derived.hit_chance:.2f}%, "
            f"Crit: {derived.crit_chance:.2f}%"
        )

    if player.equipment:
        table = Table(title="Equipment", show_header=True, header_style="bold")
        table.add_column("Slot")
        table.add_column("Item")
        table.add_column("Tier", justify="right")
        for slot, instance_id in player.equipment.items():
            item = player.find_item(instance_id) if instance_id else None
            if item is None:
                table.add_row(slot, "[dim]-[/]", "")
                continue
            base_item = content.get_base_item(item.base_item_id)
            name = base_item.name if base_item else item.base_item_id
            table.add_row(slot, item.item_type.colorize(name), str(item.tier))
        cprint(Padding(table, (0, 2)))

    if player.gems:
        gems = ", ".join(
            f"{content.gems[gem.id].name if gem.id in content.gems else gem.id} (G{gem.grade})"
            for gem in player.gems
        )
        cprint(f"  Gems: [cyan]{gems}[/]")


def print_monster_sheet(monster: Monster, padding: int = 2) -> None:
    """
    Prints the details of a monster in a formatted way.

    Args:
        monster (Monster): The monster to display.
        padding (int): Left padding for the output. Defaults to 2.

    """
    sheet = (
        f"👹 [bold red]{monster.name}[/], HP: [green]{monster.hp:.0f}[/], "
        f"ATK: [red]{monster.atk:.1f}[/], DEF: [yellow]{monster.defense:.1f}[/], "
        f"XP: {monster.xp:.0f}, Gold: {monster.gold:.0f}"
    )
    cprint(Padding(sheet, (0, padding)))


def print_combat_result(result: CombatResult, show_log: bool = True) -> None:
    """
    Prints the outcome of a simulated fight, optionally with its log.

    Args:
        result (CombatResult): The result to display.
        show_log (bool): Whether to print every log line.

    """
    if show_log:
        for line in result.log:
            cprint(Padding(line, (0, 2)), markup=False)
    cprint(
        f"Outcome: {result.outcome.colored_name} after {result.turns} turns "
        f"(player HP {result.player.hp or 0:.2f}, "
        f"monster HP {result.monster.current_hp or 0:.2f})"
    )
    if result.outcome == CombatStatus.STALEMATE:
        cprint("[dim]Neither side can finish the other, check the balance table.[/]")


def print_loot(messages: list[str]) -> None:
    """
    Prints loot messages.

    Args:
        messages (list[str]): The messages produced by the loot generator.

    """
    for message in messages:
        cprint(Padding(f"💰 {message}", (0, 2)))
