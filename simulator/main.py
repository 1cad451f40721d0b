"""
Main entry point for the Geminus balance simulator.

This script loads the content tables, the player and the bestiary from the
data folder, then previews a fight against every monster at a few gear tiers
and plays a real encounter in the starting zone. It demonstrates:
- Deriving combat stats from base stats, race and equipment
- Scaling monsters to the gear tier of a zone
- Previewing fights on copies, leaving the player untouched
- Rolling loot after a real victory
"""

import logging
import random
from pathlib import Path

from character.character_serialization import load_player, player_to_dict
from character.character_stats import calculate_derived_stats
from combat.encounter import run_encounter
from combat.monster import load_monsters
from combat.scaling import scale_monster
from combat.simulator import simulate_combat
from core.content import load_content
from core.logging import get_logger, setup_logging
from core.sheets import (
    print_combat_result,
    print_loot,
    print_monster_sheet,
    print_player_sheet,
)
from core.utils import cprint, crule

# Get the path to the data folder.
data_dir = Path(__file__).with_suffix("").parent / "../data"

# Zone the demo encounter takes place in, and its gear tier.
STARTING_ZONE = "Z01"
PREVIEW_TIERS = (1, 2, 3)

logger = get_logger("geminus")


def main(seed: int | None = None) -> None:
    """
    Runs the demo.

    Args:
        seed (int | None): Seed for the loot random source.

    """
    setup_logging(logging.INFO)

    crule("Geminus Balance Simulator", style="bold green")

    cprint("Loading content...", style="bold green")
    content = load_content(data_dir)

    cprint("Loading bestiary...", style="bold green")
    monsters = load_monsters(data_dir / "monsters.json")

    cprint("Loading player...", style="bold green")
    player = load_player(data_dir / "player.json", content)
    if player is None:
        logger.error("Player could not be loaded from %s", data_dir / "player.json")
        return

    calculate_derived_stats(player, content)

    crule("Player", style="bold blue", characters="-")
    print_player_sheet(player, content)

    # =========================================================================

    crule(":crossed_swords:  Previews", style="bold green")
    for monster in monsters.values():
        for tier in PREVIEW_TIERS:
            crule(f"{monster.name} (tier {tier})", style="bold red", characters="-")
            print_monster_sheet(scale_monster(monster, tier, content.balance))
            result = simulate_combat(player, monster, content, target_tier=tier)
            print_combat_result(result, show_log=False)

    # =========================================================================

    crule(":crossed_swords:  Encounter", style="bold green")
    rng = random.Random(seed)
    first_monster = next(iter(monsters.values()))
    report = run_encounter(
        player,
        first_monster,
        STARTING_ZONE,
        content,
        target_tier=1,
        rng=rng,
    )
    print_combat_result(report.result)
    if report.won:
        print_loot(report.loot)

    crule("Player After Encounter", style="bold blue", characters="-")
    print_player_sheet(player, content)
    logger.debug("Player document: %s", player_to_dict(player))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        cprint("")
        crule(":crossed_swords:  Simulation Interrupted", style="bold red")
