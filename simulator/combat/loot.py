"""
Loot module for the simulator.

Hands out the rewards of a won fight: gold and experience always, and with
some luck a gem or a Shadow/Echo duplicate of one of the equipped items.
"""

import math
import random

from catchery import log_critical, log_debug
from character.main import Player
from core.constants import ItemType
from core.content import ContentTables
from core.errors import MissingContentError
from items.ids import InstanceIdGenerator
from items.item import Gem, ItemInstance

from combat.monster import Monster

# Shared default generator, so ids stay unique across calls that do not
# provide their own.
_DEFAULT_ID_GENERATOR = InstanceIdGenerator()


def grant_rewards(player: Player, monster: Monster) -> str:
    """
    Adds the monster's gold and experience to the player.

    Args:
        player (Player): The player to reward.
        monster (Monster): The defeated monster.

    Returns:
        str: The reward message, with floored values.

    """
    player.gold += monster.gold
    player.xp += monster.xp
    return (
        f"You earned [bold green]{math.floor(monster.xp)} XP[/] "
        f"and [bold yellow]{math.floor(monster.gold)} Gold[/]!"
    )


def roll_gem(
    player: Player,
    zone_id: str,
    content: ContentTables,
    rng: random.Random,
) -> str:
    """
    Gives the player a random gem from the standard set, graded by zone.

    Args:
        player (Player): The player to reward.
        zone_id (str): The zone the fight took place in.
        content (ContentTables): The content tables.
        rng (random.Random): The random source.

    Returns:
        str: The loot message.

    Raises:
        MissingContentError: If the standard gem set is empty.

    """
    templates = content.standard_gems()
    if not templates:
        log_critical(
            "Gem drop rolled but the standard gem set is empty.",
            {"zone_id": zone_id},
        )
        raise MissingContentError("gems", "standard gem set")

    grade = content.progression.get_gem_grade(zone_id)
    template = rng.choice(templates)
    player.gems.append(Gem(id=template.id, grade=grade))
    return f"You found a new gem: [bold cyan]{template.name} (Grade {grade})[/]!"


def roll_shadow(
    player: Player,
    content: ContentTables,
    rng: random.Random,
    id_generator: InstanceIdGenerator,
) -> str | None:
    """
    Duplicates one of the equipped Droppers. The first duplicate of a base
    item is a Shadow with a random quality multiplier; once a Shadow is owned,
    further duplicates are Echoes with a fixed one.

    Args:
        player (Player): The player to reward.
        content (ContentTables): The content tables.
        rng (random.Random): The random source.
        id_generator (InstanceIdGenerator): The instance id source.

    Returns:
        str | None: The loot message, or None if nothing is equipped.

    Raises:
        MissingContentError: If the chosen item's base template is missing.

    """
    droppers = [
        item for item in player.equipped_items() if item.item_type == ItemType.DROPPER
    ]
    if not droppers:
        log_debug(
            f"{player.name} has no equipped Dropper, no Shadow can drop.",
            {"player": player.name},
        )
        return None

    source = rng.choice(droppers)
    base_item = content.require_base_item(source.base_item_id)

    balance = content.balance
    if player.owns_variant(source.base_item_id, ItemType.SHADOW):
        new_item = ItemInstance(
            instance_id=id_generator.next_id("echo"),
            base_item_id=source.base_item_id,
            tier=source.tier,
            item_type=ItemType.ECHO,
            quality_multiplier=balance.echo_qm,
        )
        message = f"A faint [bold cyan]Echo[/] of your {base_item.name} appears!"
    else:
        new_item = ItemInstance(
            instance_id=id_generator.next_id("shadow"),
            base_item_id=source.base_item_id,
            tier=source.tier,
            item_type=ItemType.SHADOW,
            quality_multiplier=rng.uniform(balance.shadow_qm_min, balance.shadow_qm_max),
        )
        message = (
            f"The shadow of your [bold magenta]{base_item.name}[/] solidifies! "
            f"(QM: {new_item.quality_multiplier:.2f})"
        )
    player.inventory.append(new_item)
    return message


def generate_loot(
    player: Player,
    monster: Monster,
    zone_id: str,
    content: ContentTables,
    rng: random.Random | None = None,
    id_generator: InstanceIdGenerator | None = None,
) -> list[str]:
    """
    Applies the rewards of a won fight to the canonical player.

    Args:
        player (Player):
            The player to reward, modified in place.
        monster (Monster):
            The defeated monster, as fought (i.e., already scaled).
        zone_id (str):
            The zone the fight took place in.
        content (ContentTables):
            The content tables.
        rng (random.Random | None):
            The random source. An unseeded generator is used if not
            provided.
        id_generator (InstanceIdGenerator | None):
            The instance id source for new items.

    Returns:
        list[str]:
            The loot messages, in the order they happened.

    """
    rng = rng or random.Random()
    id_generator = id_generator or _DEFAULT_ID_GENERATOR
    balance = content.balance

    messages = [grant_rewards(player, monster)]

    if rng.random() < balance.base_gem_drop_chance:
        messages.append(roll_gem(player, zone_id, content, rng))

    if rng.random() < balance.base_shadow_drop_chance:
        message = roll_shadow(player, content, rng, id_generator)
        if message:
            messages.append(message)

    return messages
