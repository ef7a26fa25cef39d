"""
Initiative scheduler.

Each side is sorted on its own, then both are merged with party members
winning ties. The encounter engine replays the same rule turn by turn,
since both lists shrink during combat.
"""

from typing import Sequence, TypeVar

from core.dice import RandomSource
from core.logging import log_debug
from entities.monster import Monster
from entities.party import PartyMember

T = TypeVar("T", PartyMember, Monster)


def sort_by_initiative(combatants: Sequence[T]) -> list[T]:
    """
    Sorts one side by descending initiative.

    Args:
        combatants (Sequence[T]): The combatants of one side.

    Returns:
        list[T]: A new list, ties kept in their original order.

    """
    return sorted(combatants, key=lambda combatant: combatant.initiative, reverse=True)


def character_goes_first(character: PartyMember, monster: Monster) -> bool:
    """Party members win initiative ties."""
    return character.initiative >= monster.initiative


def merge_turn_order(
    characters: Sequence[PartyMember],
    monsters: Sequence[Monster],
) -> list[PartyMember | Monster]:
    """
    Interleaves two sides already sorted by initiative.

    Args:
        characters (Sequence[PartyMember]): The sorted party members.
        monsters (Sequence[Monster]): The sorted monsters.

    Returns:
        list[PartyMember | Monster]: The combined turn order.

    """
    order: list[PartyMember | Monster] = []
    i = j = 0
    while i < len(characters) and j < len(monsters):
        if character_goes_first(characters[i], monsters[j]):
            order.append(characters[i])
            i += 1
        else:
            order.append(monsters[j])
            j += 1
    order.extend(characters[i:])
    order.extend(monsters[j:])
    return order


class InitiativeOrder:
    """The sorted sides of one encounter and their merged turn order."""

    def __init__(self, characters: list[PartyMember], monsters: list[Monster]) -> None:
        self.characters = characters
        self.monsters = monsters
        self.order = merge_turn_order(characters, monsters)

    def __iter__(self):
        return iter(self.order)

    def __len__(self) -> int:
        return len(self.order)


def roll_initiatives(
    party: Sequence[PartyMember],
    monsters: Sequence[Monster],
    dice: RandomSource,
) -> InitiativeOrder:
    """
    Rolls initiative for every conscious member and every monster.

    Party members roll first, in party order, then monsters, in spawn order.

    Args:
        party (Sequence[PartyMember]): The whole party, unconscious included.
        monsters (Sequence[Monster]): The spawned monsters.
        dice (RandomSource): The source of randomness.

    Returns:
        InitiativeOrder: The sorted sides and the merged order.

    """
    conscious = [member for member in party if not member.is_unconscious()]
    for member in conscious:
        member.roll_initiative(dice)
    for monster in monsters:
        monster.roll_initiative(dice)

    result = InitiativeOrder(sort_by_initiative(conscious), sort_by_initiative(monsters))
    log_debug(
        "Initiative rolled",
        {"order": ", ".join(f"{c.name}:{c.initiative}" for c in result.order)},
    )
    return result
