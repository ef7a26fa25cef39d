"""
Target selection heuristics.

Every picker keeps the first combatant seen when values tie, and only
random picks consume the random source.
"""

from typing import Sequence, TypeVar

from core.constants import Targeting
from core.dice import RandomSource, pick
from entities.monster import Monster
from entities.party import PartyMember

T = TypeVar("T", PartyMember, Monster)


def _hp(combatant: PartyMember | Monster) -> int:
    if isinstance(combatant, Monster):
        return combatant.hit_points
    return combatant.current_hp


def lowest_hp(combatants: Sequence[T]) -> T:
    """Returns the combatant with the fewest hit points, first one on ties."""
    assert combatants, "No combatant to target"
    chosen = combatants[0]
    for combatant in combatants[1:]:
        if _hp(combatant) < _hp(chosen):
            chosen = combatant
    return chosen


def highest_hp(combatants: Sequence[T]) -> T:
    """Returns the combatant with the most hit points, first one on ties."""
    assert combatants, "No combatant to target"
    chosen = combatants[0]
    for combatant in combatants[1:]:
        if _hp(combatant) > _hp(chosen):
            chosen = combatant
    return chosen


def select_target(targeting: Targeting, combatants: Sequence[T], dice: RandomSource) -> T:
    """
    Picks a single target following a targeting rule.

    Args:
        targeting (Targeting): The rule to follow, AREA is not a single target.
        combatants (Sequence[T]): The live candidates.
        dice (RandomSource): The source of randomness for random picks.

    Returns:
        T: The chosen target.

    """
    assert targeting != Targeting.AREA, "Area actions have no single target"
    if targeting == Targeting.LOWEST_HP:
        return lowest_hp(combatants)
    if targeting == Targeting.HIGHEST_HP:
        return highest_hp(combatants)
    return pick(dice, combatants)


def needs_healing(party: Sequence[PartyMember]) -> bool:
    """Tells whether any live member is below half of its maximum HP."""
    return any(member.is_below_half_hp() for member in party if member.is_alive())
