"""
Dice module for the encounter engine.

Every roll made by the engine goes through a single injected RandomSource,
so a fixed source reproduces a whole adventure.
"""

from random import Random
from typing import Protocol, Sequence

from typing_extensions import TypeVar

from core.constants import DAMAGE_DICE

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything able to roll an N-sided die."""

    def roll(self, sides: int) -> int:
        """Returns a uniformly distributed integer in [1, sides]."""
        ...


class SeededRandomSource:
    """RandomSource backed by random.Random, deterministic for a given seed."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = Random(seed)

    def roll(self, sides: int) -> int:
        """
        Rolls a die.

        Args:
            sides (int): The number of faces of the die.

        Returns:
            int: The rolled value, between 1 and sides.

        """
        assert sides > 0, "A die needs at least one side"
        return self._random.randint(1, sides)


def pick(dice: RandomSource, items: Sequence[T]) -> T:
    """
    Picks an element uniformly at random using the die.

    Args:
        dice (RandomSource): The source of randomness.
        items (Sequence[T]): The non-empty sequence to pick from.

    Returns:
        T: The picked element.

    """
    assert items, "Cannot pick from an empty sequence"
    return items[dice.roll(len(items)) - 1]


def parse_die(notation: str) -> int:
    """
    Converts a die notation such as 'd8' into its number of sides.

    Args:
        notation (str): The die notation.

    Raises:
        ValueError: If the notation is not one of the supported dice.

    Returns:
        int: The number of sides.

    """
    sides = DAMAGE_DICE.get(notation.strip().lower())
    if sides is None:
        raise ValueError(
            f"Unknown damage dice '{notation}', expected one of {', '.join(DAMAGE_DICE)}"
        )
    return sides
