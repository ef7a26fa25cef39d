"""
Progression ladder: experience to level, and level to class.

Each class belongs to a line (body, spirit or mind). Within a line the
class a member should have depends only on its level, so evolving is
simply moving to the class the line assigns to the new level.
"""

from core.constants import MAX_LEVEL, MIN_LEVEL, XP_PER_LEVEL, CharacterClass

# Each line lists (first level, last level, class) ranges covering 1..10.
LADDERS: tuple[tuple[tuple[int, int, CharacterClass], ...], ...] = (
    (
        (1, 3, CharacterClass.ADVENTURER),
        (4, 7, CharacterClass.WARRIOR),
        (8, 10, CharacterClass.CHAMPION),
    ),
    (
        (1, 4, CharacterClass.CLERIC),
        (5, 10, CharacterClass.PALADIN),
    ),
    (
        (1, 10, CharacterClass.MAGE),
    ),
)


def level_for_xp(xp: int) -> int:
    """
    Computes the level reached with the given experience.

    Args:
        xp (int): The accumulated experience, never negative.

    Returns:
        int: The level, between 1 and 10.

    """
    assert xp >= 0, "Experience cannot be negative"
    return min(MAX_LEVEL, xp // XP_PER_LEVEL + 1)


def initial_xp_for_level(level: int) -> int:
    """Experience a freshly created character of the given level starts with."""
    return level * XP_PER_LEVEL - XP_PER_LEVEL


def _ladder_of(character_class: CharacterClass) -> tuple[tuple[int, int, CharacterClass], ...]:
    for ladder in LADDERS:
        if any(rung_class == character_class for _, _, rung_class in ladder):
            return ladder
    raise AssertionError(f"Class {character_class} is on no ladder")


def class_for_level(character_class: CharacterClass, level: int) -> CharacterClass:
    """
    Finds the class of the same line matching the given level.

    Args:
        character_class (CharacterClass): Any class of the line.
        level (int): The level to match.

    Returns:
        CharacterClass: The class of that line for the level.

    """
    assert MIN_LEVEL <= level <= MAX_LEVEL, f"Level {level} is out of range"
    for first, last, rung_class in _ladder_of(character_class):
        if first <= level <= last:
            return rung_class
    raise AssertionError(f"No rung for level {level}")


def can_evolve(character_class: CharacterClass, level: int) -> bool:
    """
    Tells whether a member of the given class and level should change class.

    Args:
        character_class (CharacterClass): The current class.
        level (int): The current level.

    Returns:
        bool: True if the level falls outside the range of the class.

    """
    return class_for_level(character_class, level) != character_class
