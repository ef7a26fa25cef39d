"""
Tests for the experience ladder and class evolution.
"""

import pytest
from core.constants import CharacterClass
from entities.progression import (
    can_evolve,
    class_for_level,
    initial_xp_for_level,
    level_for_xp,
)


@pytest.mark.parametrize(
    "xp, level",
    [(0, 1), (99, 1), (100, 2), (250, 3), (899, 9), (900, 10), (999, 10), (5000, 10)],
)
def test_level_for_xp(xp, level):
    assert level_for_xp(xp) == level


def test_initial_xp_for_level():
    assert initial_xp_for_level(1) == 0
    assert initial_xp_for_level(4) == 300
    assert level_for_xp(initial_xp_for_level(7)) == 7


@pytest.mark.parametrize(
    "character_class, level, expected",
    [
        (CharacterClass.ADVENTURER, 1, CharacterClass.ADVENTURER),
        (CharacterClass.ADVENTURER, 3, CharacterClass.ADVENTURER),
        (CharacterClass.ADVENTURER, 4, CharacterClass.WARRIOR),
        (CharacterClass.WARRIOR, 7, CharacterClass.WARRIOR),
        (CharacterClass.WARRIOR, 8, CharacterClass.CHAMPION),
        (CharacterClass.ADVENTURER, 10, CharacterClass.CHAMPION),
        (CharacterClass.CLERIC, 4, CharacterClass.CLERIC),
        (CharacterClass.CLERIC, 5, CharacterClass.PALADIN),
        (CharacterClass.PALADIN, 2, CharacterClass.CLERIC),
        (CharacterClass.MAGE, 1, CharacterClass.MAGE),
        (CharacterClass.MAGE, 10, CharacterClass.MAGE),
    ],
)
def test_class_for_level(character_class, level, expected):
    assert class_for_level(character_class, level) == expected


def test_can_evolve():
    assert not can_evolve(CharacterClass.ADVENTURER, 3)
    assert can_evolve(CharacterClass.ADVENTURER, 4)
    assert can_evolve(CharacterClass.CLERIC, 5)
    assert not can_evolve(CharacterClass.PALADIN, 5)
    assert not can_evolve(CharacterClass.MAGE, 9)


def test_levels_out_of_range_are_rejected():
    with pytest.raises(AssertionError):
        class_for_level(CharacterClass.MAGE, 0)
    with pytest.raises(AssertionError):
        class_for_level(CharacterClass.MAGE, 11)
