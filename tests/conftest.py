"""
Shared fixtures: scripted dice and ready-made combatants.
"""

import pytest
from core.constants import Challenge, CharacterClass, DamageType
from entities.monster import Monster
from entities.party import PartyMember


class ScriptedDice:
    """RandomSource returning a fixed sequence of rolls."""

    def __init__(self, rolls: list[int]) -> None:
        self.rolls = list(rolls)
        self.requested: list[int] = []

    def roll(self, sides: int) -> int:
        assert self.rolls, f"Unexpected d{sides} roll, script exhausted"
        value = self.rolls.pop(0)
        assert 1 <= value <= sides, f"Scripted {value} does not fit a d{sides}"
        self.requested.append(sides)
        return value

    def extend(self, rolls: list[int]) -> None:
        self.rolls.extend(rolls)

    @property
    def exhausted(self) -> bool:
        return not self.rolls


@pytest.fixture
def scripted():
    """Factory building scripted dice from a list of rolls."""
    return ScriptedDice


def make_member(
    name: str,
    character_class: CharacterClass = CharacterClass.ADVENTURER,
    xp: int = 0,
    body: int = 1,
    mind: int = 1,
    spirit: int = 1,
    player: str = "Tester",
) -> PartyMember:
    member = PartyMember(
        name=name,
        player=player,
        xp=xp,
        body=body,
        mind=mind,
        spirit=spirit,
        character_class=character_class,
    )
    member.set_up_hp_for_adventure()
    return member


def make_monster(
    name: str,
    challenge: Challenge = Challenge.MINION,
    hit_points: int = 10,
    experience: int = 30,
    initiative: int = 0,
    damage_dice: str = "d6",
    damage_type: DamageType = DamageType.PHYSICAL,
) -> Monster:
    return Monster(
        name=name,
        challenge=challenge,
        experience=experience,
        hit_points=hit_points,
        initiative=initiative,
        damage_dice=damage_dice,
        damage_type=damage_type,
    )


@pytest.fixture
def member_factory():
    return make_member


@pytest.fixture
def monster_factory():
    return make_monster
