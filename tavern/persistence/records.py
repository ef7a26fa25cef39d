"""
Stored records of characters, monsters and adventures.

Field aliases follow the JSON files ('class', 'hitPoints', 'damageDice',
...), while the attributes use the engine's names.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.constants import Challenge, CharacterClass, DamageType
from core.dice import parse_die
from core.errors import UnknownCharacterClassError
from entities.adventure import Adventure, Encounter
from entities.monster import Monster
from entities.party import PartyMember


class MonsterRecord(BaseModel):
    """A monster template as stored in monsters.json and adventures.json."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    challenge: Challenge
    experience: int = Field(ge=0)
    hit_points: int = Field(alias="hitPoints", ge=0)
    initiative: int
    damage_dice: str = Field(alias="damageDice")
    damage_type: DamageType = Field(alias="damageType")

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        parse_die(self.damage_dice)

    def to_monster(self) -> Monster:
        return Monster(
            name=self.name,
            challenge=self.challenge,
            experience=self.experience,
            hit_points=self.hit_points,
            initiative=self.initiative,
            damage_dice=self.damage_dice,
            damage_type=self.damage_type,
        )

    @classmethod
    def from_monster(cls, monster: Monster) -> "MonsterRecord":
        return cls(
            name=monster.name,
            challenge=monster.challenge,
            experience=monster.experience,
            hit_points=monster.hit_points,
            initiative=monster.base_initiative,
            damage_dice=monster.damage_dice,
            damage_type=monster.damage_type,
        )


class CharacterRecord(BaseModel):
    """A character as stored in characters.json."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    player: str
    xp: int = Field(ge=0)
    body: int
    mind: int
    spirit: int
    character_class: str = Field(alias="class")

    def to_member(self) -> PartyMember:
        """
        Builds the party member, leaving hit points to the adventure set-up.

        Raises:
            UnknownCharacterClassError: If the stored class is not known.

        """
        try:
            character_class = CharacterClass(self.character_class)
        except ValueError as e:
            raise UnknownCharacterClassError(self.character_class) from e
        return PartyMember(
            name=self.name,
            player=self.player,
            xp=self.xp,
            body=self.body,
            mind=self.mind,
            spirit=self.spirit,
            character_class=character_class,
        )

    @classmethod
    def from_member(cls, member: PartyMember) -> "CharacterRecord":
        return cls(
            name=member.name,
            player=member.player,
            xp=member.xp,
            body=member.body,
            mind=member.mind,
            spirit=member.spirit,
            character_class=member.character_class.value,
        )


class EncounterEntry(BaseModel):
    """One monster template of an encounter and how many copies it spawns."""

    monster: MonsterRecord
    value: int = Field(gt=0)


class AdventureRecord(BaseModel):
    """An adventure as stored in adventures.json."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    encounter_count: int = Field(alias="numberEncounters", ge=1)
    encounters: list[list[EncounterEntry]]

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if len(self.encounters) != self.encounter_count:
            raise ValueError(
                f"Adventure '{self.name}' declares {self.encounter_count} encounters "
                f"but stores {len(self.encounters)}"
            )
        for index, entries in enumerate(self.encounters):
            if not entries:
                raise ValueError(f"Encounter {index + 1} of '{self.name}' has no monsters")
            bosses = [e for e in entries if e.monster.challenge == Challenge.BOSS]
            if len(bosses) > 1 or any(e.value > 1 for e in bosses):
                raise ValueError(f"Encounter {index + 1} of '{self.name}' has more than one Boss")

    def to_adventure(self) -> Adventure:
        encounters = [
            Encounter({entry.monster.to_monster(): entry.value for entry in entries})
            for entries in self.encounters
        ]
        return Adventure(self.name, encounters, self.encounter_count)

    @classmethod
    def from_adventure(cls, adventure: Adventure) -> "AdventureRecord":
        return cls(
            name=adventure.name,
            encounter_count=adventure.encounter_count,
            encounters=[
                [
                    EncounterEntry(monster=MonsterRecord.from_monster(monster), value=count)
                    for monster, count in encounter
                ]
                for encounter in adventure.encounters
            ],
        )
