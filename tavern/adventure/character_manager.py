"""
Character creation and management rules.
"""

from core.constants import (
    D6,
    MAX_LEVEL,
    MIN_LEVEL,
    STARTING_CLASSES,
    CharacterClass,
)
from core.dice import RandomSource
from core.errors import (
    CharacterNameAlreadyExistsError,
    InvalidCharacterClassError,
    InvalidCharacterLevelError,
    InvalidCharacterNameError,
    NoCharactersFoundError,
)
from core.logging import log_info
from entities.party import PartyMember
from entities.progression import class_for_level, initial_xp_for_level
from persistence.repository import CharacterRepository


def is_valid_name(name: str) -> bool:
    """A name starts with a letter and holds only letters and spaces."""
    if not name or not name[0].isalpha():
        return False
    return all(char.isalpha() or char == " " for char in name[1:])


def format_name(name: str) -> str:
    """Capitalizes every word of a name: 'jOHN doe' becomes 'John Doe'."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split(" "))


def stat_from_roll(total: int) -> int:
    """
    Converts the sum of two d6 into a stat value.

    Args:
        total (int): The sum of the two dice.

    Returns:
        int: The stat, between -2 and 3.

    """
    if total == 2:
        return -1
    if 3 <= total <= 5:
        return 0
    if 6 <= total <= 9:
        return 1
    if 10 <= total <= 11:
        return 2
    if total == 12:
        return 3
    return -2


class CharacterManager:
    """Creates, searches and prepares characters."""

    def __init__(self, repository: CharacterRepository, dice: RandomSource) -> None:
        self.repository = repository
        self.dice = dice

    def validate_name(self, name: str) -> str:
        """
        Checks a new character name and returns it formatted.

        Raises:
            InvalidCharacterNameError: If the name has digits or symbols.
            CharacterNameAlreadyExistsError: If the name is already used.

        """
        if not is_valid_name(name):
            raise InvalidCharacterNameError()
        formatted = format_name(name)
        existing = self.repository.names()
        if name in existing or formatted in existing:
            raise CharacterNameAlreadyExistsError()
        return formatted

    @staticmethod
    def validate_level(level: int) -> int:
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            raise InvalidCharacterLevelError()
        return level

    def roll_stat(self) -> tuple[int, int, int]:
        """
        Rolls two d6 for a stat.

        Returns:
            tuple[int, int, int]: Both dice and the resulting stat.

        """
        first = self.dice.roll(D6)
        second = self.dice.roll(D6)
        return first, second, stat_from_roll(first + second)

    @staticmethod
    def starting_class(class_name: str, level: int) -> CharacterClass:
        """
        Resolves the class a new character gets at its level.

        Args:
            class_name (str): Adventurer, Cleric or Mage, in any case.
            level (int): The starting level.

        Raises:
            InvalidCharacterClassError: If the class cannot be chosen.

        Returns:
            CharacterClass: The class matching the line and level.

        """
        for character_class in STARTING_CLASSES:
            if character_class.value.lower() == class_name.strip().lower():
                return class_for_level(character_class, level)
        raise InvalidCharacterClassError()

    def create_character(
        self,
        name: str,
        player: str,
        level: int,
        body: int,
        mind: int,
        spirit: int,
        class_name: str,
    ) -> PartyMember:
        """
        Validates and stores a new character.

        Returns:
            PartyMember: The stored character.

        """
        name = self.validate_name(name)
        self.validate_level(level)
        member = PartyMember(
            name=name,
            player=player,
            xp=initial_xp_for_level(level),
            body=body,
            mind=mind,
            spirit=spirit,
            character_class=self.starting_class(class_name, level),
        )
        self.repository.save(member)
        log_info(
            "Character created",
            {"name": member.name, "class": member.character_class.value, "level": level},
        )
        return member

    def search(self, player: str = "") -> list[PartyMember]:
        """
        Lists characters, all of them or those of a player, each in the class
        matching its level.

        Raises:
            NoCharactersFoundError: If nothing matches.

        """
        if player:
            members = self.repository.by_player(player)
            if not members:
                raise NoCharactersFoundError(f"There are no characters for {player}.")
        else:
            members = self.repository.read_all()
            if not members:
                raise NoCharactersFoundError("There are no characters in the system.")
        return [member.evolve() for member in members]

    def delete(self, name: str) -> bool:
        return self.repository.delete(name)

    @staticmethod
    def set_up_party(members: list[PartyMember]) -> list[PartyMember]:
        """Evolves every member to its level's class and restores full HP."""
        party = [member.evolve() for member in members]
        for member in party:
            member.set_up_hp_for_adventure()
            member.shield = 0
            member.initiative = 0
        return party

    def save_party(self, party: list[PartyMember]) -> None:
        self.repository.save_all(party)
