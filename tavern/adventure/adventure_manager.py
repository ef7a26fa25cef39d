"""
Adventure creation and selection rules.
"""

from collections.abc import Sequence

from core.config import EngineSettings
from core.errors import (
    AdventureNameAlreadyExistsError,
    BossAmountExceededError,
    BossesToAddExceededError,
    CharacterAlreadyInThePartyError,
    EmptyEncounterError,
    InsufficientCharactersAmountError,
    InvalidEncounterCountError,
    InvalidOptionError,
    InvalidPartySizeError,
)
from core.logging import log_info
from entities.adventure import Adventure, Encounter
from entities.monster import Monster
from entities.party import PartyMember
from persistence.repository import AdventureRepository


class AdventureManager:
    """Validates, stores and hands out adventures."""

    def __init__(
        self,
        repository: AdventureRepository,
        settings: EngineSettings | None = None,
    ) -> None:
        self.repository = repository
        self.settings = settings or EngineSettings()

    # ============================================================================
    # CREATION
    # ============================================================================

    def validate_name(self, name: str) -> str:
        if name in self.repository.names():
            raise AdventureNameAlreadyExistsError()
        return name

    def validate_encounter_count(self, count: int) -> int:
        if not self.settings.min_encounters <= count <= self.settings.max_encounters:
            raise InvalidEncounterCountError(
                self.settings.min_encounters, self.settings.max_encounters
            )
        return count

    @staticmethod
    def add_monster(encounter: Encounter, monster: Monster, count: int) -> None:
        """
        Adds copies of a monster to an encounter being planned.

        Raises:
            BossAmountExceededError: If the encounter already has a Boss.
            BossesToAddExceededError: If more than one Boss is added at once.

        """
        if monster.is_boss and encounter.has_boss:
            raise BossAmountExceededError()
        if monster.is_boss and count > 1:
            raise BossesToAddExceededError()
        encounter.add(monster, count)

    @staticmethod
    def check_not_empty(encounter: Encounter) -> None:
        if encounter.is_empty():
            raise EmptyEncounterError()

    def remove_monster(self, encounter: Encounter, monster: Monster) -> None:
        self.check_not_empty(encounter)
        encounter.remove(monster)

    def create_adventure(self, name: str, encounters: list[Encounter]) -> Adventure:
        """
        Validates and stores a new adventure.

        Returns:
            Adventure: The stored adventure.

        """
        self.validate_name(name)
        self.validate_encounter_count(len(encounters))
        for encounter in encounters:
            self.check_not_empty(encounter)
        adventure = Adventure(name, encounters)
        self.repository.save(adventure)
        log_info(
            "Adventure created",
            {"name": name, "encounters": adventure.encounter_count},
        )
        return adventure

    # ============================================================================
    # SELECTION
    # ============================================================================

    def check_minimum_characters(self, available: int) -> None:
        if available < self.settings.min_party_size:
            raise InsufficientCharactersAmountError(self.settings.min_party_size)

    def max_party_size(self, available: int) -> int:
        return min(self.settings.max_party_size, available)

    def check_party_size(self, size: int, available: int) -> int:
        maximum = self.max_party_size(available)
        if not self.settings.min_party_size <= size <= maximum:
            raise InvalidPartySizeError(self.settings.min_party_size, maximum)
        return size

    @staticmethod
    def check_character_to_add(selected: Sequence[int], index: int, available: int) -> int:
        """
        Checks the index of a character chosen for the party.

        Raises:
            InvalidOptionError: If the index is out of range.
            CharacterAlreadyInThePartyError: If it was already chosen.

        """
        if not 0 <= index < available:
            raise InvalidOptionError()
        if index in selected:
            raise CharacterAlreadyInThePartyError()
        return index

    def adventure_names(self) -> list[str]:
        return self.repository.names()

    def select_adventure(self, index: int) -> Adventure:
        names = self.adventure_names()
        if not 0 <= index < len(names):
            raise InvalidOptionError()
        return self.repository.get(index)

    def set_up_adventure(self, index: int, party: list[PartyMember]) -> Adventure:
        """Attaches the party to the selected adventure."""
        adventure = self.select_adventure(index)
        self.check_party_size(len(party), len(party))
        adventure.party = party
        return adventure
