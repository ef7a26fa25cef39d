"""
Adventure orchestrator.

Plays the encounters of an adventure one after the other with the same
party, stopping as soon as the party is wiped out. Only a completed
adventure hands the party over to be saved.
"""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from core.config import EngineSettings
from core.constants import EncounterResult
from core.dice import RandomSource
from core.logging import log_info
from entities.adventure import Adventure
from entities.party import PartyMember

from combat import narration
from combat.encounter_engine import EncounterEngine


class AdventureReport(BaseModel):
    """What happened during an adventure."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    adventure: str
    completed: bool
    encounters_won: int = Field(ge=0)
    party: list[PartyMember]
    events: list[str]


class AdventureOrchestrator:
    """Sequences the encounters of an adventure."""

    def __init__(
        self,
        dice: RandomSource,
        settings: EngineSettings | None = None,
        on_event: Callable[[str], None] | None = None,
        save_party: Callable[[list[PartyMember]], None] | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            dice (RandomSource): The source of randomness shared by every encounter.
            settings (EngineSettings | None): Rule bounds, defaults when None.
            on_event (Callable[[str], None] | None): Called with every narration line.
            save_party (Callable[[list[PartyMember]], None] | None):
                Called with the final party once the adventure is completed.

        """
        self.dice = dice
        self.settings = settings or EngineSettings()
        self.on_event = on_event
        self.save_party = save_party
        self.events: list[str] = []

    def _emit(self, *lines: str) -> None:
        for line in lines:
            self.events.append(line)
            if self.on_event is not None:
                self.on_event(line)

    def play(self, adventure: Adventure, party: list[PartyMember]) -> AdventureReport:
        """
        Plays a whole adventure.

        Args:
            adventure (Adventure): The adventure to play.
            party (list[PartyMember]): The party, already evolved. Every member starts
                at full HP with no shield.

        Returns:
            AdventureReport: Whether the party completed the adventure, and
            the party in its final state.

        """
        assert (
            self.settings.min_party_size <= len(party) <= self.settings.max_party_size
        ), f"A party needs between {self.settings.min_party_size} and {self.settings.max_party_size} members"
        assert len({member.name for member in party}) == len(party), "Duplicate party member"
        assert all(not member.can_evolve() for member in party), "Party must be evolved first"
        for member in party:
            member.set_up_hp_for_adventure()
            member.shield = 0
            member.initiative = 0

        self.events = []
        adventure.party = party
        self._emit(narration.adventure_start(adventure.name), "")
        log_info("Adventure started", {"adventure": adventure.name, "party": len(party)})

        won = 0
        for number, encounter in enumerate(adventure.encounters, start=1):
            self._emit(*narration.encounter_start(number, encounter), "")
            engine = EncounterEngine(
                adventure.party,
                encounter,
                self.dice,
                self.settings,
                on_event=self._emit,
            )
            engine.prepare()
            result = engine.fight()
            if result == EncounterResult.PARTY_DEFEATED:
                self._emit("", narration.PARTY_WIPED)
                log_info(
                    "Adventure aborted",
                    {"adventure": adventure.name, "encounter": number},
                )
                return AdventureReport(
                    adventure=adventure.name,
                    completed=False,
                    encounters_won=won,
                    party=adventure.party,
                    events=self.events,
                )
            engine.short_rest()
            won += 1

        if self.save_party is not None:
            self.save_party(adventure.party)
        self._emit(narration.adventure_completed(adventure.name))
        log_info("Adventure completed", {"adventure": adventure.name})
        return AdventureReport(
            adventure=adventure.name,
            completed=True,
            encounters_won=won,
            party=adventure.party,
            events=self.events,
        )
