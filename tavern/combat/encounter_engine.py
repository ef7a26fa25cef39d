"""
Encounter engine.

Drives one encounter through its stages, PREPARATION, COMBAT and
SHORT_REST, strictly in that order. The party list it receives is the
adventure's own list: members fall, heal and evolve in it.
"""

from collections.abc import Callable

from core.config import EngineSettings
from core.constants import EncounterResult, EncounterStage, Stat
from core.dice import RandomSource
from core.logging import log_debug, log_info
from entities.adventure import Encounter
from entities.monster import Monster
from entities.party import PartyMember

from combat import narration
from combat.initiative import InitiativeOrder, character_goes_first, roll_initiatives
from combat.outcomes import PreparationOutcome
from combat.resolver import resolve_member_turn, resolve_monster_turn
from combat.rewards import grant_experience


class EncounterEngine:
    """Runs a single encounter and records its narration."""

    def __init__(
        self,
        party: list[PartyMember],
        encounter: Encounter,
        dice: RandomSource,
        settings: EngineSettings | None = None,
        on_event: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the engine for one encounter.

        Args:
            party (list[PartyMember]): The whole party, shared with the adventure.
            encounter (Encounter): The monster templates to fight.
            dice (RandomSource): The source of randomness.
            settings (EngineSettings | None): Rule bounds, defaults when None.
            on_event (Callable[[str], None] | None): Called with every narration line.

        """
        assert not encounter.is_empty(), "An encounter needs monsters"
        self.party = party
        self.encounter = encounter
        self.dice = dice
        self.settings = settings or EngineSettings()
        self.on_event = on_event

        self.stage: EncounterStage = EncounterStage.PREPARATION
        self.result: EncounterResult | None = None
        self.events: list[str] = []

        # The live sides, sorted by initiative once combat starts.
        self.live_party: list[PartyMember] = []
        self.monsters: list[Monster] = []
        self.initiative: InitiativeOrder | None = None

        self.experience: int = 0
        self.rounds: int = 0
        self.preparations: dict[str, PreparationOutcome] = {}
        self.finished: bool = False

        self._party_cursor = 0
        self._monster_cursor = 0

    # ============================================================================
    # HELPERS
    # ============================================================================

    def _emit(self, *lines: str) -> None:
        for line in lines:
            self.events.append(line)
            if self.on_event is not None:
                self.on_event(line)

    def _leave(self, stage: EncounterStage) -> None:
        assert self.stage == stage, f"Expected stage {stage}, currently {self.stage}"
        next_stage = stage.next_stage()
        log_debug("Encounter stage completed", {"stage": stage, "next": next_stage})
        if next_stage is not None:
            self.stage = next_stage

    @property
    def is_over(self) -> bool:
        return not self.live_party or not self.monsters

    # ============================================================================
    # PREPARATION
    # ============================================================================

    def prepare(self) -> list[PreparationOutcome]:
        """
        Runs the preparation stage, then spawns the monsters and rolls
        initiative.

        Every conscious member performs its preparation; the broadcast part
        of each is added to every member conscious at that moment, the
        actor included.

        Returns:
            list[PreparationOutcome]: The preparation of each conscious member.

        """
        assert self.stage == EncounterStage.PREPARATION, "Encounter already prepared"
        self._emit(narration.PREPARATION_BANNER)

        outcomes = []
        for member in self.party:
            if member.is_unconscious():
                self._emit(narration.unconscious(member.name))
                continue
            spec = member.behaviour.preparation
            value = member.do_preparation(self.dice)
            broadcast = member.preparation_broadcast(value)
            for ally in self.party:
                if not ally.is_unconscious():
                    ally.increase_stat(spec.stat, broadcast)
            outcome = PreparationOutcome(
                actor=member.name,
                action=spec.name,
                effect=spec.effect,
                stat=spec.stat,
                value=value,
                broadcast=broadcast,
                is_self=spec.is_self,
            )
            self.preparations[member.name] = outcome
            outcomes.append(outcome)
            self._emit(narration.preparation(outcome))

        self.monsters = self.encounter.spawn()
        self.initiative = roll_initiatives(self.party, self.monsters, self.dice)
        self.live_party = list(self.initiative.characters)
        self.monsters = list(self.initiative.monsters)

        self._emit("", narration.INITIATIVE_HEADER)
        self._emit(
            *(narration.initiative_line(c.initiative, c.name) for c in self.initiative)
        )
        self._emit("")
        self._leave(EncounterStage.PREPARATION)
        return outcomes

    def revert_preparations(self) -> None:
        """
        Removes the preparation bonuses once combat is over.

        A self preparation is taken back from its actor only; any other is
        taken back from every member who prepared, by the actor's value.
        """
        for member in self.party:
            outcome = self.preparations.get(member.name)
            if outcome is None:
                continue
            if outcome.is_self:
                member.decrease_stat(outcome.stat, outcome.value)
                continue
            for ally in self.party:
                if ally.name in self.preparations:
                    ally.decrease_stat(outcome.stat, outcome.value)
        self.preparations.clear()

    # ============================================================================
    # COMBAT
    # ============================================================================

    def _prune_monsters(self) -> str:
        text = ""
        survivors = []
        shift = 0
        for index, monster in enumerate(self.monsters):
            if monster.is_alive():
                survivors.append(monster)
                continue
            self.experience += monster.experience
            text += narration.monster_dies(monster.display_name)
            if index < self._monster_cursor:
                shift += 1
        self.monsters[:] = survivors
        self._monster_cursor -= shift
        return text

    def _prune_party(self) -> str:
        text = ""
        survivors = []
        shift = 0
        for index, member in enumerate(self.live_party):
            if member.is_alive():
                survivors.append(member)
                continue
            text += narration.member_falls(member.name)
            if index < self._party_cursor:
                shift += 1
        self.live_party[:] = survivors
        self._party_cursor -= shift
        return text

    def _member_turn(self) -> None:
        member = self.live_party[self._party_cursor]
        outcome = resolve_member_turn(
            member,
            self.live_party,
            self.monsters,
            self.dice,
            self.settings.area_attack_threshold,
        )
        text = narration.action(outcome) + self._prune_monsters()
        self._party_cursor += 1
        self._emit(text)

    def _monster_turn(self) -> None:
        monster = self.monsters[self._monster_cursor]
        outcome = resolve_monster_turn(monster, self.live_party, self.dice)
        text = narration.action(outcome) + self._prune_party()
        self._monster_cursor += 1
        self._emit(text)

    def play_round(self) -> None:
        """
        Plays one round: both sides act once, in initiative order, with
        party members winning ties.
        """
        assert self.stage == EncounterStage.COMBAT, "Rounds are only played in combat"
        assert not self.is_over, "Combat is already over"
        self.rounds += 1
        self._emit(*narration.round_header(self.rounds, self.party))
        self._emit("")

        self._party_cursor = 0
        self._monster_cursor = 0
        while self._party_cursor < len(self.live_party) and self._monster_cursor < len(
            self.monsters
        ):
            member = self.live_party[self._party_cursor]
            monster = self.monsters[self._monster_cursor]
            if character_goes_first(member, monster):
                self._member_turn()
            else:
                self._monster_turn()
        while self._party_cursor < len(self.live_party) and self.monsters:
            self._member_turn()
        while self._monster_cursor < len(self.monsters) and self.live_party:
            self._monster_turn()

        self._emit(narration.end_of_round(self.rounds))
        if not self.is_over:
            self._emit("")

    def fight(self) -> EncounterResult:
        """
        Runs the combat stage until one side is gone, then reverts the
        preparation bonuses.

        Returns:
            EncounterResult: WON, or PARTY_DEFEATED when no member is conscious.

        """
        assert self.stage == EncounterStage.COMBAT, "Prepare the encounter first"
        self._emit(narration.COMBAT_BANNER)
        while not self.is_over:
            self.play_round()

        self.revert_preparations()
        if self.live_party:
            self.result = EncounterResult.WON
            self._emit(narration.VICTORY, "")
            self._leave(EncounterStage.COMBAT)
        else:
            self.result = EncounterResult.PARTY_DEFEATED
        log_info(
            "Combat finished",
            {"result": self.result, "rounds": self.rounds, "experience": self.experience},
        )
        return self.result

    # ============================================================================
    # SHORT REST
    # ============================================================================

    def short_rest(self) -> list[str]:
        """
        Runs the short rest stage, then grants the encounter's experience.

        Returns:
            list[str]: The short rest and progression narration.

        """
        assert self.stage == EncounterStage.SHORT_REST, "Only a won encounter ends with a rest"
        assert self.result == EncounterResult.WON, "Only a won encounter ends with a rest"
        assert not self.finished, "The party already rested"
        start = len(self.events)
        self._emit(narration.SHORT_REST_BANNER)

        for member in self.party:
            if member.is_unconscious():
                self._emit(narration.unconscious(member.name))
                continue
            amount = member.do_short_rest(self.dice)
            if member.behaviour.short_rest.party_wide:
                for ally in self.party:
                    ally.increase_stat(Stat.HIT_POINTS, amount)
            self._emit(narration.short_rest(member, amount, self.party))
        self._emit("")

        self._emit(*grant_experience(self.party, self.experience))
        self._emit("")
        self._leave(EncounterStage.SHORT_REST)
        self.finished = True
        return self.events[start:]

    def run(self) -> EncounterResult:
        """
        Plays the whole encounter.

        Returns:
            EncounterResult: How the combat ended; the short rest only
            happens when it was won.

        """
        self.prepare()
        result = self.fight()
        if result == EncounterResult.WON:
            self.short_rest()
        return result
