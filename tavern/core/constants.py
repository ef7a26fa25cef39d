"""
Constants and enumerations for the encounter engine.

Defines the rule constants (hit points, experience, dice) and the
enumerations for character classes, monster challenges, damage types,
stats and encounter stages used throughout the engine.
"""

from enum import Enum

# Base hit points added to the body stat when computing the maximum HP.
BASE_HP = 10
# Experience needed to climb a single level.
XP_PER_LEVEL = 100
MIN_LEVEL = 1
MAX_LEVEL = 10
# Damage multiplier applied on a critical hit.
CRITICAL_MULTIPLIER = 2
# Outcomes of the d10 confirmation die.
CONFIRMATION_DIE = 10
ATTACK_FAILED = 1
CRITICAL_ATTACK = 10

D3 = 3
D4 = 4
D6 = 6
D8 = 8
D10 = 10
D12 = 12
D20 = 20

# Damage dice accepted by monster templates.
DAMAGE_DICE: dict[str, int] = {
    "d3": D3,
    "d4": D4,
    "d6": D6,
    "d8": D8,
    "d10": D10,
    "d12": D12,
    "d20": D20,
}


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class DamageType(NiceEnum):
    """Defines the damage types an attack can deal."""

    PHYSICAL = "physical"
    MAGICAL = "magical"
    PSYCHICAL = "psychical"


class Challenge(NiceEnum):
    """Defines the tier of a monster."""

    MINION = "Minion"
    LIEUTENANT = "Lieutenant"
    BOSS = "Boss"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def resistance(self) -> float:
        """Returns the factor applied to same-type damage taken by the monster."""
        return 0.5 if self == Challenge.BOSS else 1.0


class CharacterClass(NiceEnum):
    """Defines the classes a party member can belong to."""

    ADVENTURER = "Adventurer"
    WARRIOR = "Warrior"
    CHAMPION = "Champion"
    CLERIC = "Cleric"
    PALADIN = "Paladin"
    MAGE = "Mage"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def color(self) -> str:
        """Returns the color string associated with this class line."""
        return {
            CharacterClass.ADVENTURER: "bold yellow",
            CharacterClass.WARRIOR: "bold yellow",
            CharacterClass.CHAMPION: "bold yellow",
            CharacterClass.CLERIC: "bold green",
            CharacterClass.PALADIN: "bold green",
            CharacterClass.MAGE: "bold blue",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies class color formatting to a message."""
        return f"[{self.color}]{message}[/]"


# Classes a new character can be created with.
STARTING_CLASSES = (
    CharacterClass.ADVENTURER,
    CharacterClass.CLERIC,
    CharacterClass.MAGE,
)


class Stat(NiceEnum):
    """Defines the stats an action can modify."""

    BODY = "Body"
    MIND = "Mind"
    SPIRIT = "Spirit"
    SHIELD = "Shield"
    HIT_POINTS = "hit points"

    @property
    def display_name(self) -> str:
        return self.value


class EncounterStage(NiceEnum):
    """Defines the stages an encounter goes through, in order."""

    PREPARATION = "PREPARATION"
    COMBAT = "COMBAT"
    SHORT_REST = "SHORT_REST"

    def next_stage(self) -> "EncounterStage | None":
        """Returns the stage that follows this one, or None after the last."""
        stages = list(EncounterStage)
        index = stages.index(self)
        return stages[index + 1] if index + 1 < len(stages) else None


class EncounterResult(NiceEnum):
    """Defines how a combat can end."""

    WON = "WON"
    PARTY_DEFEATED = "PARTY_DEFEATED"


class HitResult(NiceEnum):
    """Defines the outcome of the confirmation die."""

    MISS = "MISS"
    HIT = "HIT"
    CRITICAL = "CRITICAL"


class Targeting(NiceEnum):
    """Defines how an action picks its target(s)."""

    LOWEST_HP = "LOWEST_HP"
    HIGHEST_HP = "HIGHEST_HP"
    RANDOM = "RANDOM"
    AREA = "AREA"
