"""
Behaviour table of the party member classes.

Each class is described by a frozen ClassBehaviour entry holding its
dice, action names, damage type and mitigation. The few rules that do not
fit in a table (what a preparation actually changes, how a short rest
heals) are dispatched on the class tag in entities.party.
"""

from pydantic import BaseModel, ConfigDict, Field

from core.constants import (
    D3,
    D4,
    D6,
    D8,
    D10,
    D12,
    D20,
    CharacterClass,
    DamageType,
    Stat,
    Targeting,
)


class ActionSpec(BaseModel):
    """A named action rolling one die plus a stat modifier."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="The name shown in the narration")
    effect: str = Field(description="The verb shown in the narration (e.g., 'attacks')")
    die: int = Field(default=0, ge=0, description="Sides of the die rolled, 0 for none")
    modifier: Stat | None = Field(
        default=None,
        description="Stat added to the roll, if any",
    )
    targeting: Targeting = Field(
        default=Targeting.RANDOM,
        description="How the action chooses its target(s)",
    )
    party_wide: bool = Field(
        default=False,
        description="Whether the action applies to the whole party",
    )


class PreparationSpec(BaseModel):
    """The action a class performs before combat."""

    model_config = ConfigDict(frozen=True)

    name: str
    effect: str
    stat: Stat
    is_self: bool = Field(
        description="Whether the action only changes the actor's own stat",
    )


class ShortRestSpec(BaseModel):
    """The action a class performs after combat."""

    model_config = ConfigDict(frozen=True)

    name: str
    effect: str = ""
    stat: Stat | None = Field(
        default=None,
        description="The stat the action restores, None for a flavour-only rest",
    )
    party_wide: bool = False


class ClassBehaviour(BaseModel):
    """Everything that tells one class apart from another."""

    model_config = ConfigDict(frozen=True)

    character_class: CharacterClass
    initiative_die: int
    initiative_stat: Stat
    damage_type: DamageType
    passive: float = Field(
        description="Factor applied to same-type damage taken; ignored by "
        "classes whose passive scales with level",
    )
    passive_scales_with_level: bool = False
    hp_body_bonus: bool = Field(
        default=False,
        description="Whether max HP gets an extra body * level term",
    )
    preparation: PreparationSpec
    attack: ActionSpec
    area_attack: ActionSpec | None = None
    heal: ActionSpec | None = None
    short_rest: ShortRestSpec

    @property
    def heals_in_battle(self) -> bool:
        return self.heal is not None


_SELF_MOTIVATED = PreparationSpec(
    name="Self-Motivated",
    effect="Their Spirit increases in",
    stat=Stat.SPIRIT,
    is_self=True,
)

_BANDAGE_TIME = ShortRestSpec(
    name="Bandage time",
    effect="Heals",
    stat=Stat.HIT_POINTS,
)

_IMPROVED_SWORD_SLASH = ActionSpec(
    name="Improved sword slash",
    effect="attacks",
    die=D10,
    modifier=Stat.BODY,
    targeting=Targeting.RANDOM,
)


BEHAVIOURS: dict[CharacterClass, ClassBehaviour] = {
    CharacterClass.ADVENTURER: ClassBehaviour(
        character_class=CharacterClass.ADVENTURER,
        initiative_die=D12,
        initiative_stat=Stat.SPIRIT,
        damage_type=DamageType.PHYSICAL,
        passive=1.0,
        preparation=_SELF_MOTIVATED,
        attack=ActionSpec(
            name="Sword slash",
            effect="attacks",
            die=D6,
            modifier=Stat.BODY,
            targeting=Targeting.LOWEST_HP,
        ),
        short_rest=_BANDAGE_TIME,
    ),
    CharacterClass.WARRIOR: ClassBehaviour(
        character_class=CharacterClass.WARRIOR,
        initiative_die=D12,
        initiative_stat=Stat.SPIRIT,
        damage_type=DamageType.PHYSICAL,
        passive=0.5,
        preparation=_SELF_MOTIVATED,
        attack=_IMPROVED_SWORD_SLASH,
        short_rest=_BANDAGE_TIME,
    ),
    CharacterClass.CHAMPION: ClassBehaviour(
        character_class=CharacterClass.CHAMPION,
        initiative_die=D12,
        initiative_stat=Stat.SPIRIT,
        damage_type=DamageType.PHYSICAL,
        passive=0.5,
        hp_body_bonus=True,
        preparation=PreparationSpec(
            name="Motivational speech",
            effect="Everyone’s Spirit increases in",
            stat=Stat.SPIRIT,
            is_self=False,
        ),
        attack=_IMPROVED_SWORD_SLASH,
        short_rest=ShortRestSpec(
            name="Improved bandage time",
            effect="Heals",
            stat=Stat.HIT_POINTS,
        ),
    ),
    CharacterClass.CLERIC: ClassBehaviour(
        character_class=CharacterClass.CLERIC,
        initiative_die=D10,
        initiative_stat=Stat.SPIRIT,
        damage_type=DamageType.PSYCHICAL,
        passive=1.0,
        preparation=PreparationSpec(
            name="Prayer of good luck",
            effect="Everyone’s Mind increases in",
            stat=Stat.MIND,
            is_self=False,
        ),
        attack=ActionSpec(
            name="Not on my watch",
            effect="attacks",
            die=D4,
            modifier=Stat.SPIRIT,
            targeting=Targeting.RANDOM,
        ),
        heal=ActionSpec(
            name="Prayer of healing",
            effect="Heals",
            die=D10,
            modifier=Stat.MIND,
            targeting=Targeting.LOWEST_HP,
        ),
        short_rest=ShortRestSpec(
            name="Prayer of self-healing",
            effect="Heals",
            stat=Stat.HIT_POINTS,
        ),
    ),
    CharacterClass.PALADIN: ClassBehaviour(
        character_class=CharacterClass.PALADIN,
        initiative_die=D10,
        initiative_stat=Stat.SPIRIT,
        damage_type=DamageType.PSYCHICAL,
        passive=0.5,
        preparation=PreparationSpec(
            name="Blessing of good luck",
            effect="Everyone’s Mind increases in",
            stat=Stat.MIND,
            is_self=False,
        ),
        attack=ActionSpec(
            name="Never on my watch",
            effect="attacks",
            die=D8,
            modifier=Stat.SPIRIT,
            targeting=Targeting.RANDOM,
        ),
        heal=ActionSpec(
            name="Prayer of mass healing",
            effect="Heals",
            die=D10,
            modifier=Stat.MIND,
            party_wide=True,
        ),
        short_rest=ShortRestSpec(
            name="Prayer of mass healing",
            effect="Heals",
            stat=Stat.HIT_POINTS,
            party_wide=True,
        ),
    ),
    CharacterClass.MAGE: ClassBehaviour(
        character_class=CharacterClass.MAGE,
        initiative_die=D20,
        initiative_stat=Stat.MIND,
        damage_type=DamageType.MAGICAL,
        passive=0.0,
        passive_scales_with_level=True,
        preparation=PreparationSpec(
            name="Mage shield",
            effect="Shield recharges to",
            stat=Stat.SHIELD,
            is_self=True,
        ),
        attack=ActionSpec(
            name="Arcane missile",
            effect="attacks",
            die=D6,
            modifier=Stat.MIND,
            targeting=Targeting.HIGHEST_HP,
        ),
        area_attack=ActionSpec(
            name="Fireball",
            effect="attacks",
            die=D4,
            modifier=Stat.MIND,
            targeting=Targeting.AREA,
        ),
        short_rest=ShortRestSpec(name="reading a book"),
    ),
}


# Die rolled by the Paladin's preparation blessing.
BLESSING_DIE = D3
# Die rolled by the Mage's shield, before scaling with level.
SHIELD_DIE = D6
# Die rolled by the Adventurer-line bandages.
BANDAGE_DIE = D8
# Die rolled by the Cleric-line self heals.
PRAYER_DIE = D10


def behaviour_of(character_class: CharacterClass) -> ClassBehaviour:
    """
    Returns the behaviour entry of a class.

    Args:
        character_class (CharacterClass): The class to look up.

    Returns:
        ClassBehaviour: The behaviour of the class.

    """
    assert character_class in BEHAVIOURS, f"Unknown class {character_class}"
    return BEHAVIOURS[character_class]
