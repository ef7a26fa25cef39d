"""
Immutable results of the actions resolved during an encounter.

The resolver returns one of these for every turn instead of leaving the
last roll on the combatant, and narration reads them back.
"""

from pydantic import BaseModel, ConfigDict, Field

from core.constants import DamageType, HitResult, NiceEnum, Stat


class ActionKind(NiceEnum):
    """Defines who acted and how."""

    CHARACTER_ATTACK = "CHARACTER_ATTACK"
    MONSTER_ATTACK = "MONSTER_ATTACK"
    HEAL = "HEAL"


class StrikeRoll(BaseModel):
    """The confirmation die and the damage it lets through, before mitigation."""

    model_config = ConfigDict(frozen=True)

    hit: HitResult
    base: int = Field(ge=0, description="Damage die plus modifier, zero on a miss")

    @property
    def is_miss(self) -> bool:
        return self.hit == HitResult.MISS

    @property
    def is_critical(self) -> bool:
        return self.hit == HitResult.CRITICAL


class TargetEffect(BaseModel):
    """What an action did to one of its targets."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="The narrated name of the target")
    amount: int = Field(ge=0, description="Damage dealt or hit points healed")


class ActionOutcome(BaseModel):
    """The complete result of one turn."""

    model_config = ConfigDict(frozen=True)

    kind: ActionKind
    actor: str = Field(description="The narrated name of the actor")
    action: str = Field(default="", description="The action name, empty for monsters")
    effect: str = Field(description="The narrated verb (e.g., 'attacks', 'Heals')")
    hit: HitResult = HitResult.HIT
    amount: int = Field(ge=0, description="The narrated amount")
    damage_type: DamageType | None = None
    area: bool = False
    party_wide: bool = False
    targets: tuple[TargetEffect, ...] = ()

    @property
    def target_names(self) -> list[str]:
        return [target.name for target in self.targets]


class PreparationOutcome(BaseModel):
    """The value a preparation produced and what it shared with the party."""

    model_config = ConfigDict(frozen=True)

    actor: str
    action: str
    effect: str
    stat: Stat
    value: int
    broadcast: int
    is_self: bool

