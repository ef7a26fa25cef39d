"""
Action resolver.

Computes and applies the outcome of a single turn: which action the actor
uses, whom it targets, how much damage or healing it deals. Casualties are
left in place; pruning them is the encounter engine's job.
"""

from core.config import EngineSettings
from core.constants import (
    ATTACK_FAILED,
    CONFIRMATION_DIE,
    CRITICAL_ATTACK,
    CRITICAL_MULTIPLIER,
    DamageType,
    HitResult,
    Targeting,
)
from core.dice import RandomSource
from core.logging import log_debug
from entities.behaviour import ActionSpec
from entities.monster import Monster
from entities.party import PartyMember

from combat.outcomes import ActionKind, ActionOutcome, StrikeRoll, TargetEffect
from combat.targeting import lowest_hp, needs_healing, select_target

# Number of monsters from which a mage switches to its area spell.
DEFAULT_AREA_THRESHOLD = EngineSettings().area_attack_threshold


def roll_confirmation(dice: RandomSource) -> HitResult:
    """
    Rolls the d10 confirmation die.

    Args:
        dice (RandomSource): The source of randomness.

    Returns:
        HitResult: MISS on a 1, CRITICAL on a 10, HIT otherwise.

    """
    result = dice.roll(CONFIRMATION_DIE)
    if result == ATTACK_FAILED:
        return HitResult.MISS
    if result == CRITICAL_ATTACK:
        return HitResult.CRITICAL
    return HitResult.HIT


def roll_strike(dice: RandomSource, die: int, modifier: int = 0) -> StrikeRoll:
    """
    Rolls an attack: the confirmation die first, then the damage die unless
    the attack missed.

    Args:
        dice (RandomSource): The source of randomness.
        die (int): The sides of the damage die.
        modifier (int): The stat added to the damage die.

    Returns:
        StrikeRoll: The hit result and the damage before mitigation.

    """
    hit = roll_confirmation(dice)
    if hit == HitResult.MISS:
        return StrikeRoll(hit=hit, base=0)
    return StrikeRoll(hit=hit, base=max(0, dice.roll(die) + modifier))


def _finish(strike: StrikeRoll, mitigated: int) -> int:
    if strike.is_miss:
        return 0
    if strike.is_critical:
        return mitigated * CRITICAL_MULTIPLIER
    return mitigated


def damage_against_monster(strike: StrikeRoll, damage_type: DamageType, monster: Monster) -> int:
    """
    Final damage of a party member's strike on a monster.

    Same-type damage is scaled by the monster's resistance, then doubled
    on a critical.
    """
    value = strike.base
    if damage_type == monster.damage_type:
        value = int(value * monster.resistance)
    return _finish(strike, value)


def damage_against_member(strike: StrikeRoll, monster: Monster, member: PartyMember) -> int:
    """
    Final damage of a monster's strike on a party member.

    Same-type damage is scaled by the member's passive factor, except for a
    mage hit by magic, whose passive is subtracted instead. Doubled on a
    critical.
    """
    value = strike.base
    if monster.damage_type == member.damage_type:
        if monster.damage_type == DamageType.MAGICAL and member.is_mage:
            value = max(0, int(value - member.passive))
        else:
            value = int(value * member.passive)
    return _finish(strike, value)


def _narrated_amount(strike: StrikeRoll) -> int:
    return _finish(strike, strike.base)


# ============================================================================
# PARTY MEMBER TURN
# ============================================================================


def choose_attack(
    actor: PartyMember,
    monsters: list[Monster],
    area_threshold: int = DEFAULT_AREA_THRESHOLD,
) -> ActionSpec:
    """
    Picks the attack a party member uses against the current monsters.

    Args:
        actor (PartyMember): The acting member.
        monsters (list[Monster]): The live monsters.
        area_threshold (int): Monsters needed for the area spell.

    Returns:
        ActionSpec: The chosen attack.

    """
    behaviour = actor.behaviour
    if behaviour.area_attack is not None and len(monsters) >= area_threshold:
        return behaviour.area_attack
    return behaviour.attack


def resolve_member_attack(
    actor: PartyMember,
    monsters: list[Monster],
    dice: RandomSource,
    area_threshold: int = DEFAULT_AREA_THRESHOLD,
) -> ActionOutcome:
    """
    Resolves and applies a party member's attack.

    Args:
        actor (PartyMember): The attacking member.
        monsters (list[Monster]): The live monsters, never empty.
        dice (RandomSource): The source of randomness.
        area_threshold (int): Monsters needed for the area spell.

    Returns:
        ActionOutcome: The result of the attack.

    """
    assert monsters, "Cannot attack without monsters"
    action = choose_attack(actor, monsters, area_threshold)
    damage_type = actor.damage_type
    area = action.targeting == Targeting.AREA
    targets = list(monsters) if area else [select_target(action.targeting, monsters, dice)]

    strike = roll_strike(dice, action.die, actor.stat_value(action.modifier))

    effects = []
    for monster in targets:
        damage = damage_against_monster(strike, damage_type, monster)
        monster.take_damage(damage)
        effects.append(TargetEffect(name=monster.display_name, amount=damage))

    amount = _narrated_amount(strike) if area else effects[0].amount
    log_debug(
        "Character attack resolved",
        {
            "actor": actor.name,
            "action": action.name,
            "hit": strike.hit,
            "amount": amount,
            "targets": len(effects),
        },
    )
    return ActionOutcome(
        kind=ActionKind.CHARACTER_ATTACK,
        actor=actor.name,
        action=action.name,
        effect=action.effect,
        hit=strike.hit,
        amount=amount,
        damage_type=damage_type,
        area=area,
        targets=tuple(effects),
    )


def resolve_member_heal(
    actor: PartyMember,
    party: list[PartyMember],
    dice: RandomSource,
) -> ActionOutcome:
    """
    Resolves and applies a healer's battle heal.

    A party-wide heal grants the rolled amount to every live member; a
    single heal goes to the live member with the fewest hit points.

    Args:
        actor (PartyMember): The healer.
        party (list[PartyMember]): The live party.
        dice (RandomSource): The source of randomness.

    Returns:
        ActionOutcome: The result of the heal.

    """
    heal = actor.behaviour.heal
    assert heal is not None, f"{actor.name} cannot heal in battle"
    live = [member for member in party if member.is_alive()]
    assert live, "Nobody left to heal"

    value = dice.roll(heal.die) + actor.stat_value(heal.modifier)
    if heal.party_wide:
        effects = tuple(
            TargetEffect(name=member.name, amount=member.heal(value)) for member in live
        )
        amount = value
    else:
        target = lowest_hp(live)
        healed = target.heal(value)
        effects = (TargetEffect(name=target.name, amount=healed),)
        amount = healed

    log_debug(
        "Character heal resolved",
        {"actor": actor.name, "action": heal.name, "amount": amount, "targets": len(effects)},
    )
    return ActionOutcome(
        kind=ActionKind.HEAL,
        actor=actor.name,
        action=heal.name,
        effect=heal.effect,
        amount=amount,
        party_wide=heal.party_wide,
        targets=effects,
    )


def resolve_member_turn(
    actor: PartyMember,
    party: list[PartyMember],
    monsters: list[Monster],
    dice: RandomSource,
    area_threshold: int = DEFAULT_AREA_THRESHOLD,
) -> ActionOutcome:
    """
    Resolves a party member's turn: heal when a healer sees a wounded ally,
    attack otherwise.

    Args:
        actor (PartyMember): The acting member.
        party (list[PartyMember]): The live party.
        monsters (list[Monster]): The live monsters.
        dice (RandomSource): The source of randomness.
        area_threshold (int): Monsters needed for the area spell.

    Returns:
        ActionOutcome: The result of the turn.

    """
    assert actor.is_alive(), f"{actor.name} is unconscious and cannot act"
    if actor.behaviour.heals_in_battle and needs_healing(party):
        return resolve_member_heal(actor, party, dice)
    return resolve_member_attack(actor, monsters, dice, area_threshold)


# ============================================================================
# MONSTER TURN
# ============================================================================


def resolve_monster_turn(
    monster: Monster,
    party: list[PartyMember],
    dice: RandomSource,
) -> ActionOutcome:
    """
    Resolves and applies a monster's attack.

    Bosses strike every live member, other monsters a random one.

    Args:
        monster (Monster): The attacking monster.
        party (list[PartyMember]): The live party, never empty.
        dice (RandomSource): The source of randomness.

    Returns:
        ActionOutcome: The result of the attack.

    """
    assert party, "Cannot attack without party members"
    assert monster.is_alive(), f"{monster.name} is dead and cannot act"
    strike = roll_strike(dice, monster.damage_sides)
    area = monster.is_area_attacker
    targets = list(party) if area else [select_target(Targeting.RANDOM, party, dice)]

    effects = []
    for member in targets:
        damage = damage_against_member(strike, monster, member)
        member.take_damage(damage)
        effects.append(TargetEffect(name=member.name, amount=damage))

    amount = _narrated_amount(strike) if area else effects[0].amount
    log_debug(
        "Monster attack resolved",
        {"actor": monster.name, "hit": strike.hit, "amount": amount, "targets": len(effects)},
    )
    return ActionOutcome(
        kind=ActionKind.MONSTER_ATTACK,
        actor=monster.display_name,
        effect="attacks",
        hit=strike.hit,
        amount=amount,
        damage_type=monster.damage_type,
        area=area,
        targets=tuple(effects),
    )
