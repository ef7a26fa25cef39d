"""
Narration of the encounter.

Turns outcomes into the exact lines shown to the players. Nothing here
rolls dice or changes a combatant.
"""

from typing import Sequence

from core.constants import HitResult
from core.utils import join_names
from entities.adventure import Encounter
from entities.party import PartyMember

from combat.outcomes import ActionKind, ActionOutcome, PreparationOutcome

PREPARATION_BANNER = "-------------------------\n*** Preparation stage ***\n-------------------------"
COMBAT_BANNER = "--------------------\n*** Combat stage ***\n--------------------"
SHORT_REST_BANNER = "------------------------\n*** Short rest stage ***\n------------------------"
INITIATIVE_HEADER = "Rolling initiative..."
# Wording kept identical to the saved transcripts.
VICTORY = "All enemies area defeated."
PARTY_WIPED = (
    "Tavern keeper: “Lad, wake up. Yes, your party fell unconscious.”\n"
    "“Don’t worry, you are safe back at the Tavern.”"
)


def adventure_start(name: str) -> str:
    return f"The “{name}” will start soon..."


def adventure_completed(name: str) -> str:
    return f"Congratulations, your party completed “{name}”"


def encounter_start(number: int, encounter: Encounter) -> list[str]:
    """Header of an encounter listing its monsters and their counts."""
    lines = ["---------------------", f"Starting Encounter {number}:"]
    for monster, count in encounter:
        lines.append(f"  - {count}x {monster.display_name}")
    return lines


def unconscious(name: str) -> str:
    return f"{name} is unconscious."


def preparation(outcome: PreparationOutcome) -> str:
    sign = "+" if outcome.value >= 0 else ""
    return f"{outcome.actor} uses {outcome.action}. {outcome.effect} {sign}{outcome.value}."


def initiative_line(initiative: int, name: str) -> str:
    return "  - %-5d %s" % (initiative, name)


def round_header(number: int, party: Sequence[PartyMember]) -> list[str]:
    """
    Header of a combat round with the hit points of the whole party.

    Args:
        number (int): The round number, starting at 1.
        party (Sequence[PartyMember]): The whole party, unconscious included.

    Returns:
        list[str]: The header lines.

    """
    width = max((len(member.name) for member in party), default=0) + 4
    lines = [f"Round {number}:", "Party:"]
    for member in party:
        hp = f"{member.current_hp} / {member.max_hp} hit points"
        lines.append("  - %-*s %s" % (width, member.name, hp))
    return lines


def end_of_round(number: int) -> str:
    return f"End of round {number}."


def _result_line(outcome: ActionOutcome) -> str:
    damage_type = outcome.damage_type.value if outcome.damage_type else ""
    if outcome.hit == HitResult.MISS:
        return "Fails and deals 0 physical damage.\n"
    if outcome.hit == HitResult.CRITICAL:
        return f"Critical hit and deals {outcome.amount} {damage_type} damage.\n"
    return f"Hits and deals {outcome.amount} {damage_type} damage.\n"


def action(outcome: ActionOutcome) -> str:
    """
    Narrates one turn.

    Args:
        outcome (ActionOutcome): The result of the turn.

    Returns:
        str: The narration, newline terminated.

    """
    targets = join_names(outcome.target_names)
    if outcome.kind == ActionKind.HEAL:
        return (
            f"{outcome.actor} uses {outcome.action}. {outcome.effect} "
            f"{outcome.amount} hit points to {targets}\n"
        )
    if outcome.kind == ActionKind.MONSTER_ATTACK:
        return f"{outcome.actor} {outcome.effect} {targets}\n" + _result_line(outcome)
    return (
        f"{outcome.actor} {outcome.effect} {targets} with {outcome.action}.\n"
        + _result_line(outcome)
    )


def monster_dies(display_name: str) -> str:
    return f"{display_name} dies.\n"


def member_falls(name: str) -> str:
    return f"{name} falls unconscious.\n"


def short_rest(member: PartyMember, amount: int, party: Sequence[PartyMember]) -> str:
    """
    Narrates a short rest action.

    Args:
        member (PartyMember): The resting member.
        amount (int): What the action restored.
        party (Sequence[PartyMember]): The whole party, listed by party-wide rests.

    Returns:
        str: The narration.

    """
    rest = member.behaviour.short_rest
    if rest.stat is None:
        return f"{member.name} is {rest.name}."
    line = f"{member.name} uses {rest.name}. {rest.effect} {amount} {rest.stat.display_name}"
    if rest.party_wide:
        line += " to " + join_names([m.name for m in party])
    return line + "."


def experience_gained(name: str, experience: int) -> str:
    return f"{name} gains {experience} xp."


def level_up(name: str, level: int) -> str:
    return f" {name} levels up. They are now lvl {level}!"


def evolution(name: str, class_name: str) -> str:
    return f"\n{name} evolves to {class_name}!"
