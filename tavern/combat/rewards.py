"""
Experience, levels and evolution after a won encounter.
"""

from catchery import log_warning

from core.logging import log_info
from entities.party import PartyMember

from combat import narration


def grant_experience(party: list[PartyMember], experience: int) -> list[str]:
    """
    Grants the experience of an encounter to every conscious member.

    A member who levels up evolves when its new level belongs to another
    class, replacing the old member at the same index, and gets its hit
    points recomputed.

    Args:
        party (list[PartyMember]): The whole party, updated in place.
        experience (int): The experience earned in the encounter.

    Returns:
        list[str]: One narration line per conscious member.

    """
    if experience < 0:
        log_warning(
            "Ignoring negative experience gain",
            {"experience": experience, "context": "grant_experience"},
        )
        return []

    lines = []
    for index, member in enumerate(party):
        if member.is_unconscious():
            continue
        line = narration.experience_gained(member.name, experience)
        if member.gain_xp(experience):
            line += narration.level_up(member.name, member.level)
            if member.can_evolve():
                member = member.evolve()
                party[index] = member
                line += narration.evolution(member.name, member.character_class.value)
            member.set_up_hp_for_adventure()
            log_info(
                "Character levelled up",
                {
                    "name": member.name,
                    "level": member.level,
                    "class": member.character_class.value,
                },
            )
        lines.append(line)
    return lines
