"""
Combat module of the encounter engine.

Initiative scheduling, action resolution and targeting, narration, the
encounter stage machine and the experience handed out after a victory.
"""

# Import from encounter_engine.py
from .encounter_engine import EncounterEngine

# Import from initiative.py
from .initiative import (
    InitiativeOrder,
    character_goes_first,
    merge_turn_order,
    roll_initiatives,
    sort_by_initiative,
)

# Import from outcomes.py
from .outcomes import (
    ActionKind,
    ActionOutcome,
    PreparationOutcome,
    StrikeRoll,
    TargetEffect,
)

# Import from resolver.py
from .resolver import (
    damage_against_member,
    damage_against_monster,
    resolve_member_turn,
    resolve_monster_turn,
    roll_strike,
)

# Import from rewards.py
from .rewards import grant_experience

__all__ = [
    # Import from encounter_engine.py
    "EncounterEngine",
    # Import from initiative.py
    "InitiativeOrder",
    "character_goes_first",
    "merge_turn_order",
    "roll_initiatives",
    "sort_by_initiative",
    # Import from outcomes.py
    "ActionKind",
    "ActionOutcome",
    "PreparationOutcome",
    "StrikeRoll",
    "TargetEffect",
    # Import from resolver.py
    "damage_against_member",
    "damage_against_monster",
    "resolve_member_turn",
    "resolve_monster_turn",
    "roll_strike",
    # Import from rewards.py
    "grant_experience",
]
