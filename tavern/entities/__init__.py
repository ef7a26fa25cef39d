"""
Entities of the encounter engine.

Party members with their class behaviour table and progression ladder,
monsters, encounters and adventures.
"""

# Import from adventure.py
from .adventure import Adventure, Encounter

# Import from behaviour.py
from .behaviour import (
    BEHAVIOURS,
    ActionSpec,
    ClassBehaviour,
    PreparationSpec,
    ShortRestSpec,
    behaviour_of,
)

# Import from monster.py
from .monster import Monster

# Import from party.py
from .party import PartyMember, migrate

# Import from progression.py
from .progression import (
    LADDERS,
    can_evolve,
    class_for_level,
    initial_xp_for_level,
    level_for_xp,
)

__all__ = [
    # Import from adventure.py
    "Adventure",
    "Encounter",
    # Import from behaviour.py
    "BEHAVIOURS",
    "ActionSpec",
    "ClassBehaviour",
    "PreparationSpec",
    "ShortRestSpec",
    "behaviour_of",
    # Import from monster.py
    "Monster",
    # Import from party.py
    "PartyMember",
    "migrate",
    # Import from progression.py
    "LADDERS",
    "can_evolve",
    "class_for_level",
    "initial_xp_for_level",
    "level_for_xp",
]
