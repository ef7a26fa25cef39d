"""
Persistence module of the encounter engine.

JSON records and repositories for characters, monsters and adventures.
"""

# Import from records.py
from .records import (
    AdventureRecord,
    CharacterRecord,
    EncounterEntry,
    MonsterRecord,
)

# Import from repository.py
from .repository import (
    AdventureRepository,
    CharacterRepository,
    MonsterRepository,
)

__all__ = [
    # Import from records.py
    "AdventureRecord",
    "CharacterRecord",
    "EncounterEntry",
    "MonsterRecord",
    # Import from repository.py
    "AdventureRepository",
    "CharacterRepository",
    "MonsterRepository",
]
