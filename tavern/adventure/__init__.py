"""
Adventure module of the encounter engine.

Character and adventure creation rules, and the orchestrator playing an
adventure encounter after encounter.
"""

# Import from adventure_manager.py
from .adventure_manager import AdventureManager

# Import from character_manager.py
from .character_manager import (
    CharacterManager,
    format_name,
    is_valid_name,
    stat_from_roll,
)

# Import from orchestrator.py
from .orchestrator import AdventureOrchestrator, AdventureReport

__all__ = [
    # Import from adventure_manager.py
    "AdventureManager",
    # Import from character_manager.py
    "CharacterManager",
    "format_name",
    "is_valid_name",
    "stat_from_roll",
    # Import from orchestrator.py
    "AdventureOrchestrator",
    "AdventureReport",
]
