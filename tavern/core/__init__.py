"""
Core system module for the encounter engine.

This module contains the fundamental components shared by every other
package: rule constants and enumerations, the injected random source,
settings, exceptions, logging and console utilities.
"""

from .config import EngineSettings, load_settings
from .constants import (
    Challenge,
    CharacterClass,
    DamageType,
    EncounterResult,
    EncounterStage,
    HitResult,
    Stat,
    Targeting,
)
from .dice import RandomSource, SeededRandomSource, parse_die, pick
from .errors import (
    BusinessError,
    FileError,
    GameException,
    PersistenceError,
)
from .utils import (
    cprint,
    crule,
    join_names,
    make_bar,
)

__all__ = [
    # Import from config.py
    "EngineSettings",
    "load_settings",
    # Import from constants.py
    "Challenge",
    "CharacterClass",
    "DamageType",
    "EncounterResult",
    "EncounterStage",
    "HitResult",
    "Stat",
    "Targeting",
    # Import from dice.py
    "RandomSource",
    "SeededRandomSource",
    "parse_die",
    "pick",
    # Import from errors.py
    "BusinessError",
    "FileError",
    "GameException",
    "PersistenceError",
    # Import from utils.py
    "cprint",
    "crule",
    "join_names",
    "make_bar",
]
