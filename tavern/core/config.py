"""
Engine settings.

The party and adventure bounds are data rather than code, so they live in
a pydantic model that can be overridden from a JSON file.
"""

import json
from pathlib import Path
from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field, ValidationError

from core.errors import FileError


class EngineSettings(BaseModel):
    """Tunable bounds of the adventure rules."""

    min_party_size: int = Field(
        default=3,
        ge=1,
        description="Minimum number of characters in a party.",
    )
    max_party_size: int = Field(
        default=5,
        ge=1,
        description="Maximum number of characters in a party.",
    )
    min_encounters: int = Field(
        default=1,
        ge=1,
        description="Minimum number of encounters in an adventure.",
    )
    max_encounters: int = Field(
        default=4,
        ge=1,
        description="Maximum number of encounters in an adventure.",
    )
    area_attack_threshold: int = Field(
        default=3,
        ge=1,
        description="Number of monsters from which a Mage casts its area spell.",
    )
    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding characters.json, monsters.json and adventures.json.",
    )
    seed: int | None = Field(
        default=None,
        description="Seed of the random source, None for a random seed.",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if self.min_party_size > self.max_party_size:
            raise ValueError("min_party_size must not exceed max_party_size")
        if self.min_encounters > self.max_encounters:
            raise ValueError("min_encounters must not exceed max_encounters")


def load_settings(filepath: Path | None = None) -> EngineSettings:
    """
    Loads the engine settings, falling back to the defaults.

    Args:
        filepath (Path | None): Optional JSON file overriding some settings.

    Raises:
        FileError: If the file exists but cannot be parsed or validated.

    Returns:
        EngineSettings: The loaded settings.

    """
    if filepath is None:
        return EngineSettings()
    if not filepath.exists():
        log_warning(
            f"Settings file '{filepath}' not found, using defaults.",
            {"filepath": str(filepath)},
        )
        return EngineSettings()
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return EngineSettings.model_validate(json.load(f))
    except (json.JSONDecodeError, ValidationError, ValueError) as e:
        raise FileError(f"Invalid settings file '{filepath}': {e}") from e
