"""
JSON repositories for characters, monsters and adventures.

Each repository reads and writes a single JSON list and converts between
stored records and engine entities.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from catchery import log_warning
from pydantic import BaseModel, ValidationError

from core.errors import FileError, PersistenceError
from core.logging import log_debug
from entities.adventure import Adventure
from entities.monster import Monster
from entities.party import PartyMember

from persistence.records import AdventureRecord, CharacterRecord, MonsterRecord

R = TypeVar("R", bound=BaseModel)


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], list[R]],
    description: str,
    required: bool = True,
) -> list[R]:
    """
    Helper to load and validate a JSON list.

    Args:
        filepath (Path): The file to read.
        loader_func (Callable[[list[dict]], list[R]]): Converts the raw list.
        description (str): What the file holds, for the logs.
        required (bool): Whether a missing file is an error or an empty list.

    Raises:
        FileError: If the file cannot be read or its content is invalid.

    Returns:
        list[R]: The loaded records.

    """
    if not filepath.exists():
        if required:
            raise FileError(f"File not found: {filepath}")
        log_warning(
            f"No {description} stored yet, starting empty.",
            {"filepath": str(filepath)},
        )
        return []
    try:
        log_debug(f"Loading {description}", {"filepath": str(filepath)})
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, OSError, ValidationError, ValueError) as e:
        raise FileError(f"File {filepath} raised an error: {e}") from e


def _save_json_file(filepath: Path, records: list[BaseModel], description: str) -> None:
    """
    Helper to write records as a JSON list.

    Raises:
        FileError: If the file cannot be written.

    """
    data: list[dict[str, Any]] = [
        record.model_dump(mode="json", by_alias=True) for record in records
    ]
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise FileError(f"Cannot write {description} to {filepath}: {e}") from e
    log_debug(f"Saved {description}", {"filepath": str(filepath), "count": len(data)})


class CharacterRepository:
    """Characters stored in characters.json."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath

    def _records(self) -> list[CharacterRecord]:
        return _load_json_file(
            self.filepath,
            lambda data: [CharacterRecord.model_validate(item) for item in data],
            "characters",
            required=False,
        )

    def read_all(self) -> list[PartyMember]:
        return [record.to_member() for record in self._records()]

    def names(self) -> list[str]:
        return [record.name for record in self._records()]

    def by_player(self, player: str) -> list[PartyMember]:
        """Characters whose player name contains the given text, ignoring case."""
        needle = player.lower()
        return [
            record.to_member()
            for record in self._records()
            if needle in record.player.lower()
        ]

    def save(self, member: PartyMember) -> None:
        """Adds a new character."""
        records = self._records()
        if any(record.name == member.name for record in records):
            raise PersistenceError(f"Character '{member.name}' is already stored")
        records.append(CharacterRecord.from_member(member))
        _save_json_file(self.filepath, records, "characters")

    def save_all(self, members: list[PartyMember]) -> None:
        """Replaces the stored characters that share a name with the given ones."""
        updated = {member.name: CharacterRecord.from_member(member) for member in members}
        records = [updated.pop(record.name, record) for record in self._records()]
        for name in updated:
            log_warning(
                f"Character '{name}' was not stored, adding it.",
                {"name": name, "context": "save_all"},
            )
        records.extend(updated.values())
        _save_json_file(self.filepath, records, "characters")

    def delete(self, name: str) -> bool:
        """
        Deletes a character by name.

        Returns:
            bool: True if a character was deleted.

        """
        records = self._records()
        kept = [record for record in records if record.name != name]
        if len(kept) == len(records):
            return False
        _save_json_file(self.filepath, kept, "characters")
        return True


class MonsterRepository:
    """Monster templates stored in monsters.json."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath

    def read_all(self) -> list[Monster]:
        records = _load_json_file(
            self.filepath,
            lambda data: [MonsterRecord.model_validate(item) for item in data],
            "monsters",
        )
        return [record.to_monster() for record in records]

    def get(self, index: int) -> Monster:
        monsters = self.read_all()
        if not 0 <= index < len(monsters):
            raise PersistenceError(f"No monster at index {index}")
        return monsters[index]


class AdventureRepository:
    """Adventures stored in adventures.json."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath

    def _records(self) -> list[AdventureRecord]:
        return _load_json_file(
            self.filepath,
            lambda data: [AdventureRecord.model_validate(item) for item in data],
            "adventures",
            required=False,
        )

    def read_all(self) -> list[Adventure]:
        return [record.to_adventure() for record in self._records()]

    def names(self) -> list[str]:
        return [record.name for record in self._records()]

    def get(self, index: int) -> Adventure:
        records = self._records()
        if not 0 <= index < len(records):
            raise PersistenceError(f"No adventure at index {index}")
        return records[index].to_adventure()

    def save(self, adventure: Adventure) -> None:
        records = self._records()
        records.append(AdventureRecord.from_adventure(adventure))
        _save_json_file(self.filepath, records, "adventures")
