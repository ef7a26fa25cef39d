"""
Encounters and adventures.

An Encounter keeps its monster templates in insertion order, which is
also the order in which their instances are spawned.
"""

from entities.monster import Monster
from entities.party import PartyMember


class Encounter:
    """An ordered mapping from monster template to the number of copies."""

    def __init__(self, monsters: dict[Monster, int] | None = None) -> None:
        self.monsters: dict[Monster, int] = {}
        for monster, count in (monsters or {}).items():
            self.add(monster, count)

    def add(self, monster: Monster, count: int) -> None:
        """
        Adds copies of a monster; adding an existing template raises its count.

        Args:
            monster (Monster): The monster template.
            count (int): How many copies to add, at least one.

        """
        if count <= 0:
            raise ValueError(f"Monster '{monster.name}' needs a positive count, got {count}")
        self.monsters[monster] = self.monsters.get(monster, 0) + count

    def remove(self, monster: Monster) -> None:
        """Removes a monster template and all its copies."""
        self.monsters.pop(monster, None)

    @property
    def has_boss(self) -> bool:
        return any(monster.is_boss for monster in self.monsters)

    @property
    def total_monsters(self) -> int:
        return sum(self.monsters.values())

    def is_empty(self) -> bool:
        return not self.monsters

    def spawn(self) -> list[Monster]:
        """
        Expands the templates into independent live monsters.

        Returns:
            list[Monster]: count fresh instances per template, in insertion order.

        """
        return [
            monster.spawn()
            for monster, count in self.monsters.items()
            for _ in range(count)
        ]

    def __iter__(self):
        return iter(self.monsters.items())

    def __len__(self) -> int:
        return len(self.monsters)

    def __repr__(self) -> str:
        content = ", ".join(f"{count}x {monster.name}" for monster, count in self)
        return f"Encounter({content})"


class Adventure:
    """
    A named sequence of encounters.

    The party is only attached while the adventure is played and is never
    stored with it.
    """

    def __init__(
        self,
        name: str,
        encounters: list[Encounter],
        encounter_count: int | None = None,
    ) -> None:
        self.name = name
        self.encounters = encounters
        self.encounter_count = len(encounters) if encounter_count is None else encounter_count
        if self.encounter_count != len(self.encounters):
            raise ValueError(
                f"Adventure '{name}' declares {self.encounter_count} encounters "
                f"but has {len(self.encounters)}"
            )
        self.party: list[PartyMember] = []

    def __repr__(self) -> str:
        return f"Adventure({self.name!r}, encounters={self.encounter_count})"
