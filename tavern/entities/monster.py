"""
Monsters.

A Monster is used both as an encounter template and, once spawned, as the
live instance fighting the party. Bosses and standard monsters (minions
and lieutenants) differ only through their challenge tag.
"""

from core.constants import D12, Challenge, DamageType
from core.dice import RandomSource, parse_die


class Monster:
    """
    A monster template or instance.

    Attributes:
        name (str):
            The name of the monster, also its identity.
        challenge (Challenge):
            The tier of the monster.
        experience (int):
            Experience granted to the party when it dies.
        hit_points (int):
            Remaining hit points.
        base_initiative (int):
            Initiative of the template, before the d12 roll.
        initiative (int):
            Initiative rolled for the current encounter.
        damage_dice (str):
            The damage die notation, e.g. 'd8'.
        damage_type (DamageType):
            The type of damage dealt by the monster.

    """

    def __init__(
        self,
        name: str,
        challenge: Challenge,
        experience: int,
        hit_points: int,
        initiative: int,
        damage_dice: str,
        damage_type: DamageType,
    ) -> None:
        if experience < 0:
            raise ValueError(f"Monster '{name}' cannot grant negative experience")
        if hit_points < 0:
            raise ValueError(f"Monster '{name}' cannot have negative hit points")
        self.name = name
        self.challenge = challenge
        self.experience = experience
        self.hit_points = hit_points
        self.base_initiative = initiative
        self.initiative = initiative
        self.damage_dice = damage_dice
        self.damage_sides = parse_die(damage_dice)
        self.damage_type = damage_type

    @property
    def is_boss(self) -> bool:
        return self.challenge == Challenge.BOSS

    @property
    def is_area_attacker(self) -> bool:
        """Bosses strike the whole party at once."""
        return self.is_boss

    @property
    def resistance(self) -> float:
        return self.challenge.resistance

    @property
    def display_name(self) -> str:
        """The name as narrated, with the '(Boss)' suffix for bosses."""
        if self.is_boss:
            return f"{self.name} ({self.challenge.display_name})"
        return self.name

    def spawn(self) -> "Monster":
        """Creates an independent live instance of this template."""
        return Monster(
            name=self.name,
            challenge=self.challenge,
            experience=self.experience,
            hit_points=self.hit_points,
            initiative=self.base_initiative,
            damage_dice=self.damage_dice,
            damage_type=self.damage_type,
        )

    def roll_initiative(self, dice: RandomSource) -> int:
        """Rolls and stores the initiative: template initiative plus a d12."""
        self.initiative = self.base_initiative + dice.roll(D12)
        return self.initiative

    def take_damage(self, amount: int) -> int:
        """
        Applies damage without going below zero.

        Args:
            amount (int): The damage to apply.

        Returns:
            int: The hit points actually lost.

        """
        if amount <= 0:
            return 0
        lost = min(self.hit_points, amount)
        self.hit_points -= lost
        return lost

    def is_dead(self) -> bool:
        return self.hit_points <= 0

    def is_alive(self) -> bool:
        return not self.is_dead()

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Monster):
            return False
        return self.name == other.name

    def __repr__(self) -> str:
        return f"Monster({self.name!r}, {self.challenge.value}, hp={self.hit_points})"
