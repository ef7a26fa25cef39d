"""
Party members.

A single PartyMember type carries a class tag; everything that changes
with the class is either read from the behaviour table or dispatched on
the tag here. Evolving never mutates a member: migrate() builds the new
one.
"""

from core.constants import (
    BASE_HP,
    CharacterClass,
    DamageType,
    Stat,
)
from core.dice import RandomSource
from core.logging import log_debug

from entities.behaviour import (
    BANDAGE_DIE,
    BLESSING_DIE,
    PRAYER_DIE,
    SHIELD_DIE,
    ClassBehaviour,
    behaviour_of,
)
from entities.progression import can_evolve, class_for_level, level_for_xp


class PartyMember:
    """
    A player-controlled combatant.

    Attributes:
        name (str):
            The unique name of the character.
        player (str):
            The player who owns the character.
        xp (int):
            The accumulated experience, never decreasing.
        body (int):
            The body stat, used by strikes and hit points.
        mind (int):
            The mind stat, used by spells and heals.
        spirit (int):
            The spirit stat, used by initiative and prayers.
        character_class (CharacterClass):
            The class tag selecting the behaviour.
        max_hp (int):
            Maximum hit points for the current adventure.
        current_hp (int):
            Remaining hit points.
        initiative (int):
            Initiative rolled for the current encounter.
        shield (int):
            Damage absorbed before hit points, only raised by mages.

    """

    name: str
    player: str
    xp: int
    body: int
    mind: int
    spirit: int
    character_class: CharacterClass
    max_hp: int
    current_hp: int
    initiative: int
    shield: int

    def __init__(
        self,
        name: str,
        player: str,
        xp: int,
        body: int,
        mind: int,
        spirit: int,
        character_class: CharacterClass,
        max_hp: int = 0,
        current_hp: int = 0,
        initiative: int = 0,
        shield: int = 0,
    ) -> None:
        assert xp >= 0, "Experience cannot be negative"
        self.name = name
        self.player = player
        self.xp = xp
        self.body = body
        self.mind = mind
        self.spirit = spirit
        self.character_class = character_class
        self.max_hp = max_hp
        self.current_hp = current_hp
        self.initiative = initiative
        self.shield = shield

    # ============================================================================
    # BEHAVIOUR
    # ============================================================================

    @property
    def behaviour(self) -> ClassBehaviour:
        return behaviour_of(self.character_class)

    @property
    def level(self) -> int:
        return level_for_xp(self.xp)

    @property
    def damage_type(self) -> DamageType:
        return self.behaviour.damage_type

    @property
    def passive(self) -> float:
        """Mitigation against same-type damage: a factor, or for mages a subtractor."""
        if self.behaviour.passive_scales_with_level:
            return float(self.level)
        return self.behaviour.passive

    @property
    def is_mage(self) -> bool:
        return self.character_class == CharacterClass.MAGE

    def stat_value(self, stat: Stat | None) -> int:
        """
        Returns the current value of a stat.

        Args:
            stat (Stat | None): The stat to read, None reads as zero.

        Returns:
            int: The value of the stat.

        """
        if stat is None:
            return 0
        if stat == Stat.BODY:
            return self.body
        if stat == Stat.MIND:
            return self.mind
        if stat == Stat.SPIRIT:
            return self.spirit
        if stat == Stat.SHIELD:
            return self.shield
        return self.current_hp

    # ============================================================================
    # HIT POINTS
    # ============================================================================

    def set_up_hp_for_adventure(self) -> None:
        """Recomputes the maximum HP from body and level and fully heals."""
        self.max_hp = (BASE_HP + self.body) * self.level
        if self.behaviour.hp_body_bonus:
            self.max_hp += self.body * self.level
        self.current_hp = self.max_hp

    def take_damage(self, amount: int) -> int:
        """
        Applies damage, draining the shield before hit points.

        Args:
            amount (int): The damage to apply.

        Returns:
            int: The hit points actually lost.

        """
        if amount <= 0:
            return 0
        if self.shield > 0:
            absorbed = min(self.shield, amount)
            self.shield -= absorbed
            amount -= absorbed
        lost = min(self.current_hp, amount)
        self.current_hp -= lost
        return lost

    def heal(self, amount: int) -> int:
        """
        Restores hit points without exceeding the maximum.

        Args:
            amount (int): The hit points to restore.

        Returns:
            int: The hit points actually restored.

        """
        if amount <= 0:
            return 0
        healed = min(self.max_hp - self.current_hp, amount)
        healed = max(healed, 0)
        self.current_hp += healed
        return healed

    def is_unconscious(self) -> bool:
        return self.current_hp <= 0

    def is_alive(self) -> bool:
        return not self.is_unconscious()

    def is_below_half_hp(self) -> bool:
        return self.current_hp < self.max_hp // 2

    # ============================================================================
    # STATS
    # ============================================================================

    def increase_stat(self, stat: Stat, value: int) -> int:
        """
        Raises a stat; hit points are raised through heal().

        Args:
            stat (Stat): The stat to raise.
            value (int): The amount to add.

        Returns:
            int: The requested amount.

        """
        if stat == Stat.BODY:
            self.body += value
        elif stat == Stat.MIND:
            self.mind += value
        elif stat == Stat.SPIRIT:
            self.spirit += value
        elif stat == Stat.SHIELD:
            self.shield += value
        elif stat == Stat.HIT_POINTS:
            self.heal(value)
        return value

    def decrease_stat(self, stat: Stat, value: int) -> None:
        """
        Lowers a stat; the shield stops at zero and hit points are lowered
        through take_damage().

        Args:
            stat (Stat): The stat to lower.
            value (int): The amount to remove.

        """
        if stat == Stat.BODY:
            self.body -= value
        elif stat == Stat.MIND:
            self.mind -= value
        elif stat == Stat.SPIRIT:
            self.spirit -= value
        elif stat == Stat.SHIELD:
            self.shield = max(0, self.shield - value)
        elif stat == Stat.HIT_POINTS:
            self.take_damage(value)

    # ============================================================================
    # ACTIONS
    # ============================================================================

    def roll_initiative(self, dice: RandomSource) -> int:
        """Rolls and stores the initiative for the coming encounter."""
        behaviour = self.behaviour
        self.initiative = dice.roll(behaviour.initiative_die) + self.stat_value(
            behaviour.initiative_stat
        )
        return self.initiative

    def do_preparation(self, dice: RandomSource) -> int:
        """
        Performs the preparation action.

        Self preparations change the actor right away; the others only
        produce the value that the encounter shares with the party.

        Args:
            dice (RandomSource): The source of randomness.

        Returns:
            int: The value of the preparation, as narrated and recorded.

        """
        cls = self.character_class
        if cls in (CharacterClass.ADVENTURER, CharacterClass.WARRIOR):
            return self.increase_stat(Stat.SPIRIT, 1)
        if cls in (CharacterClass.CHAMPION, CharacterClass.CLERIC):
            return 1
        if cls == CharacterClass.PALADIN:
            return dice.roll(BLESSING_DIE)
        if cls == CharacterClass.MAGE:
            self.shield = (dice.roll(SHIELD_DIE) + self.mind) * self.level
            return self.shield
        raise AssertionError(f"Unknown class {cls}")

    def preparation_broadcast(self, value: int) -> int:
        """The amount a preparation of the given value adds to every party member."""
        return 0 if self.behaviour.preparation.is_self else value

    def do_short_rest(self, dice: RandomSource) -> int:
        """
        Performs the short rest action.

        Self heals are applied here; party-wide heals only return the
        rolled amount, which the encounter then grants to every member.

        Args:
            dice (RandomSource): The source of randomness.

        Returns:
            int: The hit points restored, or rolled for a party-wide heal.

        """
        cls = self.character_class
        if cls in (CharacterClass.ADVENTURER, CharacterClass.WARRIOR):
            return self.heal(dice.roll(BANDAGE_DIE) + self.mind)
        if cls == CharacterClass.CHAMPION:
            return self.heal(self.max_hp - self.current_hp)
        if cls == CharacterClass.CLERIC:
            return self.heal(dice.roll(PRAYER_DIE) + self.mind)
        if cls == CharacterClass.PALADIN:
            return dice.roll(PRAYER_DIE) + self.mind
        if cls == CharacterClass.MAGE:
            return 0
        raise AssertionError(f"Unknown class {cls}")

    # ============================================================================
    # PROGRESSION
    # ============================================================================

    def gain_xp(self, experience: int) -> bool:
        """
        Adds experience.

        Args:
            experience (int): The experience gained, never negative.

        Returns:
            bool: True if the member reached a new level.

        """
        assert experience >= 0, "Experience gains cannot be negative"
        previous = self.level
        self.xp += experience
        return self.level > previous

    def can_evolve(self) -> bool:
        return can_evolve(self.character_class, self.level)

    def evolve(self) -> "PartyMember":
        """
        Returns the member in the class matching its level.

        Returns:
            PartyMember: A new member if the class changes, otherwise self.

        """
        if not self.can_evolve():
            return self
        evolved = migrate(self, class_for_level(self.character_class, self.level))
        log_debug(
            "Character evolved",
            {
                "name": self.name,
                "from": self.character_class.value,
                "to": evolved.character_class.value,
                "level": self.level,
            },
        )
        return evolved

    # ============================================================================
    # IDENTITY
    # ============================================================================

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartyMember):
            return False
        return self.name == other.name

    def __repr__(self) -> str:
        return (
            f"PartyMember({self.name!r}, {self.character_class.value}, "
            f"lvl={self.level}, hp={self.current_hp}/{self.max_hp})"
        )


def migrate(member: PartyMember, character_class: CharacterClass) -> PartyMember:
    """
    Copies a member into a new one of another class.

    Args:
        member (PartyMember): The member to copy, left untouched.
        character_class (CharacterClass): The class of the copy.

    Returns:
        PartyMember: The new member, identical apart from the class.

    """
    return PartyMember(
        name=member.name,
        player=member.player,
        xp=member.xp,
        body=member.body,
        mind=member.mind,
        spirit=member.spirit,
        character_class=character_class,
        max_hp=member.max_hp,
        current_hp=member.current_hp,
        initiative=member.initiative,
        shield=member.shield,
    )
