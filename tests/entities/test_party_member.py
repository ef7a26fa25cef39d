"""
Tests for party members: hit points, stats, class actions and evolution.
"""

from core.constants import CharacterClass, DamageType, Stat
from entities.party import PartyMember, migrate


def test_hit_points_scale_with_body_and_level(member_factory):
    """Max HP is (10 + body) * level."""
    member = member_factory("Jinx", xp=100, body=2)
    assert member.level == 2
    assert member.max_hp == 24
    assert member.current_hp == 24


def test_champion_gets_extra_hit_points(member_factory):
    """Champions add body * level on top of the usual formula."""
    member = member_factory("Gorm", CharacterClass.CHAMPION, xp=700, body=2)
    assert member.level == 8
    assert member.max_hp == 12 * 8 + 2 * 8


def test_heal_is_capped(member_factory):
    member = member_factory("Jinx", xp=100, body=2)
    member.current_hp = 20
    assert member.heal(10) == 4
    assert member.current_hp == 24
    assert member.heal(5) == 0
    assert member.heal(-3) == 0


def test_damage_stops_at_zero(member_factory):
    member = member_factory("Jinx", body=0)
    assert member.take_damage(25) == 10
    assert member.current_hp == 0
    assert member.is_unconscious()
    assert not member.is_alive()


def test_shield_absorbs_before_hit_points(member_factory):
    """A shield of 5 hit for 8 leaves no shield and costs 3 hit points."""
    mage = member_factory("Selene", CharacterClass.MAGE, body=0)
    mage.shield = 5
    assert mage.take_damage(8) == 3
    assert mage.shield == 0
    assert mage.current_hp == 7


def test_below_half_uses_integer_half(member_factory):
    member = member_factory("Jinx", body=1)
    assert member.max_hp == 11
    member.current_hp = 5
    assert not member.is_below_half_hp()
    member.current_hp = 4
    assert member.is_below_half_hp()


def test_stats_go_up_and_down(member_factory):
    member = member_factory("Jinx", spirit=1, mind=1)
    assert member.increase_stat(Stat.SPIRIT, 2) == 2
    assert member.spirit == 3
    member.decrease_stat(Stat.MIND, 1)
    assert member.mind == 0
    member.shield = 2
    member.decrease_stat(Stat.SHIELD, 5)
    assert member.shield == 0


def test_mage_passive_is_its_level(member_factory):
    mage = member_factory("Selene", CharacterClass.MAGE, xp=300)
    assert mage.is_mage
    assert mage.damage_type == DamageType.MAGICAL
    assert mage.passive == 4.0
    warrior = member_factory("Gorm", CharacterClass.WARRIOR, xp=300)
    assert warrior.passive == 0.5


def test_initiative_uses_class_die_and_stat(member_factory, scripted):
    adventurer = member_factory("Jinx", spirit=2)
    mage = member_factory("Selene", CharacterClass.MAGE, mind=3)
    dice = scripted([7, 15])
    assert adventurer.roll_initiative(dice) == 9
    assert mage.roll_initiative(dice) == 18
    assert dice.requested == [12, 20]


def test_preparations(member_factory, scripted):
    adventurer = member_factory("Jinx", spirit=1)
    assert adventurer.do_preparation(scripted([])) == 1
    assert adventurer.spirit == 2
    assert adventurer.preparation_broadcast(1) == 0

    champion = member_factory("Gorm", CharacterClass.CHAMPION, xp=700)
    assert champion.do_preparation(scripted([])) == 1
    assert champion.preparation_broadcast(1) == 1

    paladin = member_factory("Alden", CharacterClass.PALADIN, xp=400)
    assert paladin.do_preparation(scripted([3])) == 3
    assert paladin.preparation_broadcast(3) == 3


def test_mage_shield_preparation(member_factory, scripted):
    """The shield is (d6 + mind) * level and replaces any previous shield."""
    mage = member_factory("Selene", CharacterClass.MAGE, xp=100, mind=2)
    mage.shield = 40
    assert mage.do_preparation(scripted([3])) == 10
    assert mage.shield == 10
    assert mage.preparation_broadcast(10) == 0


def test_short_rests(member_factory, scripted):
    adventurer = member_factory("Jinx", body=5, mind=1)
    adventurer.current_hp = 5
    assert adventurer.do_short_rest(scripted([4])) == 5
    assert adventurer.current_hp == 10

    champion = member_factory("Gorm", CharacterClass.CHAMPION, xp=700)
    champion.current_hp = 1
    assert champion.do_short_rest(scripted([])) == champion.max_hp - 1
    assert champion.current_hp == champion.max_hp

    paladin = member_factory("Alden", CharacterClass.PALADIN, xp=400, mind=2)
    paladin.current_hp = 1
    assert paladin.do_short_rest(scripted([6])) == 8
    assert paladin.current_hp == 1

    mage = member_factory("Selene", CharacterClass.MAGE)
    assert mage.do_short_rest(scripted([])) == 0


def test_gain_xp_reports_level_up(member_factory):
    member = member_factory("Jinx", xp=90)
    assert not member.gain_xp(5)
    assert member.gain_xp(5)
    assert member.xp == 100
    assert member.level == 2


def test_level_three_adventurer_does_not_evolve(member_factory):
    member = member_factory("Jinx", xp=250)
    assert not member.can_evolve()
    assert member.evolve() is member


def test_level_four_adventurer_becomes_warrior(member_factory):
    member = member_factory("Jinx", xp=300)
    evolved = member.evolve()
    assert evolved is not member
    assert evolved.character_class == CharacterClass.WARRIOR
    assert member.character_class == CharacterClass.ADVENTURER
    assert evolved == member


def test_migrate_copies_every_field():
    member = PartyMember(
        name="Ysolde",
        player="Ana",
        xp=420,
        body=1,
        mind=3,
        spirit=2,
        character_class=CharacterClass.CLERIC,
        max_hp=40,
        current_hp=33,
        initiative=9,
        shield=0,
    )
    copy = migrate(member, CharacterClass.PALADIN)
    assert copy.character_class == CharacterClass.PALADIN
    for field in ("name", "player", "xp", "body", "mind", "spirit", "max_hp", "current_hp", "initiative", "shield"):
        assert getattr(copy, field) == getattr(member, field)


def test_members_are_identified_by_name(member_factory):
    assert member_factory("Jinx") == member_factory("Jinx", CharacterClass.MAGE)
    assert len({member_factory("Jinx"), member_factory("Jinx"), member_factory("Gorm")}) == 2
