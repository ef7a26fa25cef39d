"""
Tests for experience grants, level ups and evolution after an encounter.
"""

from core.constants import CharacterClass
from combat.rewards import grant_experience


def test_every_conscious_member_gets_the_full_amount(member_factory):
    party = [member_factory(name, xp=100) for name in ("A", "B", "C")]
    lines = grant_experience(party, 30)
    assert [member.xp for member in party] == [130, 130, 130]
    assert lines == ["A gains 30 xp.", "B gains 30 xp.", "C gains 30 xp."]


def test_unconscious_members_get_nothing(member_factory):
    awake = member_factory("Jinx")
    fallen = member_factory("Gorm")
    fallen.current_hp = 0
    lines = grant_experience([awake, fallen], 50)
    assert awake.xp == 50
    assert fallen.xp == 0
    assert lines == ["Jinx gains 50 xp."]


def test_level_up_recomputes_hit_points(member_factory):
    member = member_factory("Ysolde", CharacterClass.CLERIC, xp=90, body=1)
    member.current_hp = 2
    lines = grant_experience([member], 20)
    assert member.level == 2
    assert member.max_hp == 22
    assert member.current_hp == 22
    assert lines == ["Ysolde gains 20 xp. Ysolde levels up. They are now lvl 2!"]


def test_evolution_replaces_the_member(member_factory):
    jinx = member_factory("Jinx", xp=250, body=1)
    party = [jinx]
    lines = grant_experience(party, 60)
    evolved = party[0]
    assert evolved is not jinx
    assert evolved.character_class == CharacterClass.WARRIOR
    assert evolved.xp == 310
    assert evolved.max_hp == 44
    assert evolved.current_hp == 44
    assert lines == ["Jinx gains 60 xp. Jinx levels up. They are now lvl 4!\nJinx evolves to Warrior!"]


def test_negative_experience_is_ignored(member_factory):
    member = member_factory("Jinx", xp=120)
    assert grant_experience([member], -10) == []
    assert member.xp == 120
