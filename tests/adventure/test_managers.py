"""
Tests for the character and adventure creation rules.
"""

import pytest
from core.config import EngineSettings
from core.constants import Challenge, CharacterClass
from core.errors import (
    AdventureNameAlreadyExistsError,
    BossAmountExceededError,
    BossesToAddExceededError,
    CharacterAlreadyInThePartyError,
    CharacterNameAlreadyExistsError,
    EmptyEncounterError,
    InsufficientCharactersAmountError,
    InvalidCharacterClassError,
    InvalidCharacterLevelError,
    InvalidCharacterNameError,
    InvalidEncounterCountError,
    InvalidOptionError,
    InvalidPartySizeError,
    NoCharactersFoundError,
)
from entities.adventure import Encounter
from adventure.adventure_manager import AdventureManager
from adventure.character_manager import CharacterManager, format_name, is_valid_name, stat_from_roll
from persistence.repository import AdventureRepository, CharacterRepository


@pytest.fixture
def characters(tmp_path, scripted):
    return CharacterManager(CharacterRepository(tmp_path / "characters.json"), scripted([]))


@pytest.fixture
def adventures(tmp_path):
    return AdventureManager(AdventureRepository(tmp_path / "adventures.json"))


@pytest.fixture
def boss(monster_factory):
    return monster_factory("Dragon", challenge=Challenge.BOSS, hit_points=80)


# ============================================================================
# CHARACTERS
# ============================================================================


def test_names():
    assert is_valid_name("Brother Alden")
    assert not is_valid_name("R2D2")
    assert not is_valid_name(" Jinx")
    assert not is_valid_name("")
    assert format_name("jOHN doe") == "John Doe"


@pytest.mark.parametrize(
    "total, stat",
    [(2, -1), (3, 0), (5, 0), (6, 1), (9, 1), (10, 2), (11, 2), (12, 3)],
)
def test_stat_from_roll(total, stat):
    assert stat_from_roll(total) == stat


def test_roll_stat(tmp_path, scripted):
    manager = CharacterManager(CharacterRepository(tmp_path / "characters.json"), scripted([6, 6]))
    assert manager.roll_stat() == (6, 6, 3)


def test_validate_name(characters):
    with pytest.raises(InvalidCharacterNameError):
        characters.validate_name("Jinx99")
    assert characters.validate_name("jinx") == "Jinx"
    characters.create_character("jinx", "Ana", 1, 1, 0, 1, "adventurer")
    with pytest.raises(CharacterNameAlreadyExistsError):
        characters.validate_name("JINX")


def test_validate_level():
    with pytest.raises(InvalidCharacterLevelError):
        CharacterManager.validate_level(0)
    with pytest.raises(InvalidCharacterLevelError):
        CharacterManager.validate_level(11)
    assert CharacterManager.validate_level(10) == 10


def test_starting_class():
    assert CharacterManager.starting_class("Adventurer", 1) == CharacterClass.ADVENTURER
    assert CharacterManager.starting_class("adventurer", 5) == CharacterClass.WARRIOR
    assert CharacterManager.starting_class("CLERIC", 6) == CharacterClass.PALADIN
    assert CharacterManager.starting_class("mage", 9) == CharacterClass.MAGE
    with pytest.raises(InvalidCharacterClassError):
        CharacterManager.starting_class("Warrior", 5)


def test_create_and_search(characters):
    created = characters.create_character("selene", "Ana", 3, 0, 2, 1, "Mage")
    assert created.name == "Selene"
    assert created.xp == 200
    characters.create_character("gorm", "Bob", 4, 2, 0, 1, "Adventurer")

    everyone = characters.search()
    assert [member.name for member in everyone] == ["Selene", "Gorm"]
    assert everyone[1].character_class == CharacterClass.WARRIOR
    assert [member.name for member in characters.search("an")] == ["Selene"]
    with pytest.raises(NoCharactersFoundError):
        characters.search("Zed")

    assert characters.delete("Gorm")
    assert not characters.delete("Gorm")


def test_search_without_characters(characters):
    with pytest.raises(NoCharactersFoundError):
        characters.search()


def test_set_up_party(member_factory):
    jinx = member_factory("Jinx", xp=300, body=1)
    jinx.current_hp = 1
    jinx.shield = 4
    jinx.initiative = 9
    party = CharacterManager.set_up_party([jinx])
    assert party[0].character_class == CharacterClass.WARRIOR
    assert party[0].current_hp == party[0].max_hp == 44
    assert party[0].shield == 0
    assert party[0].initiative == 0


# ============================================================================
# ADVENTURES
# ============================================================================


def test_encounter_count_bounds(adventures):
    with pytest.raises(InvalidEncounterCountError):
        adventures.validate_encounter_count(0)
    with pytest.raises(InvalidEncounterCountError):
        adventures.validate_encounter_count(5)
    assert adventures.validate_encounter_count(4) == 4


def test_one_boss_per_encounter(monster_factory, boss):
    encounter = Encounter()
    with pytest.raises(BossesToAddExceededError):
        AdventureManager.add_monster(encounter, boss, 2)
    AdventureManager.add_monster(encounter, boss, 1)
    with pytest.raises(BossAmountExceededError):
        AdventureManager.add_monster(encounter, boss, 1)
    AdventureManager.add_monster(encounter, monster_factory("Goblin"), 3)
    assert encounter.total_monsters == 4


def test_empty_encounter(adventures, monster_factory):
    goblin = monster_factory("Goblin")
    with pytest.raises(EmptyEncounterError):
        adventures.remove_monster(Encounter(), goblin)
    encounter = Encounter({goblin: 1})
    adventures.remove_monster(encounter, goblin)
    assert encounter.is_empty()


def test_create_and_select_adventure(adventures, monster_factory, boss):
    encounters = [Encounter({monster_factory("Goblin"): 2}), Encounter({boss: 1})]
    adventures.create_adventure("Lair", encounters)
    assert adventures.adventure_names() == ["Lair"]
    with pytest.raises(AdventureNameAlreadyExistsError):
        adventures.create_adventure("Lair", encounters)
    with pytest.raises(EmptyEncounterError):
        adventures.create_adventure("Empty", [Encounter()])

    selected = adventures.select_adventure(0)
    assert selected.name == "Lair"
    assert selected.encounters[1].has_boss
    with pytest.raises(InvalidOptionError):
        adventures.select_adventure(1)


def test_party_size_rules(adventures):
    with pytest.raises(InsufficientCharactersAmountError):
        adventures.check_minimum_characters(2)
    adventures.check_minimum_characters(3)
    assert adventures.max_party_size(4) == 4
    assert adventures.max_party_size(9) == 5
    assert adventures.check_party_size(3, 4) == 3
    with pytest.raises(InvalidPartySizeError):
        adventures.check_party_size(2, 9)
    with pytest.raises(InvalidPartySizeError):
        adventures.check_party_size(5, 4)


def test_character_to_add():
    assert AdventureManager.check_character_to_add([0, 2], 1, 4) == 1
    with pytest.raises(InvalidOptionError):
        AdventureManager.check_character_to_add([], 4, 4)
    with pytest.raises(CharacterAlreadyInThePartyError):
        AdventureManager.check_character_to_add([0, 2], 2, 4)


def test_settings_change_the_bounds(tmp_path):
    settings = EngineSettings(min_party_size=2, max_party_size=3, max_encounters=2)
    manager = AdventureManager(AdventureRepository(tmp_path / "adventures.json"), settings)
    manager.check_minimum_characters(2)
    assert manager.max_party_size(10) == 3
    with pytest.raises(InvalidEncounterCountError):
        manager.validate_encounter_count(3)
