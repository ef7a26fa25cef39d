"""
Tests for the narration lines.
"""

from core.constants import DamageType, HitResult, Stat
from entities.adventure import Encounter
from combat import narration
from combat.outcomes import ActionKind, ActionOutcome, PreparationOutcome, TargetEffect


def test_banners():
    assert narration.COMBAT_BANNER == "--------------------\n*** Combat stage ***\n--------------------"
    assert narration.PREPARATION_BANNER.splitlines()[1] == "*** Preparation stage ***"
    assert narration.SHORT_REST_BANNER.splitlines()[1] == "*** Short rest stage ***"
    assert narration.VICTORY == "All enemies area defeated."


def test_initiative_line():
    assert narration.initiative_line(12, "Jinx") == "  - 12    Jinx"
    assert narration.initiative_line(3, "Young Red Dragon (Boss)") == "  - 3     Young Red Dragon (Boss)"


def test_round_header_aligns_names(member_factory):
    jinx = member_factory("Jinx", xp=100, body=2)
    al = member_factory("Al", body=0)
    al.current_hp = 0
    lines = narration.round_header(2, [jinx, al])
    assert lines == [
        "Round 2:",
        "Party:",
        "  - Jinx     24 / 24 hit points",
        "  - Al       0 / 10 hit points",
    ]


def test_encounter_start(monster_factory):
    encounter = Encounter({monster_factory("Goblin"): 3})
    assert narration.encounter_start(1, encounter) == [
        "---------------------",
        "Starting Encounter 1:",
        "  - 3x Goblin",
    ]


def test_character_attack_lines():
    outcome = ActionOutcome(
        kind=ActionKind.CHARACTER_ATTACK,
        actor="Selene",
        action="Fireball",
        effect="attacks",
        hit=HitResult.CRITICAL,
        amount=6,
        damage_type=DamageType.MAGICAL,
        area=True,
        targets=(TargetEffect(name="Goblin", amount=6), TargetEffect(name="Orc", amount=6)),
    )
    assert narration.action(outcome) == (
        "Selene attacks Goblin and Orc with Fireball.\nCritical hit and deals 6 magical damage.\n"
    )


def test_miss_always_reads_physical():
    outcome = ActionOutcome(
        kind=ActionKind.MONSTER_ATTACK,
        actor="Kobold Shaman",
        effect="attacks",
        hit=HitResult.MISS,
        amount=0,
        damage_type=DamageType.MAGICAL,
        targets=(TargetEffect(name="Jinx", amount=0),),
    )
    assert narration.action(outcome) == "Kobold Shaman attacks Jinx\nFails and deals 0 physical damage.\n"


def test_heal_line():
    outcome = ActionOutcome(
        kind=ActionKind.HEAL,
        actor="Alden",
        action="Prayer of mass healing",
        effect="Heals",
        amount=5,
        party_wide=True,
        targets=(TargetEffect(name="Alden", amount=5), TargetEffect(name="Jinx", amount=1)),
    )
    assert narration.action(outcome) == "Alden uses Prayer of mass healing. Heals 5 hit points to Alden and Jinx\n"


def test_preparation_line():
    outcome = PreparationOutcome(
        actor="Alden",
        action="Blessing of good luck",
        effect="Everyone’s Mind increases in",
        stat=Stat.MIND,
        value=3,
        broadcast=3,
        is_self=False,
    )
    assert narration.preparation(outcome) == "Alden uses Blessing of good luck. Everyone’s Mind increases in +3."


def test_progression_lines():
    assert narration.experience_gained("Jinx", 30) == "Jinx gains 30 xp."
    assert narration.level_up("Jinx", 4) == " Jinx levels up. They are now lvl 4!"
    assert narration.evolution("Jinx", "Warrior") == "\nJinx evolves to Warrior!"
    assert narration.adventure_start("The Goblin Warren") == "The “The Goblin Warren” will start soon..."
    assert narration.unconscious("Gorm") == "Gorm is unconscious."
