from fractions import Fraction

import pytest

from src.damage_engine.data.moves import get_move_data
from src.damage_engine.enums import Ability, Item, Move, StageTable, Status1, Type, Weather
from src.damage_engine.exceptions import InvalidStateError
from src.damage_engine.stat_stages import apply_stage, effective_stat, get_attack_stat, get_defense_stat, stage_multiplier
from src.damage_engine.utils.mon_factory import create_combatant


@pytest.mark.parametrize(
    "stage,expected",
    [
        (-6, Fraction(2, 8)),
        (-5, Fraction(2, 7)),
        (-4, Fraction(2, 6)),
        (-3, Fraction(2, 5)),
        (-2, Fraction(2, 4)),
        (-1, Fraction(2, 3)),
        (0, Fraction(1)),
        (1, Fraction(3, 2)),
        (2, Fraction(4, 2)),
        (3, Fraction(5, 2)),
        (4, Fraction(6, 2)),
        (5, Fraction(7, 2)),
        (6, Fraction(8, 2)),
    ],
)
def test_stage_multiplier_table(stage, expected):
    assert stage_multiplier(stage) == expected


@pytest.mark.parametrize("stage,expected", [(-6, Fraction(3, 9)), (-2, Fraction(3, 5)), (1, Fraction(4, 3)), (6, Fraction(9, 3))])
def test_accuracy_stage_table(stage, expected):
    assert stage_multiplier(stage, StageTable.ACCURACY) == expected


@pytest.mark.parametrize("stage", [-7, 7, 12])
def test_out_of_range_stage_raises(stage):
    with pytest.raises(InvalidStateError):
        stage_multiplier(stage)
    with pytest.raises(InvalidStateError):
        apply_stage(100, stage)


def test_apply_stage_floors_and_never_drops_below_one():
    assert apply_stage(100, -1) == 66
    assert apply_stage(100, 2) == 200
    assert apply_stage(55, 1) == 82
    assert apply_stage(1, -6) == 1


def test_critical_hit_ignores_attacker_drops_only():
    assert effective_stat(100, -2, is_critical=True, is_attacker=True) == 100
    assert effective_stat(100, 2, is_critical=True, is_attacker=True) == 200


def test_critical_hit_ignores_defender_boosts_only():
    assert effective_stat(100, 2, is_critical=True, is_attacker=False) == 100
    assert effective_stat(100, -2, is_critical=True, is_attacker=False) == 50


def test_ignore_stages_uses_raw_stat():
    assert effective_stat(100, 6, ignore_stages=True) == 100
    assert effective_stat(100, -6, ignore_stages=True) == 100


def test_huge_power_doubles_attack():
    attacker = create_combatant(attack=100, ability=Ability.HUGE_POWER)
    assert get_attack_stat(attacker, Ability.NONE, get_move_data(Move.TACKLE), is_critical=False) == 200
    # Special moves are untouched
    assert get_attack_stat(attacker, Ability.NONE, get_move_data(Move.EMBER), is_critical=False) == 100


def test_guts_needs_a_status():
    attacker = create_combatant(attack=100, ability=Ability.GUTS)
    tackle = get_move_data(Move.TACKLE)
    assert get_attack_stat(attacker, Ability.NONE, tackle, is_critical=False) == 100
    burned = attacker.model_copy(update={"status1": Status1.BURN})
    assert get_attack_stat(burned, Ability.NONE, tackle, is_critical=False) == 150


def test_choice_items_boost_matching_stat():
    band = create_combatant(attack=100, sp_attack=100, item=Item.CHOICE_BAND)
    specs = create_combatant(attack=100, sp_attack=100, item=Item.CHOICE_SPECS)
    tackle = get_move_data(Move.TACKLE)
    ember = get_move_data(Move.EMBER)
    assert get_attack_stat(band, Ability.NONE, tackle, is_critical=False) == 150
    assert get_attack_stat(band, Ability.NONE, ember, is_critical=False) == 100
    assert get_attack_stat(specs, Ability.NONE, ember, is_critical=False) == 150


def test_defender_unaware_ignores_attack_boosts():
    attacker = create_combatant(attack=100)
    attacker = attacker.model_copy(update={"stages": attacker.stages.model_copy(update={"attack": 6})})
    tackle = get_move_data(Move.TACKLE)
    assert get_attack_stat(attacker, Ability.NONE, tackle, is_critical=False) == 400
    assert get_attack_stat(attacker, Ability.UNAWARE, tackle, is_critical=False) == 100


def test_sandstorm_boosts_rock_special_defense():
    attacker = create_combatant()
    rock = create_combatant(types=[Type.ROCK], sp_defense=100)
    ember = get_move_data(Move.EMBER)
    assert get_defense_stat(attacker, rock, Ability.NONE, ember, False, Weather.SAND) == 150
    assert get_defense_stat(attacker, rock, Ability.NONE, ember, False, Weather.NONE) == 100
    assert get_defense_stat(attacker, rock, Ability.NONE, get_move_data(Move.TACKLE), False, Weather.SAND) == 100


def test_marvel_scale_respects_suppression():
    defender = create_combatant(defense=100, ability=Ability.MARVEL_SCALE, status1=Status1.PARALYSIS)
    attacker = create_combatant()
    tackle = get_move_data(Move.TACKLE)
    assert get_defense_stat(attacker, defender, Ability.MARVEL_SCALE, tackle, False, Weather.NONE) == 150
    # Suppressed by Mold Breaker: the caller passes the ability as NONE
    assert get_defense_stat(attacker, defender, Ability.NONE, tackle, False, Weather.NONE) == 100


def test_assault_vest_boosts_special_defense():
    defender = create_combatant(sp_defense=100, item=Item.ASSAULT_VEST)
    attacker = create_combatant()
    assert get_defense_stat(attacker, defender, Ability.NONE, get_move_data(Move.EMBER), False, Weather.NONE) == 150
