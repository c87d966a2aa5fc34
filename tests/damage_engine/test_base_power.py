import pytest

from src.damage_engine.base_power import get_dynamic_power, resolve_base_power, resolve_move_type
from src.damage_engine.data.moves import POWER_STRATEGIES, get_move_data
from src.damage_engine.enums import Ability, Item, Move, SideEffect, Status1, Status2, Terrain, Type, Weather
from src.damage_engine.exceptions import InvalidStateError
from src.damage_engine.schema.combatant import StatStages
from src.damage_engine.schema.field import BattleField
from src.damage_engine.utils.mon_factory import create_combatant


def dynamic(move, attacker=None, defender=None, weather=Weather.NONE):
    return get_dynamic_power(attacker or create_combatant(), defender or create_combatant(), get_move_data(move), weather)


def power_of(move, attacker=None, defender=None, field=None, target_ability=Ability.NONE):
    field = field or BattleField()
    return resolve_base_power(
        attacker or create_combatant(),
        defender or create_combatant(),
        get_move_data(move),
        field,
        field.weather,
        target_ability,
    )


# =========================================================================
# DYNAMIC POWER
# =========================================================================


@pytest.mark.parametrize("weight,expected", [(5.0, 20), (10.0, 40), (30.0, 60), (60.0, 80), (150.0, 100), (250.0, 120)])
def test_weight_based_power(weight, expected):
    defender = create_combatant(weight_kg=weight)
    assert dynamic(Move.LOW_KICK, defender=defender) == expected
    assert dynamic(Move.GRASS_KNOT, defender=defender) == expected


@pytest.mark.parametrize("attacker_weight,expected", [(100.0, 120), (80.0, 100), (60.0, 80), (40.0, 60), (30.0, 40)])
def test_weight_ratio_power(attacker_weight, expected):
    attacker = create_combatant(weight_kg=attacker_weight)
    defender = create_combatant(weight_kg=20.0)
    assert dynamic(Move.HEAVY_SLAM, attacker=attacker, defender=defender) == expected
    assert dynamic(Move.HEAT_CRASH, attacker=attacker, defender=defender) == expected


def test_eruption_scales_with_hp():
    assert dynamic(Move.ERUPTION) == 150
    assert dynamic(Move.WATER_SPOUT, attacker=create_combatant(max_hp=200, hp=100)) == 75
    assert dynamic(Move.ERUPTION, attacker=create_combatant(max_hp=200, hp=1)) == 1


@pytest.mark.parametrize("hp,expected", [(1, 200), (10, 150), (40, 100), (60, 80), (100, 40), (200, 20)])
def test_flail_scales_inversely_with_hp(hp, expected):
    attacker = create_combatant(max_hp=200, hp=hp)
    assert dynamic(Move.FLAIL, attacker=attacker) == expected
    assert dynamic(Move.REVERSAL, attacker=attacker) == expected


def test_friendship_moves():
    assert dynamic(Move.RETURN, attacker=create_combatant(friendship=255)) == 102
    assert dynamic(Move.FRUSTRATION, attacker=create_combatant(friendship=0)) == 102
    assert dynamic(Move.RETURN, attacker=create_combatant(friendship=0)) == 1


def test_facade_doubles_with_status():
    assert dynamic(Move.FACADE) == 70
    assert dynamic(Move.FACADE, attacker=create_combatant(status1=Status1.BURN)) == 140
    assert dynamic(Move.FACADE, attacker=create_combatant(status1=Status1.SLEEP)) == 70


def test_hex_doubles_against_status_or_comatose():
    assert dynamic(Move.HEX) == 65
    assert dynamic(Move.HEX, defender=create_combatant(status1=Status1.PARALYSIS)) == 130
    assert dynamic(Move.HEX, defender=create_combatant(ability=Ability.COMATOSE)) == 130


def test_weather_ball_changes_type_and_power():
    attacker = create_combatant()
    weather_ball = get_move_data(Move.WEATHER_BALL)
    assert resolve_move_type(attacker, weather_ball, Weather.RAIN) == (Type.WATER, False)
    assert resolve_move_type(attacker, weather_ball, Weather.SAND) == (Type.ROCK, False)
    assert resolve_move_type(attacker, weather_ball, Weather.STRONG_WINDS) == (Type.NORMAL, False)
    assert dynamic(Move.WEATHER_BALL, weather=Weather.HAIL) == 100
    assert dynamic(Move.WEATHER_BALL) == 50


def test_stored_power_counts_raised_stages():
    attacker = create_combatant(stages=StatStages(attack=2, speed=1, defense=-1))
    assert dynamic(Move.STORED_POWER, attacker=attacker) == 80
    assert dynamic(Move.POWER_TRIP, attacker=attacker) == 80


@pytest.mark.parametrize("uses,expected", [(0, 40), (1, 80), (2, 160), (5, 160)])
def test_fury_cutter_caps(uses, expected):
    assert dynamic(Move.FURY_CUTTER, attacker=create_combatant(consecutive_uses=uses)) == expected


@pytest.mark.parametrize("uses,expected", [(0, 40), (1, 80), (4, 200), (10, 200)])
def test_echoed_voice_caps(uses, expected):
    assert dynamic(Move.ECHOED_VOICE, attacker=create_combatant(consecutive_uses=uses)) == expected


def test_acrobatics_without_item():
    assert dynamic(Move.ACROBATICS) == 110
    assert dynamic(Move.ACROBATICS, attacker=create_combatant(item=Item.LIFE_ORB)) == 55
    assert dynamic(Move.ACROBATICS, attacker=create_combatant(item=Item.FIRE_GEM, item_active=False)) == 110


def test_knock_off_against_held_item():
    assert dynamic(Move.KNOCK_OFF) == 65
    assert dynamic(Move.KNOCK_OFF, defender=create_combatant(item=Item.LIFE_ORB)) == 97


def test_broken_strategy_raises(monkeypatch):
    monkeypatch.setitem(POWER_STRATEGIES, Move.TACKLE, lambda attacker, defender, move, weather: 0)
    with pytest.raises(InvalidStateError):
        dynamic(Move.TACKLE)


def test_powerless_move_without_strategy_raises():
    with pytest.raises(InvalidStateError):
        dynamic(Move.SEISMIC_TOSS)


# =========================================================================
# POWER CHAIN
# =========================================================================


def test_plain_move_keeps_its_power():
    result = power_of(Move.TACKLE)
    assert result.power == 40
    assert result.move_type == Type.NORMAL
    assert result.side_effects == []


def test_terrain_boosts_grounded_attacker():
    electric = BattleField(terrain=Terrain.ELECTRIC)
    assert power_of(Move.THUNDERBOLT, field=electric).power == 135
    assert power_of(Move.THUNDERBOLT, attacker=create_combatant(types=[Type.FLYING]), field=electric).power == 90
    assert power_of(Move.THUNDERBOLT, attacker=create_combatant(ability=Ability.LEVITATE), field=electric).power == 90


def test_misty_and_grassy_terrain_weaken_moves_against_grounded_targets():
    assert power_of(Move.DRAGON_CLAW, field=BattleField(terrain=Terrain.MISTY)).power == 40
    assert power_of(Move.EARTHQUAKE, field=BattleField(terrain=Terrain.GRASSY)).power == 50
    balloon = create_combatant(item=Item.AIR_BALLOON)
    assert power_of(Move.DRAGON_CLAW, defender=balloon, field=BattleField(terrain=Terrain.MISTY)).power == 80


def test_sports_divide_by_three():
    assert power_of(Move.THUNDERBOLT, field=BattleField(mud_sport=True)).power == 30
    assert power_of(Move.FLAMETHROWER, field=BattleField(water_sport=True)).power == 30
    assert power_of(Move.FLAMETHROWER, field=BattleField(mud_sport=True)).power == 90


def test_helping_hand_and_me_first():
    assert power_of(Move.TACKLE, attacker=create_combatant(helping_hand=True)).power == 60
    assert power_of(Move.TACKLE, attacker=create_combatant(helping_hand=True, me_first=True)).power == 90


def test_technician():
    assert power_of(Move.TACKLE, attacker=create_combatant(ability=Ability.TECHNICIAN)).power == 60
    assert power_of(Move.BODY_SLAM, attacker=create_combatant(ability=Ability.TECHNICIAN)).power == 85


def test_ate_abilities_change_type_and_boost():
    result = power_of(Move.TACKLE, attacker=create_combatant(ability=Ability.PIXILATE))
    assert result.move_type == Type.FAIRY
    assert result.power == 48
    # Only Normal moves are converted
    assert power_of(Move.EMBER, attacker=create_combatant(ability=Ability.REFRIGERATE)).move_type == Type.FIRE


def test_flag_abilities():
    assert power_of(Move.MACH_PUNCH, attacker=create_combatant(ability=Ability.IRON_FIST)).power == 48
    assert power_of(Move.TACKLE, attacker=create_combatant(ability=Ability.TOUGH_CLAWS)).power == 53
    assert power_of(Move.CRUNCH, attacker=create_combatant(ability=Ability.STRONG_JAW)).power == 120
    assert power_of(Move.EMBER, attacker=create_combatant(ability=Ability.TOUGH_CLAWS)).power == 40


def test_pinch_abilities():
    assert power_of(Move.EMBER, attacker=create_combatant(ability=Ability.BLAZE, max_hp=200, hp=66)).power == 60
    assert power_of(Move.EMBER, attacker=create_combatant(ability=Ability.BLAZE, max_hp=200, hp=67)).power == 40


def test_auras_and_aura_break():
    assert power_of(Move.CRUNCH, attacker=create_combatant(ability=Ability.DARK_AURA)).power == 106
    assert power_of(Move.CRUNCH, defender=create_combatant(ability=Ability.DARK_AURA)).power == 106
    broken = power_of(
        Move.CRUNCH,
        attacker=create_combatant(ability=Ability.DARK_AURA),
        defender=create_combatant(ability=Ability.AURA_BREAK),
    )
    assert broken.power == 60


def test_defender_power_abilities():
    assert power_of(Move.EMBER, target_ability=Ability.THICK_FAT).power == 20
    assert power_of(Move.ICE_BEAM, target_ability=Ability.THICK_FAT).power == 45
    assert power_of(Move.FLAMETHROWER, target_ability=Ability.DRY_SKIN).power == 112


def test_power_items():
    assert power_of(Move.TACKLE, attacker=create_combatant(item=Item.MUSCLE_BAND)).power == 44
    assert power_of(Move.EMBER, attacker=create_combatant(item=Item.MUSCLE_BAND)).power == 40
    assert power_of(Move.EMBER, attacker=create_combatant(item=Item.CHARCOAL)).power == 48


def test_gem_is_consumed():
    result = power_of(Move.EMBER, attacker=create_combatant(item=Item.FIRE_GEM))
    assert result.power == 52
    assert result.side_effects == [SideEffect.GEM_CONSUMED]
    assert power_of(Move.TACKLE, attacker=create_combatant(item=Item.FIRE_GEM)).side_effects == []


def test_charge_doubles_electric_moves():
    charged = create_combatant(status2=Status2.CHARGED)
    result = power_of(Move.THUNDERBOLT, attacker=charged)
    assert result.power == 180
    assert result.side_effects == [SideEffect.CHARGE_CONSUMED]
    assert power_of(Move.TACKLE, attacker=charged).side_effects == []
