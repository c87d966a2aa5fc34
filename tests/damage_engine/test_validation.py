import pytest

from src.damage_engine.conditions import defender_ability, effective_weather, has_mold_breaker, is_grounded
from src.damage_engine.data.moves import get_move_data
from src.damage_engine.enums import Ability, Item, Move, Type, Weather
from src.damage_engine.exceptions import DamageEngineError, DataError, InvalidStateError
from src.damage_engine.schema.combatant import StatStages
from src.damage_engine.schema.field import BattleField
from src.damage_engine.utils.mon_factory import create_combatant
from src.damage_engine.validation import validate_combatant, validate_damaging_move, validate_stage


def test_error_taxonomy():
    assert issubclass(DataError, DamageEngineError)
    assert issubclass(InvalidStateError, DamageEngineError)


@pytest.mark.parametrize("stage", [-6, 0, 6])
def test_valid_stages_pass(stage):
    validate_stage(stage)


@pytest.mark.parametrize("stage", [-7, 7, 12])
def test_invalid_stages_raise(stage):
    with pytest.raises(InvalidStateError):
        validate_stage(stage, "attack")


def test_combatant_validation():
    validate_combatant(create_combatant(hp=0))
    validate_combatant(create_combatant(stages=StatStages(accuracy=-6, evasion=6)))
    with pytest.raises(InvalidStateError):
        validate_combatant(create_combatant(stages=StatStages(speed=-8)))
    with pytest.raises(InvalidStateError):
        validate_combatant(create_combatant(hp=-5))
    with pytest.raises(InvalidStateError):
        validate_combatant(create_combatant(max_hp=50, hp=51))


def test_damaging_move_validation():
    validate_damaging_move(get_move_data(Move.TACKLE))
    validate_damaging_move(get_move_data(Move.LOW_KICK))
    with pytest.raises(InvalidStateError):
        validate_damaging_move(get_move_data(Move.PROTECT))
    with pytest.raises(InvalidStateError):
        validate_damaging_move(get_move_data(Move.DRAGON_RAGE))


def test_unknown_move():
    with pytest.raises(DataError):
        get_move_data(Move.NONE)


def test_cloud_nine_negates_weather_from_either_side():
    rain = BattleField(weather=Weather.RAIN)
    plain = create_combatant()
    cloud_nine = create_combatant(ability=Ability.CLOUD_NINE)
    assert effective_weather(rain, plain, plain) == Weather.RAIN
    assert effective_weather(rain, cloud_nine, plain) == Weather.NONE
    assert effective_weather(rain, plain, cloud_nine) == Weather.NONE


def test_ignored_ability_is_inert():
    breaker = create_combatant(ability=Ability.MOLD_BREAKER)
    assert has_mold_breaker(breaker)
    assert not has_mold_breaker(breaker.model_copy(update={"abilities_ignored": True}))


def test_defender_ability_under_mold_breaker():
    sturdy = create_combatant(ability=Ability.STURDY)
    assert defender_ability(sturdy, False) == Ability.STURDY
    assert defender_ability(sturdy, True) == Ability.NONE
    multiscale = create_combatant(ability=Ability.MULTISCALE)
    assert defender_ability(multiscale, True) == Ability.MULTISCALE


def test_grounded():
    assert is_grounded(create_combatant())
    assert not is_grounded(create_combatant(types=[Type.NORMAL, Type.FLYING]))
    assert not is_grounded(create_combatant(item=Item.AIR_BALLOON))
    levitating = create_combatant(ability=Ability.LEVITATE)
    assert not is_grounded(levitating)
    assert is_grounded(levitating, mold_breaker_active=True)
    assert is_grounded(create_combatant(item=Item.AIR_BALLOON, item_active=False))
