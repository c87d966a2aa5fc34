"""
Base-Power Resolver

Power is built in a fixed order, truncating after every step:

    dynamic power -> terrain / sports -> Helping Hand, Me First -> abilities -> items -> Charge

The move's type is settled first, since -ate abilities, Normalize and Weather Ball change
the type that every later step (and STAB / type effectiveness) keys on.
"""

import logging
from fractions import Fraction

from src.damage_engine.constants import ATE_BOOST, GEM_BOOST, SPORT_DIVISOR, TERRAIN_BOOST, TYPE_ITEM_BOOST
from src.damage_engine.conditions import is_grounded
from src.damage_engine.data.abilities import (
    ATE_ABILITIES,
    AURA_ABILITIES,
    AURA_BREAK_MULTIPLIER,
    AURA_MULTIPLIER,
    DEFENDER_POWER_ABILITIES,
    FLAG_POWER_ABILITIES,
    FLASH_FIRE_MULTIPLIER,
    PINCH_ABILITIES,
    PINCH_MULTIPLIER,
    SAND_FORCE_MULTIPLIER,
    SAND_FORCE_TYPES,
    TECHNICIAN_MULTIPLIER,
    TECHNICIAN_THRESHOLD,
)
from src.damage_engine.data.items import get_hold_effect, get_hold_effect_param
from src.damage_engine.data.moves import GRASSY_WEAKENED_MOVES, POWER_STRATEGIES, WEATHER_BALL_TYPES
from src.damage_engine.enums import Ability, HoldEffect, Move, SideEffect, Terrain, Type, Weather
from src.damage_engine.exceptions import InvalidStateError
from src.damage_engine.schema.combatant import Combatant
from src.damage_engine.schema.field import BattleField
from src.damage_engine.schema.move import BattleMove
from src.damage_engine.schema.results import PowerResult

logger = logging.getLogger(__name__)

TERRAIN_TYPES = {
    Terrain.ELECTRIC: Type.ELECTRIC,
    Terrain.GRASSY: Type.GRASS,
    Terrain.PSYCHIC: Type.PSYCHIC,
}


def _scale(power: int, multiplier: Fraction) -> int:
    return max(1, int(power * multiplier))


def resolve_move_type(attacker: Combatant, move: BattleMove, weather: Weather) -> tuple[Type, bool]:
    """
    Type the move is used as, and whether an -ate ability (or Normalize) converted it.

    Returns:
        (move_type, ate_boosted)
    """
    if move.id == Move.WEATHER_BALL and weather in WEATHER_BALL_TYPES:
        return WEATHER_BALL_TYPES[weather], False

    ability = attacker.effective_ability()
    if ability == Ability.NORMALIZE:
        return Type.NORMAL, True
    if move.type == Type.NORMAL and ability in ATE_ABILITIES:
        return ATE_ABILITIES[ability], True
    return move.type, False


def get_dynamic_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    strategy = POWER_STRATEGIES.get(move.id)
    if strategy is None:
        if move.power is None:
            raise InvalidStateError(f"{move.id.name} has no power and no power strategy")
        return move.power

    power = strategy(attacker, defender, move, weather)
    if power <= 0:
        raise InvalidStateError(f"power strategy for {move.id.name} returned {power}")
    return power


def _field_multiplier(
    attacker: Combatant,
    defender: Combatant,
    move: BattleMove,
    move_type: Type,
    field: BattleField,
    mold_breaker_active: bool,
) -> Fraction:
    multiplier = Fraction(1)
    if TERRAIN_TYPES.get(field.terrain) == move_type and is_grounded(attacker):
        multiplier *= TERRAIN_BOOST

    defender_grounded = is_grounded(defender, mold_breaker_active)
    if field.terrain == Terrain.MISTY and move_type == Type.DRAGON and defender_grounded:
        multiplier *= Fraction(1, 2)
    if field.terrain == Terrain.GRASSY and move.id in GRASSY_WEAKENED_MOVES and defender_grounded:
        multiplier *= Fraction(1, 2)

    if field.mud_sport and move_type == Type.ELECTRIC:
        multiplier /= SPORT_DIVISOR
    if field.water_sport and move_type == Type.FIRE:
        multiplier /= SPORT_DIVISOR
    return multiplier


def _ability_multiplier(
    attacker: Combatant,
    defender: Combatant,
    target_ability: Ability,
    move: BattleMove,
    move_type: Type,
    power: int,
    ate_boosted: bool,
    weather: Weather,
) -> Fraction:
    multiplier = Fraction(1)
    ability = attacker.effective_ability()

    if ability == Ability.TECHNICIAN and power <= TECHNICIAN_THRESHOLD:
        multiplier *= TECHNICIAN_MULTIPLIER
    if ate_boosted:
        multiplier *= ATE_BOOST
    if ability in FLAG_POWER_ABILITIES:
        flag, boost = FLAG_POWER_ABILITIES[ability]
        if move.flags & flag:
            multiplier *= boost
    if ability == Ability.SAND_FORCE and weather == Weather.SAND and move_type in SAND_FORCE_TYPES:
        multiplier *= SAND_FORCE_MULTIPLIER
    if PINCH_ABILITIES.get(ability) == move_type and attacker.hp * 3 <= attacker.max_hp:
        multiplier *= PINCH_MULTIPLIER
    if ability == Ability.FLASH_FIRE and attacker.flash_fire_active and move_type == Type.FIRE:
        multiplier *= FLASH_FIRE_MULTIPLIER

    # Auras act field-wide; Aura Break is never suppressed
    field_abilities = {ability, defender.effective_ability()}
    if any(AURA_ABILITIES.get(aura) == move_type for aura in field_abilities):
        multiplier *= AURA_BREAK_MULTIPLIER if Ability.AURA_BREAK in field_abilities else AURA_MULTIPLIER

    defender_effects = DEFENDER_POWER_ABILITIES.get(target_ability, {})
    if move_type in defender_effects:
        multiplier *= defender_effects[move_type]
    return multiplier


def resolve_base_power(
    attacker: Combatant,
    defender: Combatant,
    move: BattleMove,
    field: BattleField,
    weather: Weather,
    target_ability: Ability,
    mold_breaker_active: bool = False,
) -> PowerResult:
    """
    Compute the power that enters the damage formula.

    Args:
        weather: Weather after Cloud Nine / Air Lock
        target_ability: Defender's ability after Mold Breaker suppression
    """
    side_effects: list[SideEffect] = []
    move_type, ate_boosted = resolve_move_type(attacker, move, weather)

    power = get_dynamic_power(attacker, defender, move, weather)
    chain = [power]

    power = _scale(power, _field_multiplier(attacker, defender, move, move_type, field, mold_breaker_active))
    chain.append(power)

    if attacker.helping_hand:
        power = _scale(power, Fraction(3, 2))
    if attacker.me_first:
        power = _scale(power, Fraction(3, 2))
    chain.append(power)

    power = _scale(power, _ability_multiplier(attacker, defender, target_ability, move, move_type, power, ate_boosted, weather))
    chain.append(power)

    item = attacker.held_item()
    hold_effect = get_hold_effect(item)
    if hold_effect == HoldEffect.MUSCLE_BAND and move.is_physical():
        power = _scale(power, Fraction(11, 10))
    elif hold_effect == HoldEffect.WISE_GLASSES and move.is_special():
        power = _scale(power, Fraction(11, 10))
    elif hold_effect == HoldEffect.TYPE_POWER and get_hold_effect_param(item) == move_type:
        power = _scale(power, TYPE_ITEM_BOOST)
    elif hold_effect == HoldEffect.GEM and get_hold_effect_param(item) == move_type and not move.flags.is_z_move():
        power = _scale(power, GEM_BOOST)
        side_effects.append(SideEffect.GEM_CONSUMED)
    chain.append(power)

    if attacker.status2.is_charged() and move_type == Type.ELECTRIC:
        power = _scale(power, Fraction(2))
        side_effects.append(SideEffect.CHARGE_CONSUMED)
    chain.append(power)

    logger.debug("%s power chain %s as %s", move.id.name, chain, move_type.name)
    return PowerResult(power=power, move_type=move_type, side_effects=side_effects)
