"""
Hit/Accuracy Resolver

Checks run in a fixed order and the first decisive one wins:

1. Semi-invulnerable target the move cannot reach -> miss (evasive)
2. No Guard on either side -> hit
3. Moves that never miss, Minimize punishers, weather-perfect moves -> hit
4. Otherwise accuracy x stage ratio x item/ability modifiers, clamped to [0, 100], drawn once
"""

import logging
from fractions import Fraction

from src.damage_engine.config import DEFAULT_CONFIG, EngineConfig
from src.damage_engine.constants import MAX_ACCURACY, MIN_ACCURACY
from src.damage_engine.conditions import defender_ability, effective_weather, has_mold_breaker
from src.damage_engine.data.abilities import (
    COMPOUND_EYES_MULTIPLIER,
    HUSTLE_ACCURACY_MULTIPLIER,
    TANGLED_FEET_MULTIPLIER,
    VICTORY_STAR_MULTIPLIER,
    WEATHER_EVASION_ABILITIES,
    WEATHER_EVASION_MULTIPLIER,
)
from src.damage_engine.data.items import get_hold_effect
from src.damage_engine.data.moves import HAIL_ACCURATE_MOVES, RAIN_ACCURATE_MOVES
from src.damage_engine.enums import Ability, HitReason, HoldEffect, Weather
from src.damage_engine.schema.combatant import Combatant
from src.damage_engine.schema.field import BattleField
from src.damage_engine.schema.move import BattleMove
from src.damage_engine.schema.results import HitResult
from src.damage_engine.stat_stages import clamp_stage, stage_multiplier
from src.damage_engine.utils.rng import RandomSource, chance

logger = logging.getLogger(__name__)

SUN_ACCURACY = 50  # Thunder / Hurricane in sun


def get_net_accuracy_stage(attacker: Combatant, defender: Combatant, target_ability: Ability) -> int:
    """Accuracy stage minus evasion stage, honouring Unaware and Keen Eye, clamped to [-6, 6]"""
    accuracy_stage = attacker.stages.accuracy
    evasion_stage = defender.stages.evasion

    if target_ability == Ability.UNAWARE:
        accuracy_stage = 0
    attacker_ability = attacker.effective_ability()
    if attacker_ability == Ability.UNAWARE:
        evasion_stage = 0
    elif attacker_ability == Ability.KEEN_EYE and evasion_stage > 0:
        evasion_stage = 0
    return clamp_stage(accuracy_stage - evasion_stage)


def get_accuracy_modifier(
    attacker: Combatant,
    defender: Combatant,
    target_ability: Ability,
    move: BattleMove,
    weather: Weather,
) -> Fraction:
    multiplier = Fraction(1)

    # Defender side
    if get_hold_effect(defender.held_item()) == HoldEffect.EVASION_UP:
        multiplier *= Fraction(9, 10)
    if WEATHER_EVASION_ABILITIES.get(target_ability) == weather:
        multiplier *= WEATHER_EVASION_MULTIPLIER
    if target_ability == Ability.TANGLED_FEET and defender.status2.is_confused():
        multiplier *= TANGLED_FEET_MULTIPLIER

    # Attacker side
    attacker_hold_effect = get_hold_effect(attacker.held_item())
    if attacker_hold_effect == HoldEffect.WIDE_LENS:
        multiplier *= Fraction(11, 10)
    elif attacker_hold_effect == HoldEffect.ZOOM_LENS and defender.moved_this_turn:
        multiplier *= Fraction(6, 5)

    attacker_ability = attacker.effective_ability()
    if attacker_ability == Ability.COMPOUND_EYES:
        multiplier *= COMPOUND_EYES_MULTIPLIER
    elif attacker_ability == Ability.VICTORY_STAR:
        multiplier *= VICTORY_STAR_MULTIPLIER
    elif attacker_ability == Ability.HUSTLE and move.is_physical():
        multiplier *= HUSTLE_ACCURACY_MULTIPLIER
    return multiplier


def resolve_hit(
    attacker: Combatant,
    defender: Combatant,
    move: BattleMove,
    field: BattleField,
    rng: RandomSource,
    config: EngineConfig = DEFAULT_CONFIG,
) -> HitResult:
    if not move.can_hit(defender.semi_invulnerable):
        return HitResult(hits=False, reason=HitReason.MISS_EVASIVE)

    if Ability.NO_GUARD in (attacker.effective_ability(), defender.effective_ability()):
        return HitResult(hits=True, reason=HitReason.NO_GUARD)

    if move.accuracy is None:
        return HitResult(hits=True, reason=HitReason.ALWAYS_HIT)
    if move.punishes_minimize and defender.minimized:
        return HitResult(hits=True, reason=HitReason.ALWAYS_HIT)

    weather = effective_weather(field, attacker, defender)
    base_accuracy = move.accuracy
    if move.id in RAIN_ACCURATE_MOVES:
        if weather.is_rain():
            return HitResult(hits=True, reason=HitReason.ALWAYS_HIT)
        if weather.is_sun():
            base_accuracy = SUN_ACCURACY
    if move.id in HAIL_ACCURATE_MOVES and weather == Weather.HAIL:
        return HitResult(hits=True, reason=HitReason.ALWAYS_HIT)

    target_ability = defender_ability(defender, has_mold_breaker(attacker))
    stage = get_net_accuracy_stage(attacker, defender, target_ability)
    accuracy = base_accuracy * stage_multiplier(stage, config.accuracy_stages)
    accuracy *= get_accuracy_modifier(attacker, defender, target_ability, move, weather)
    accuracy = max(MIN_ACCURACY, min(MAX_ACCURACY, int(accuracy)))

    if accuracy >= MAX_ACCURACY:
        return HitResult(hits=True, reason=HitReason.HIT, accuracy=accuracy)

    hits = chance(rng, Fraction(accuracy, 100))
    logger.debug("%s accuracy %d (stage %d) -> hits=%s", move.id.name, accuracy, stage, hits)
    return HitResult(hits=hits, reason=HitReason.HIT if hits else HitReason.MISS_ACCURACY, accuracy=accuracy)
