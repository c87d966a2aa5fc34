"""
Stat & Stage Resolver

Converts a raw stat plus a stage in [-6, 6] into the stat used by the damage formula.
Stage ratios are exact:

    stage >= 0: (N + stage) / N
    stage <  0: N / (N - stage)

with N = 2 for combat stats and N = 3 for the accuracy/evasion table.
"""

from fractions import Fraction

from src.damage_engine.constants import ACCURACY_STAGE_BASE, MAX_STAT_STAGE, MIN_STAT_STAGE, NORMAL_STAGE_BASE
from src.damage_engine.data.abilities import ATTACKER_STAT_ABILITIES, DEFENDER_STAT_ABILITIES
from src.damage_engine.data.items import get_hold_effect
from src.damage_engine.enums import Ability, HoldEffect, StageTable, Type, Weather
from src.damage_engine.schema.combatant import Combatant
from src.damage_engine.schema.move import BattleMove
from src.damage_engine.validation import validate_stage

_STAGE_BASES = {
    StageTable.NORMAL: NORMAL_STAGE_BASE,
    StageTable.ACCURACY: ACCURACY_STAGE_BASE,
}


def clamp_stage(stage: int) -> int:
    return max(MIN_STAT_STAGE, min(MAX_STAT_STAGE, stage))


def stage_multiplier(stage: int, table: StageTable = StageTable.NORMAL) -> Fraction:
    validate_stage(stage)
    base = _STAGE_BASES[table]
    if stage >= 0:
        return Fraction(base + stage, base)
    return Fraction(base, base - stage)


def apply_stage(value: int, stage: int, table: StageTable = StageTable.NORMAL) -> int:
    """Apply a stage to a stat with integer math, never going below 1"""
    validate_stage(stage)
    base = _STAGE_BASES[table]
    if stage >= 0:
        result = value * (base + stage) // base
    else:
        result = value * base // (base - stage)
    return max(1, result)


def effective_stat(
    value: int,
    stage: int,
    ignore_stages: bool = False,
    is_critical: bool = False,
    is_attacker: bool = True,
) -> int:
    """
    Effective combat stat after stages.

    Args:
        value: Raw stat
        stage: Current stage, -6..6
        ignore_stages: The opposing side has Unaware
        is_critical: A critical hit is being resolved. The attacker then ignores its
            negative stages and the defender ignores its positive stages.
        is_attacker: Whether the stat belongs to the attacker
    """
    validate_stage(stage)
    if ignore_stages:
        stage = 0
    elif is_critical:
        if is_attacker and stage < 0:
            stage = 0
        elif not is_attacker and stage > 0:
            stage = 0
    return apply_stage(value, stage)


def _scale(value: int, multiplier: Fraction) -> int:
    return max(1, int(value * multiplier))


def get_attack_stat(
    attacker: Combatant,
    defender_ability: Ability,
    move: BattleMove,
    is_critical: bool,
) -> int:
    """Attack (physical) or Sp. Atk (special) the attacker hits with"""
    stat_name = "attack" if move.is_physical() else "sp_attack"
    value = effective_stat(
        attacker.stat(stat_name),
        attacker.stage(stat_name),
        ignore_stages=defender_ability == Ability.UNAWARE,
        is_critical=is_critical,
        is_attacker=True,
    )

    ability_effect = ATTACKER_STAT_ABILITIES.get(attacker.effective_ability())
    if ability_effect is not None:
        boosted_stat, multiplier, needs_status = ability_effect
        if boosted_stat == stat_name and (not needs_status or attacker.status1.has_major_status()):
            value = _scale(value, multiplier)

    hold_effect = get_hold_effect(attacker.held_item())
    if hold_effect == HoldEffect.CHOICE_BAND and stat_name == "attack":
        value = _scale(value, Fraction(3, 2))
    elif hold_effect == HoldEffect.CHOICE_SPECS and stat_name == "sp_attack":
        value = _scale(value, Fraction(3, 2))
    return value


def get_defense_stat(
    attacker: Combatant,
    defender: Combatant,
    defender_ability: Ability,
    move: BattleMove,
    is_critical: bool,
    weather: Weather,
) -> int:
    """Defense (physical) or Sp. Def (special) the defender takes the hit with

    defender_ability is the ability after Mold Breaker suppression.
    """
    stat_name = "defense" if move.is_physical() else "sp_defense"
    value = effective_stat(
        defender.stat(stat_name),
        defender.stage(stat_name),
        ignore_stages=attacker.effective_ability() == Ability.UNAWARE,
        is_critical=is_critical,
        is_attacker=False,
    )

    ability_effect = DEFENDER_STAT_ABILITIES.get(defender_ability)
    if ability_effect is not None:
        boosted_stat, multiplier, needs_status = ability_effect
        if boosted_stat == stat_name and (not needs_status or defender.status1.has_major_status()):
            value = _scale(value, multiplier)

    if get_hold_effect(defender.held_item()) == HoldEffect.ASSAULT_VEST and stat_name == "sp_defense":
        value = _scale(value, Fraction(3, 2))

    # Sandstorm boosts Rock types' Sp. Def
    if weather == Weather.SAND and stat_name == "sp_defense" and defender.has_type(Type.ROCK):
        value = _scale(value, Fraction(3, 2))
    return value
