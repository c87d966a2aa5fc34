"""
Modifier Pipeline

An ordered list of stages, each a pure function of the ModifierContext returning a
multiplier. A stage whose precondition is not met returns 1, so every resolution runs
the same stages in the same order.
"""

import logging
from fractions import Fraction
from typing import Callable

from src.damage_engine.conditions import defender_ability
from src.damage_engine.constants import (
    ADAPTABILITY_MULTIPLIER,
    BURN_MULTIPLIER,
    CRIT_MULTIPLIER,
    EXPERT_BELT_MULTIPLIER,
    LIFE_ORB_MULTIPLIER,
    METRONOME_CAP,
    METRONOME_STEP,
    SCREEN_MULTIPLIER,
    SNIPER_MULTIPLIER,
    SPREAD_MULTIPLIER,
    STAB_MULTIPLIER,
    Z_MOVE_PROTECT_MULTIPLIER,
    Z_MOVE_SPIKY_SHIELD_MULTIPLIER,
)
from src.damage_engine.data.abilities import STAB_DOUBLING_ABILITIES
from src.damage_engine.data.items import get_hold_effect, get_hold_effect_param
from src.damage_engine.enums import Ability, Effectiveness, HoldEffect, Item, Move, SideEffect, Type, Weather
from src.damage_engine.protection import pierces_protect
from src.damage_engine.schema.results import ModifierContext

logger = logging.getLogger(__name__)

ModifierStage = Callable[[ModifierContext], Fraction]

ONE = Fraction(1)

# (weather, move type) -> multiplier
WEATHER_MODIFIERS = {
    (Weather.RAIN, Type.WATER): Fraction(3, 2),
    (Weather.RAIN, Type.FIRE): Fraction(1, 2),
    (Weather.HEAVY_RAIN, Type.WATER): Fraction(3, 2),
    (Weather.HEAVY_RAIN, Type.FIRE): Fraction(0),
    (Weather.SUN, Type.FIRE): Fraction(3, 2),
    (Weather.SUN, Type.WATER): Fraction(1, 2),
    (Weather.HARSH_SUN, Type.FIRE): Fraction(3, 2),
    (Weather.HARSH_SUN, Type.WATER): Fraction(0),
}


def weather_modifier(weather: Weather, move_type: Type) -> Fraction:
    return WEATHER_MODIFIERS.get((weather, move_type), ONE)


def _target(ctx: ModifierContext) -> Ability:
    return defender_ability(ctx.defender, ctx.mold_breaker_active)


# =============================================================================
# CORE STAGES
# =============================================================================
def target_count_stage(ctx: ModifierContext) -> Fraction:
    if ctx.field.is_multi_battle and ctx.move.is_spread():
        return SPREAD_MULTIPLIER
    return ONE


def weather_stage(ctx: ModifierContext) -> Fraction:
    return weather_modifier(ctx.weather, ctx.move_type)


def critical_stage(ctx: ModifierContext) -> Fraction:
    if not ctx.is_critical:
        return ONE
    if ctx.attacker.effective_ability() == Ability.SNIPER:
        return CRIT_MULTIPLIER * SNIPER_MULTIPLIER
    return CRIT_MULTIPLIER


def stab_stage(ctx: ModifierContext) -> Fraction:
    if not ctx.is_stab:
        return ONE
    if ctx.attacker.effective_ability() in STAB_DOUBLING_ABILITIES:
        return ADAPTABILITY_MULTIPLIER
    return STAB_MULTIPLIER


def type_effectiveness_stage(ctx: ModifierContext) -> Fraction:
    return ctx.type_multiplier


def burn_stage(ctx: ModifierContext) -> Fraction:
    attacker = ctx.attacker
    if (
        attacker.status1.is_burned()
        and ctx.move.is_physical()
        and ctx.move.id != Move.FACADE
        and attacker.effective_ability() != Ability.GUTS
    ):
        return BURN_MULTIPLIER
    return ONE


# =============================================================================
# OTHER STAGES
# =============================================================================
def minimize_stage(ctx: ModifierContext) -> Fraction:
    if ctx.defender.minimized and ctx.move.punishes_minimize:
        return Fraction(2)
    return ONE


def semi_invulnerable_stage(ctx: ModifierContext) -> Fraction:
    if ctx.defender.semi_invulnerable in ctx.move.punishes_semi_invulnerable:
        return Fraction(2)
    return ONE


def screen_stage(ctx: ModifierContext) -> Fraction:
    if not ctx.screens_apply:
        return ONE
    return SCREEN_MULTIPLIER


def fluffy_stage(ctx: ModifierContext) -> Fraction:
    if _target(ctx) != Ability.FLUFFY:
        return ONE
    is_fire = ctx.move_type == Type.FIRE
    if ctx.is_contact and not is_fire:
        return Fraction(1, 2)
    if is_fire and not ctx.is_contact:
        return Fraction(2)
    return ONE


def filter_stage(ctx: ModifierContext) -> Fraction:
    """Filter / Solid Rock / Prism Armor"""
    if ctx.effectiveness != Effectiveness.SUPER_EFFECTIVE:
        return ONE
    if _target(ctx) in (Ability.FILTER, Ability.SOLID_ROCK, Ability.PRISM_ARMOR):
        return Fraction(3, 4)
    return ONE


def multiscale_stage(ctx: ModifierContext) -> Fraction:
    """Multiscale / Shadow Shield"""
    if ctx.defender.effective_ability() in (Ability.MULTISCALE, Ability.SHADOW_SHIELD) and ctx.defender.is_full_hp():
        return Fraction(1, 2)
    return ONE


def tinted_lens_stage(ctx: ModifierContext) -> Fraction:
    if ctx.attacker.effective_ability() == Ability.TINTED_LENS and ctx.effectiveness == Effectiveness.RESISTED:
        return Fraction(2)
    return ONE


def friend_guard_stage(ctx: ModifierContext) -> Fraction:
    if ctx.defender.friend_guard_ally and not ctx.mold_breaker_active:
        return Fraction(3, 4)
    return ONE


def z_move_protect_stage(ctx: ModifierContext) -> Fraction:
    if not pierces_protect(ctx.move, ctx.protection):
        return ONE
    if ctx.protection.kind == Move.SPIKY_SHIELD:
        return Z_MOVE_SPIKY_SHIELD_MULTIPLIER
    return Z_MOVE_PROTECT_MULTIPLIER


def chilan_berry_stage(ctx: ModifierContext) -> Fraction:
    if ctx.defender.held_item() == Item.CHILAN_BERRY and ctx.move_type == Type.NORMAL:
        return Fraction(1, 2)
    return ONE


def resist_berry_stage(ctx: ModifierContext) -> Fraction:
    item = ctx.defender.held_item()
    if item == Item.CHILAN_BERRY or get_hold_effect(item) != HoldEffect.RESIST_BERRY:
        return ONE
    if get_hold_effect_param(item) == ctx.move_type and ctx.effectiveness == Effectiveness.SUPER_EFFECTIVE:
        return Fraction(1, 2)
    return ONE


def expert_belt_stage(ctx: ModifierContext) -> Fraction:
    if get_hold_effect(ctx.attacker.held_item()) == HoldEffect.EXPERT_BELT and ctx.effectiveness == Effectiveness.SUPER_EFFECTIVE:
        return EXPERT_BELT_MULTIPLIER
    return ONE


def life_orb_stage(ctx: ModifierContext) -> Fraction:
    if get_hold_effect(ctx.attacker.held_item()) == HoldEffect.LIFE_ORB:
        return LIFE_ORB_MULTIPLIER
    return ONE


def metronome_multiplier(consecutive_uses: int) -> Fraction:
    """1 + 0.2 per consecutive use, capped at 2"""
    return min(METRONOME_CAP, ONE + METRONOME_STEP * consecutive_uses)


def metronome_stage(ctx: ModifierContext) -> Fraction:
    if get_hold_effect(ctx.attacker.held_item()) == HoldEffect.METRONOME:
        return metronome_multiplier(ctx.attacker.consecutive_uses)
    return ONE


MODIFIER_STAGES: list[tuple[str, ModifierStage]] = [
    ("target_count", target_count_stage),
    ("weather", weather_stage),
    ("critical", critical_stage),
    ("stab", stab_stage),
    ("type_effectiveness", type_effectiveness_stage),
    ("burn", burn_stage),
    ("minimize", minimize_stage),
    ("semi_invulnerable", semi_invulnerable_stage),
    ("screen", screen_stage),
    ("fluffy", fluffy_stage),
    ("filter", filter_stage),
    ("multiscale", multiscale_stage),
    ("tinted_lens", tinted_lens_stage),
    ("friend_guard", friend_guard_stage),
    ("z_move_protect", z_move_protect_stage),
    ("chilan_berry", chilan_berry_stage),
    ("resist_berry", resist_berry_stage),
    ("expert_belt", expert_belt_stage),
    ("life_orb", life_orb_stage),
    ("metronome", metronome_stage),
]

# Stages that, when they fire, leave something behind for the orchestrator to apply
STAGE_SIDE_EFFECTS = {
    "z_move_protect": SideEffect.PROTECT_PIERCED,
    "chilan_berry": SideEffect.BERRY_CONSUMED,
    "resist_berry": SideEffect.BERRY_CONSUMED,
    "life_orb": SideEffect.LIFE_ORB_RECOIL,
}


def run_pipeline(ctx: ModifierContext) -> list[tuple[str, Fraction]]:
    """Evaluate every stage in order, returning (stage name, multiplier) pairs"""
    stages = [(name, stage(ctx)) for name, stage in MODIFIER_STAGES]
    logger.debug("modifier stages %s", {name: str(value) for name, value in stages if value != ONE})
    return stages


def combined_modifier(stages: list[tuple[str, Fraction]]) -> Fraction:
    product = ONE
    for _, multiplier in stages:
        product *= multiplier
    return product


def triggered_side_effects(ctx: ModifierContext, stages: list[tuple[str, Fraction]]) -> list[SideEffect]:
    side_effects = []
    for name, multiplier in stages:
        effect = STAGE_SIDE_EFFECTS.get(name)
        if effect is None or multiplier == ONE:
            continue
        if effect == SideEffect.LIFE_ORB_RECOIL and ctx.attacker.effective_ability() == Ability.MAGIC_GUARD:
            continue
        side_effects.append(effect)
    return side_effects
