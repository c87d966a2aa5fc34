"""
Critical-Hit Resolver

Stage sources add up and cap at 3. The chance by stage is 1/24, 1/8, 1/2, then certain.
Only an uncertain outcome takes a draw from the random source.
"""

import logging
from fractions import Fraction
from typing import Optional

from src.damage_engine.constants import CRIT_CHANCE_BY_STAGE, MAX_CRIT_STAGE
from src.damage_engine.data.abilities import CRIT_BLOCK_ABILITIES, CRIT_BOOST_ABILITIES
from src.damage_engine.data.items import get_hold_effect
from src.damage_engine.enums import Ability, HoldEffect
from src.damage_engine.schema.combatant import Combatant
from src.damage_engine.schema.move import BattleMove
from src.damage_engine.schema.results import CritResult
from src.damage_engine.utils.rng import RandomSource, chance

logger = logging.getLogger(__name__)


def get_crit_stage(attacker: Combatant, move: BattleMove) -> int:
    """Sum of every crit-stage source, capped at the always-crit stage"""
    stage = move.crit_stage
    if get_hold_effect(attacker.held_item()) == HoldEffect.CRITICAL_UP:
        stage += 1
    if attacker.effective_ability() in CRIT_BOOST_ABILITIES:
        stage += 1
    if attacker.status2.has_focus_energy():
        stage += 2
    stage += attacker.crit_stage_bonus
    return min(stage, MAX_CRIT_STAGE)


def get_crit_chance(stage: int) -> Fraction:
    if stage >= MAX_CRIT_STAGE:
        return Fraction(1)
    return CRIT_CHANCE_BY_STAGE[stage]


def resolve_critical_hit(
    attacker: Combatant,
    move: BattleMove,
    rng: RandomSource,
    defender_ability: Ability = Ability.NONE,
    crit_override: Optional[bool] = None,
) -> CritResult:
    """
    Decide whether this hit is critical.

    crit_override forces the outcome without drawing. Battle Armor / Shell Armor on the
    defender (passed in after Mold Breaker suppression) prevent crits outright. Guaranteed
    crits and stage 3+ do not draw either.
    """
    stage = get_crit_stage(attacker, move)

    if crit_override is not None:
        is_critical = crit_override
    elif defender_ability in CRIT_BLOCK_ABILITIES:
        is_critical = False
    elif move.always_crit:
        is_critical = True
    else:
        is_critical = chance(rng, get_crit_chance(stage))

    logger.debug("crit stage %d -> critical=%s", stage, is_critical)
    return CritResult(is_critical=is_critical, stage=stage, ignore_defensive_stage_reductions=is_critical)
