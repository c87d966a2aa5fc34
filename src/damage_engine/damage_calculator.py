"""
Damage calculation entry points

Control flow for one move use:

    resolve_hit -> protection check -> base power / type effectiveness
        -> critical hit -> effective stats -> modifier pipeline -> damage roll

Every input is an immutable snapshot. The calculator never mutates its arguments; the
only state it hands back for persisting is the ProtectionState from
advance_protection_state, plus the side effects listed on each DamageResult.
"""

import logging
from fractions import Fraction
from typing import Optional, Union

from src.damage_engine.accuracy import resolve_hit
from src.damage_engine.base_power import resolve_base_power
from src.damage_engine.conditions import defender_ability, effective_weather, has_mold_breaker
from src.damage_engine.config import DEFAULT_CONFIG, EngineConfig
from src.damage_engine.constants import LIFE_ORB_RECOIL_DIVISOR, MIN_DAMAGE_ROLL, NUM_DAMAGE_ROLLS
from src.damage_engine.critical_hit import resolve_critical_hit
from src.damage_engine.data.abilities import FLAG_IMMUNITY_ABILITIES, grants_type_immunity
from src.damage_engine.data.items import get_hold_effect
from src.damage_engine.data.moves import GROUNDING_MOVES, get_move_data, is_protect_family
from src.damage_engine.enums import Ability, BlockedBy, Effectiveness, FloorMode, HoldEffect, Move, SideEffect, Type
from src.damage_engine.modifiers import combined_modifier, run_pipeline, triggered_side_effects, weather_modifier
from src.damage_engine.protection import advance_protection_state, bypasses_protect, check_protection
from src.damage_engine.schema.combatant import Combatant
from src.damage_engine.schema.field import BattleField
from src.damage_engine.schema.move import BattleMove
from src.damage_engine.schema.protection import ProtectionState
from src.damage_engine.schema.results import DamageResult, HitResult, ModifierContext, MoveOutcome
from src.damage_engine.stat_stages import get_attack_stat, get_defense_stat
from src.damage_engine.type_effectiveness import TypeEffectiveness
from src.damage_engine.utils.rng import RandomSource
from src.damage_engine.validation import validate_combatant, validate_damaging_move

logger = logging.getLogger(__name__)

MoveLike = Union[Move, BattleMove]

# Absorbing abilities report themselves on the result; Levitate only grants immunity
NON_ABSORBING_IMMUNITIES = frozenset({Ability.LEVITATE})


def calculate_base_damage(level: int, power: int, attack: int, defense: int) -> int:
    """floor(((floor(2 * level / 5) + 2) * power * attack / defense) / 50) + 2"""
    level_factor = 2 * level // 5 + 2
    return level_factor * power * attack // defense // 50 + 2


def resolve_type_multiplier(
    attacker: Combatant,
    defender: Combatant,
    move: BattleMove,
    move_type: Type,
    target_ability: Ability,
    mold_breaker_active: bool,
) -> tuple[Fraction, Ability]:
    """
    Type-effectiveness multiplier after ability and item overrides.

    Returns:
        (multiplier, absorbing ability or Ability.NONE)
    """
    ring_target = get_hold_effect(defender.held_item()) == HoldEffect.RING_TARGET
    grounds_target = move.id in GROUNDING_MOVES and move_type == Type.GROUND
    defending_types = [t for t in defender.types if t != Type.FLYING] if grounds_target else defender.types
    multiplier = TypeEffectiveness.get_combined_effectiveness(
        move_type,
        defending_types,
        scrappy=attacker.effective_ability() == Ability.SCRAPPY,
        ring_target=ring_target,
    )
    if multiplier == 0:
        return multiplier, Ability.NONE

    if grounds_target:
        return multiplier, Ability.NONE
    if move_type == Type.GROUND and get_hold_effect(defender.held_item()) == HoldEffect.AIR_BALLOON:
        return Fraction(0), Ability.NONE

    ability = defender.effective_ability()
    if grants_type_immunity(ability, move_type, mold_breaker_active):
        absorbed_by = Ability.NONE if ability in NON_ABSORBING_IMMUNITIES else ability
        return Fraction(0), absorbed_by

    immune_flag = FLAG_IMMUNITY_ABILITIES.get(target_ability)
    if immune_flag is not None and move.flags & immune_flag:
        return Fraction(0), Ability.NONE
    return multiplier, Ability.NONE


class DamageCalculator:
    """
    Deterministic damage-resolution engine

    All randomness comes from the RandomSource passed to each call, drawn in the order
    accuracy, critical hit, damage roll. Draws whose outcome is certain are skipped.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self.config = config

    @staticmethod
    def get_move(move: MoveLike) -> BattleMove:
        if isinstance(move, BattleMove):
            return move
        return get_move_data(move)

    # =========================================================================
    # PUBLIC ENTRY POINTS
    # =========================================================================

    def resolve_hit(
        self,
        attacker: Combatant,
        defender: Combatant,
        move: MoveLike,
        field: BattleField,
        rng: RandomSource,
    ) -> HitResult:
        """Decide whether the move connects"""
        move = self.get_move(move)
        validate_combatant(attacker)
        validate_combatant(defender)
        return resolve_hit(attacker, defender, move, field, rng, self.config)

    def advance_protection_state(
        self,
        previous: ProtectionState,
        declared_move: MoveLike,
        rng: RandomSource,
    ) -> ProtectionState:
        """Transition a combatant's protection state for the move it declared this turn"""
        move = self.get_move(declared_move)
        return advance_protection_state(previous, is_protect_family(move.id), rng, move.id)

    def bypasses_protect(self, move: MoveLike) -> bool:
        return bypasses_protect(self.get_move(move))

    def resolve_damage(
        self,
        attacker: Combatant,
        defender: Combatant,
        move: MoveLike,
        field: BattleField,
        protection: ProtectionState,
        rng: RandomSource,
        crit_override: Optional[bool] = None,
        defender_side: int = 1,
    ) -> DamageResult:
        """
        Compute the damage of a move that has already been determined to hit.

        Args:
            attacker: Attacking combatant
            defender: Defending combatant
            move: Move id (looked up in the repository) or a move record
            field: Field snapshot
            protection: Defender's protection state for this turn
            rng: Source for the critical-hit and damage-roll draws
            crit_override: Force (True) or forbid (False) a critical hit without drawing
            defender_side: Index into field.sides for the defender's screens

        Returns:
            DamageResult; immunity and blocks are results with amount 0, never errors
        """
        move = self.get_move(move)
        validate_combatant(attacker)
        validate_combatant(defender)
        validate_damaging_move(move)

        endure_active = protection.active and protection.kind == Move.ENDURE

        blocked_by, protect_effects = check_protection(move, protection)
        if blocked_by != BlockedBy.NONE:
            logger.debug("%s blocked by %s", move.id.name, blocked_by.name)
            return DamageResult(amount=0, blocked_by=blocked_by, side_effects=protect_effects, move_type=move.type)

        mold_breaker_active = has_mold_breaker(attacker)
        target_ability = defender_ability(defender, mold_breaker_active)
        weather = effective_weather(field, attacker, defender)

        power = resolve_base_power(attacker, defender, move, field, weather, target_ability, mold_breaker_active)
        move_type = power.move_type
        type_multiplier, absorbed_by = resolve_type_multiplier(
            attacker, defender, move, move_type, target_ability, mold_breaker_active
        )
        effectiveness = Effectiveness.classify(type_multiplier)
        summary = dict(move_type=move_type, base_power=power.power, effectiveness=effectiveness)

        if type_multiplier == 0:
            side_effects = [SideEffect.ABILITY_ABSORBED] if absorbed_by != Ability.NONE else []
            logger.debug("%s has no effect (absorbed by %s)", move.id.name, absorbed_by.name)
            return DamageResult(amount=0, absorbed_by=absorbed_by, side_effects=side_effects, **summary)
        if weather_modifier(weather, move_type) == 0:
            return DamageResult(amount=0, blocked_by=BlockedBy.WEATHER, **summary)
        if target_ability == Ability.WONDER_GUARD and type_multiplier <= 1:
            return DamageResult(amount=0, blocked_by=BlockedBy.WONDER_GUARD, **summary)
        if target_ability == Ability.DISGUISE and not defender.disguise_broken:
            return DamageResult(
                amount=0, blocked_by=BlockedBy.DISGUISE, side_effects=[SideEffect.DISGUISE_BROKEN], **summary
            )

        crit = resolve_critical_hit(attacker, move, rng, target_ability, crit_override)
        attack = get_attack_stat(attacker, target_ability, move, crit.is_critical)
        defense = get_defense_stat(attacker, defender, target_ability, move, crit.is_critical, weather)
        raw = calculate_base_damage(attacker.level, power.power, attack, defense)

        ctx = ModifierContext(
            attacker=attacker,
            defender=defender,
            move=move,
            field=field,
            protection=protection,
            defender_side=defender_side,
            move_type=move_type,
            weather=weather,
            is_critical=crit.is_critical,
            is_stab=attacker.has_type(move_type),
            type_multiplier=type_multiplier,
            effectiveness=effectiveness,
            is_contact=move.makes_contact(),
            screens_apply=self._screens_apply(attacker, move, field, defender_side, crit.is_critical),
            mold_breaker_active=mold_breaker_active,
            one_shot_item_consumed=SideEffect.GEM_CONSUMED in power.side_effects,
        )
        stages = run_pipeline(ctx)
        modifier = combined_modifier(stages)
        roll = MIN_DAMAGE_ROLL + rng.choice_index(NUM_DAMAGE_ROLLS)
        amount = max(1, self._apply_modifiers(raw, modifier, stages, roll))

        side_effects = power.side_effects + triggered_side_effects(ctx, stages)
        recoil = 0
        if SideEffect.LIFE_ORB_RECOIL in side_effects:
            recoil = max(1, attacker.max_hp // LIFE_ORB_RECOIL_DIVISOR)

        would_ko = amount >= defender.hp
        logger.debug(
            "%s: raw=%d attack=%d defense=%d modifier=%s roll=%d -> %d", move.id.name, raw, attack, defense, modifier, roll, amount
        )
        return DamageResult(
            amount=amount,
            is_critical=crit.is_critical,
            would_survive_at_1=endure_active and would_ko,
            side_effects=side_effects,
            modifier=modifier,
            roll=roll,
            would_ko=would_ko,
            from_full_hp=amount >= defender.max_hp,
            recoil=recoil,
            **summary,
        )

    def resolve_move(
        self,
        attacker: Combatant,
        defender: Combatant,
        move: MoveLike,
        field: BattleField,
        protection: ProtectionState,
        rng: RandomSource,
        crit_override: Optional[bool] = None,
        defender_side: int = 1,
    ) -> MoveOutcome:
        """Hit check, then damage when the move connects"""
        move = self.get_move(move)
        hit = self.resolve_hit(attacker, defender, move, field, rng)
        if not hit.hits:
            return MoveOutcome(hit=hit)
        damage = self.resolve_damage(attacker, defender, move, field, protection, rng, crit_override, defender_side)
        return MoveOutcome(hit=hit, damage=damage)

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _screens_apply(attacker: Combatant, move: BattleMove, field: BattleField, defender_side: int, is_critical: bool) -> bool:
        if is_critical or move.flags.breaks_screens():
            return False
        if attacker.effective_ability() == Ability.INFILTRATOR:
            return False
        return field.side(defender_side).has_screen_for(move.category)

    def _apply_modifiers(self, raw: int, modifier: Fraction, stages: list[tuple[str, Fraction]], roll: int) -> int:
        if self.config.floor_mode == FloorMode.SINGLE:
            return int(raw * modifier * roll / 100)

        # Truncate after every stage, with the roll right after the critical-hit stage
        damage = raw
        for name, multiplier in stages:
            damage = int(damage * multiplier)
            if name == "critical":
                damage = damage * roll // 100
        return damage
