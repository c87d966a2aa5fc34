"""
Protection State Machine

    inactive (count 0) --protect-family, success--> active (count k+1)
    any state          --protect-family, failure--> inactive (count 0)
    any state          --other move------------->  inactive (count 0)

Success chance is 1/3^min(k, 6), read from the state before the transition.
"""

import logging

from src.damage_engine.data.moves import DELAYED_ATTACKS
from src.damage_engine.enums import BlockedBy, Move, SideEffect
from src.damage_engine.schema.move import BattleMove
from src.damage_engine.schema.protection import ProtectionState
from src.damage_engine.utils.rng import RandomSource, chance

logger = logging.getLogger(__name__)

# Protections that block a move outright; a Z-move breaks through them at reduced power
BLOCKING_PROTECTIONS = frozenset({Move.PROTECT, Move.DETECT, Move.SPIKY_SHIELD, Move.BANEFUL_BUNKER})

_CONTACT_PENALTIES = {
    Move.SPIKY_SHIELD: SideEffect.SPIKY_SHIELD_RECOIL,
    Move.BANEFUL_BUNKER: SideEffect.BANEFUL_BUNKER_POISON,
}


def advance_protection_state(
    previous: ProtectionState,
    is_protect_family: bool,
    rng: RandomSource,
    move: Move = Move.PROTECT,
) -> ProtectionState:
    """Produce the defender's protection state for this turn. The caller persists it."""
    if not is_protect_family:
        return ProtectionState()

    success_chance = previous.success_chance()
    if chance(rng, success_chance):
        logger.debug("%s succeeded (chance %s)", move.name, success_chance)
        return ProtectionState(consecutive_uses=previous.consecutive_uses + 1, active=True, kind=move)
    logger.debug("%s failed (chance %s)", move.name, success_chance)
    return ProtectionState()


def bypasses_protect(move: BattleMove) -> bool:
    """
    Check whether a move goes through protect-family moves untouched (delayed attacks, Feint,
    Shadow Force). Z-moves do not bypass: they pierce at reduced damage, see pierces_protect.
    """
    if move.flags.is_z_move():
        return False
    return move.id in DELAYED_ATTACKS or move.flags.bypasses_protect()


def pierces_protect(move: BattleMove, protection: ProtectionState) -> bool:
    """Z-moves hit through Protect-like moves for reduced damage"""
    return protection.active and protection.kind in BLOCKING_PROTECTIONS and move.flags.is_z_move()


def check_protection(move: BattleMove, protection: ProtectionState) -> tuple[BlockedBy, list[SideEffect]]:
    """Which protection, if any, stops this move, and what the attacker suffers for it"""
    if not protection.active or bypasses_protect(move):
        return BlockedBy.NONE, []

    if protection.kind == Move.WIDE_GUARD:
        return (BlockedBy.WIDE_GUARD, []) if move.is_spread() else (BlockedBy.NONE, [])
    if protection.kind == Move.QUICK_GUARD:
        return (BlockedBy.QUICK_GUARD, []) if move.priority > 0 else (BlockedBy.NONE, [])
    if pierces_protect(move, protection):
        return BlockedBy.NONE, []
    if protection.kind in BLOCKING_PROTECTIONS:
        side_effects = []
        penalty = _CONTACT_PENALTIES.get(protection.kind)
        if penalty is not None and move.makes_contact():
            side_effects.append(penalty)
        return BlockedBy.PROTECT, side_effects
    # Endure never blocks
    return BlockedBy.NONE, []
