from fractions import Fraction

from src.damage_engine.damage_calculator import DamageCalculator
from src.damage_engine.data.moves import PROTECT_FAMILY, get_move_data
from src.damage_engine.enums import BlockedBy, Move, SideEffect
from src.damage_engine.protection import advance_protection_state, bypasses_protect, check_protection, pierces_protect
from src.damage_engine.schema.protection import ProtectionState
from src.damage_engine.utils.rng import FixedRandom, ScriptedRandom


def active(kind: Move, uses: int = 1) -> ProtectionState:
    return ProtectionState(consecutive_uses=uses, active=True, kind=kind)


def test_success_chance_sequence_is_floored():
    chances = [ProtectionState(consecutive_uses=k).success_chance() for k in range(8)]
    assert chances == [
        Fraction(1),
        Fraction(1, 3),
        Fraction(1, 9),
        Fraction(1, 27),
        Fraction(1, 81),
        Fraction(1, 243),
        Fraction(1, 729),
        Fraction(1, 729),
    ]
    assert ProtectionState(consecutive_uses=50).success_chance() == Fraction(1, 729)


def test_first_protect_always_succeeds_without_draw():
    rng = ScriptedRandom([])
    state = advance_protection_state(ProtectionState(), True, rng)
    assert state.active
    assert state.consecutive_uses == 1
    assert state.kind == Move.PROTECT
    assert rng.calls == 0


def test_consecutive_successes_increment_count():
    state = ProtectionState()
    rng = FixedRandom(0.0)
    for expected in range(1, 9):
        state = advance_protection_state(state, True, rng, Move.DETECT)
        assert state.consecutive_uses == expected
        assert state.kind == Move.DETECT


def test_failure_resets_count():
    rng = ScriptedRandom([0.5])
    state = advance_protection_state(active(Move.PROTECT), True, rng)
    assert rng.calls == 1
    assert not state.active
    assert state.consecutive_uses == 0


def test_second_use_draws_against_one_third():
    assert advance_protection_state(active(Move.PROTECT), True, FixedRandom(0.33)).active
    assert not advance_protection_state(active(Move.PROTECT), True, FixedRandom(0.34)).active


def test_non_protect_move_resets_unconditionally():
    rng = ScriptedRandom([])
    state = advance_protection_state(active(Move.PROTECT, uses=4), False, rng)
    assert state == ProtectionState()
    assert rng.calls == 0


def test_calculator_looks_up_protect_family():
    calculator = DamageCalculator()
    state = calculator.advance_protection_state(ProtectionState(), Move.SPIKY_SHIELD, ScriptedRandom([]))
    assert state.active and state.kind == Move.SPIKY_SHIELD
    state = calculator.advance_protection_state(state, Move.TACKLE, ScriptedRandom([]))
    assert state == ProtectionState()


def test_protect_family_membership():
    assert PROTECT_FAMILY == {
        Move.PROTECT,
        Move.DETECT,
        Move.ENDURE,
        Move.WIDE_GUARD,
        Move.QUICK_GUARD,
        Move.SPIKY_SHIELD,
        Move.BANEFUL_BUNKER,
    }


def test_bypasses_protect_query():
    assert bypasses_protect(get_move_data(Move.FUTURE_SIGHT))
    assert bypasses_protect(get_move_data(Move.DOOM_DESIRE))
    assert bypasses_protect(get_move_data(Move.FEINT))
    assert not bypasses_protect(get_move_data(Move.TACKLE))
    assert DamageCalculator().bypasses_protect(Move.HYPERSPACE_HOLE)


def test_protect_blocks_ordinary_moves():
    assert check_protection(get_move_data(Move.TACKLE), active(Move.PROTECT)) == (BlockedBy.PROTECT, [])
    assert check_protection(get_move_data(Move.TACKLE), ProtectionState()) == (BlockedBy.NONE, [])
    assert check_protection(get_move_data(Move.SHADOW_FORCE), active(Move.DETECT)) == (BlockedBy.NONE, [])


def test_wide_guard_blocks_spread_moves_only():
    assert check_protection(get_move_data(Move.EARTHQUAKE), active(Move.WIDE_GUARD))[0] == BlockedBy.WIDE_GUARD
    assert check_protection(get_move_data(Move.ROCK_SLIDE), active(Move.WIDE_GUARD))[0] == BlockedBy.WIDE_GUARD
    assert check_protection(get_move_data(Move.TACKLE), active(Move.WIDE_GUARD))[0] == BlockedBy.NONE


def test_quick_guard_blocks_priority_moves_only():
    assert check_protection(get_move_data(Move.MACH_PUNCH), active(Move.QUICK_GUARD))[0] == BlockedBy.QUICK_GUARD
    assert check_protection(get_move_data(Move.TACKLE), active(Move.QUICK_GUARD))[0] == BlockedBy.NONE


def test_contact_penalties():
    assert check_protection(get_move_data(Move.TACKLE), active(Move.SPIKY_SHIELD)) == (
        BlockedBy.PROTECT,
        [SideEffect.SPIKY_SHIELD_RECOIL],
    )
    assert check_protection(get_move_data(Move.TACKLE), active(Move.BANEFUL_BUNKER)) == (
        BlockedBy.PROTECT,
        [SideEffect.BANEFUL_BUNKER_POISON],
    )
    assert check_protection(get_move_data(Move.EMBER), active(Move.SPIKY_SHIELD)) == (BlockedBy.PROTECT, [])


def test_endure_does_not_block():
    assert check_protection(get_move_data(Move.TACKLE), active(Move.ENDURE)) == (BlockedBy.NONE, [])


def test_z_moves_pierce_blocking_protections():
    blitz = get_move_data(Move.BREAKNECK_BLITZ)
    assert check_protection(blitz, active(Move.PROTECT)) == (BlockedBy.NONE, [])
    assert pierces_protect(blitz, active(Move.PROTECT))
    assert not pierces_protect(blitz, active(Move.ENDURE))
    assert not pierces_protect(get_move_data(Move.TACKLE), active(Move.PROTECT))


def test_z_moves_are_not_reported_as_bypassing_protect():
    blitz = get_move_data(Move.BREAKNECK_BLITZ)
    assert not bypasses_protect(blitz)
    assert not DamageCalculator().bypasses_protect(Move.MALICIOUS_MOONSAULT)
    assert check_protection(blitz, active(Move.SPIKY_SHIELD)) == (BlockedBy.NONE, [])
    assert check_protection(blitz, active(Move.ENDURE)) == (BlockedBy.NONE, [])
