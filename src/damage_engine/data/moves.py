"""
Move data repository

Static move records plus the per-move power strategies: pure functions of the battle
snapshot that the Base-Power Resolver calls for moves whose power is not a constant.
"""

from typing import Callable

from src.damage_engine.constants import (
    FLAIL_POWER_TABLE,
    MAX_WEIGHT_POWER,
    MIN_FLAIL_POWER,
    MIN_WEIGHT_RATIO_POWER,
    WEIGHT_POWER_TABLE,
    WEIGHT_RATIO_POWER_TABLE,
)
from src.damage_engine.enums import Ability, Item, Move, MoveCategory, MoveFlag, MoveTarget, SemiInvulnState, Type, Weather
from src.damage_engine.exceptions import DataError
from src.damage_engine.schema.combatant import Combatant
from src.damage_engine.schema.move import BattleMove

PHYSICAL = MoveCategory.PHYSICAL
SPECIAL = MoveCategory.SPECIAL
STATUS = MoveCategory.STATUS

_P = MoveFlag.PROTECT_AFFECTED
_C = MoveFlag.MAKES_CONTACT | MoveFlag.PROTECT_AFFECTED
_SEC = MoveFlag.SECONDARY_EFFECT
_NONE = MoveFlag.NONE

AIRBORNE = frozenset({SemiInvulnState.AIRBORNE})
UNDERGROUND = frozenset({SemiInvulnState.UNDERGROUND})
UNDERWATER = frozenset({SemiInvulnState.UNDERWATER})


def _move(move_id: Move, type_: Type, power, accuracy, category: MoveCategory, flags: MoveFlag = _P, **kwargs) -> BattleMove:
    return BattleMove(id=move_id, type=type_, power=power, accuracy=accuracy, category=category, flags=flags, **kwargs)


BATTLE_MOVES: dict[Move, BattleMove] = {
    move.id: move
    for move in [
        # Physical
        _move(Move.FIRE_PUNCH, Type.FIRE, 75, 100, PHYSICAL, _C | MoveFlag.PUNCH | _SEC),
        _move(Move.STOMP, Type.NORMAL, 65, 100, PHYSICAL, _C | _SEC, punishes_minimize=True),
        _move(Move.TACKLE, Type.NORMAL, 40, 100, PHYSICAL, _C),
        _move(Move.BODY_SLAM, Type.NORMAL, 85, 100, PHYSICAL, _C | _SEC, punishes_minimize=True),
        _move(Move.DOUBLE_EDGE, Type.NORMAL, 120, 100, PHYSICAL, _C | MoveFlag.RECOIL),
        _move(Move.LOW_KICK, Type.FIGHTING, None, 100, PHYSICAL, _C),
        _move(Move.SEISMIC_TOSS, Type.FIGHTING, None, 100, PHYSICAL, _C, fixed_damage=True),
        _move(
            Move.EARTHQUAKE,
            Type.GROUND,
            100,
            100,
            PHYSICAL,
            target=MoveTarget.FOES_AND_ALLY,
            hits_semi_invulnerable=UNDERGROUND,
            punishes_semi_invulnerable=UNDERGROUND,
        ),
        _move(Move.ROCK_SLIDE, Type.ROCK, 75, 90, PHYSICAL, _P | _SEC, target=MoveTarget.BOTH),
        _move(Move.SLASH, Type.NORMAL, 70, 100, PHYSICAL, _C, crit_stage=1),
        _move(Move.FLAIL, Type.NORMAL, None, 100, PHYSICAL, _C),
        _move(Move.REVERSAL, Type.FIGHTING, None, 100, PHYSICAL, _C),
        _move(Move.MACH_PUNCH, Type.FIGHTING, 40, 100, PHYSICAL, _C | MoveFlag.PUNCH, priority=1),
        _move(Move.FURY_CUTTER, Type.BUG, 40, 95, PHYSICAL, _C),
        _move(Move.RETURN, Type.NORMAL, None, 100, PHYSICAL, _C),
        _move(Move.FRUSTRATION, Type.NORMAL, None, 100, PHYSICAL, _C),
        _move(Move.CRUNCH, Type.DARK, 80, 100, PHYSICAL, _C | MoveFlag.BITE | _SEC),
        _move(Move.FACADE, Type.NORMAL, 70, 100, PHYSICAL, _C),
        _move(Move.BRICK_BREAK, Type.FIGHTING, 75, 100, PHYSICAL, _C | MoveFlag.BREAKS_SCREENS),
        _move(Move.KNOCK_OFF, Type.DARK, 65, 100, PHYSICAL, _C),
        _move(Move.SKY_UPPERCUT, Type.FIGHTING, 85, 90, PHYSICAL, _C | MoveFlag.PUNCH, hits_semi_invulnerable=AIRBORNE),
        _move(Move.AERIAL_ACE, Type.FLYING, 60, None, PHYSICAL, _C),
        _move(Move.DRAGON_CLAW, Type.DRAGON, 80, 100, PHYSICAL, _C),
        _move(Move.FEINT, Type.NORMAL, 30, 100, PHYSICAL, _NONE, priority=2),
        _move(Move.CLOSE_COMBAT, Type.FIGHTING, 120, 100, PHYSICAL, _C),
        _move(Move.FLARE_BLITZ, Type.FIRE, 120, 100, PHYSICAL, _C | MoveFlag.RECOIL | _SEC),
        _move(Move.DRAGON_RUSH, Type.DRAGON, 100, 75, PHYSICAL, _C | _SEC, punishes_minimize=True),
        _move(Move.STONE_EDGE, Type.ROCK, 100, 80, PHYSICAL, crit_stage=1),
        _move(Move.SHADOW_FORCE, Type.GHOST, 120, 100, PHYSICAL, MoveFlag.MAKES_CONTACT, punishes_minimize=True),
        _move(Move.SMACK_DOWN, Type.ROCK, 50, 100, PHYSICAL, _P | _SEC, hits_semi_invulnerable=AIRBORNE),
        _move(Move.STORM_THROW, Type.FIGHTING, 60, 100, PHYSICAL, _C, always_crit=True),
        _move(Move.HEAVY_SLAM, Type.STEEL, None, 100, PHYSICAL, _C, punishes_minimize=True),
        _move(Move.POWER_TRIP, Type.DARK, 20, 100, PHYSICAL, _C),
        _move(Move.ACROBATICS, Type.FLYING, 55, 100, PHYSICAL, _C),
        _move(Move.BULLDOZE, Type.GROUND, 60, 100, PHYSICAL, _P | _SEC, target=MoveTarget.FOES_AND_ALLY),
        _move(Move.HEAT_CRASH, Type.FIRE, None, 100, PHYSICAL, _C, punishes_minimize=True),
        _move(Move.STEAMROLLER, Type.BUG, 65, 100, PHYSICAL, _C | _SEC, punishes_minimize=True),
        _move(Move.FLYING_PRESS, Type.FIGHTING, 100, 95, PHYSICAL, _C, punishes_minimize=True),
        _move(Move.PHANTOM_FORCE, Type.GHOST, 90, 100, PHYSICAL, MoveFlag.MAKES_CONTACT, punishes_minimize=True),
        _move(Move.THOUSAND_ARROWS, Type.GROUND, 90, 100, PHYSICAL, target=MoveTarget.BOTH, hits_semi_invulnerable=AIRBORNE),
        _move(Move.BREAKNECK_BLITZ, Type.NORMAL, 175, None, PHYSICAL, MoveFlag.Z_MOVE),
        _move(Move.MALICIOUS_MOONSAULT, Type.DARK, 180, None, PHYSICAL, MoveFlag.Z_MOVE),
        _move(Move.PSYCHIC_FANGS, Type.PSYCHIC, 85, 100, PHYSICAL, _C | MoveFlag.BITE | MoveFlag.BREAKS_SCREENS),
        _move(Move.DOUBLE_IRON_BASH, Type.STEEL, 60, 100, PHYSICAL, _C | MoveFlag.PUNCH | _SEC, punishes_minimize=True),
        # Special
        _move(
            Move.GUST,
            Type.FLYING,
            40,
            100,
            SPECIAL,
            hits_semi_invulnerable=AIRBORNE,
            punishes_semi_invulnerable=AIRBORNE,
        ),
        _move(Move.EMBER, Type.FIRE, 40, 100, SPECIAL, _P | _SEC),
        _move(Move.FLAMETHROWER, Type.FIRE, 90, 100, SPECIAL, _P | _SEC),
        _move(Move.WATER_GUN, Type.WATER, 40, 100, SPECIAL),
        _move(
            Move.SURF,
            Type.WATER,
            90,
            100,
            SPECIAL,
            target=MoveTarget.FOES_AND_ALLY,
            hits_semi_invulnerable=UNDERWATER,
            punishes_semi_invulnerable=UNDERWATER,
        ),
        _move(Move.ICE_BEAM, Type.ICE, 90, 100, SPECIAL, _P | _SEC),
        _move(Move.BLIZZARD, Type.ICE, 110, 70, SPECIAL, _P | _SEC, target=MoveTarget.BOTH),
        _move(Move.DRAGON_RAGE, Type.DRAGON, None, 100, SPECIAL, fixed_damage=True),
        _move(Move.THUNDER_SHOCK, Type.ELECTRIC, 40, 100, SPECIAL, _P | _SEC),
        _move(Move.THUNDERBOLT, Type.ELECTRIC, 90, 100, SPECIAL, _P | _SEC),
        _move(Move.THUNDER, Type.ELECTRIC, 110, 70, SPECIAL, _P | _SEC, hits_semi_invulnerable=AIRBORNE),
        _move(Move.PSYCHIC, Type.PSYCHIC, 90, 100, SPECIAL, _P | _SEC),
        _move(Move.NIGHT_SHADE, Type.GHOST, None, 100, SPECIAL, fixed_damage=True),
        _move(Move.SWIFT, Type.NORMAL, 60, None, SPECIAL, target=MoveTarget.BOTH),
        _move(Move.SLUDGE_BOMB, Type.POISON, 90, 100, SPECIAL, _P | MoveFlag.BALLISTIC | _SEC),
        _move(
            Move.TWISTER,
            Type.DRAGON,
            40,
            100,
            SPECIAL,
            _P | _SEC,
            target=MoveTarget.BOTH,
            hits_semi_invulnerable=AIRBORNE,
            punishes_semi_invulnerable=AIRBORNE,
        ),
        _move(Move.SHADOW_BALL, Type.GHOST, 80, 100, SPECIAL, _P | MoveFlag.BALLISTIC | _SEC),
        _move(Move.FUTURE_SIGHT, Type.PSYCHIC, 120, 100, SPECIAL, _NONE),
        _move(
            Move.WHIRLPOOL,
            Type.WATER,
            35,
            85,
            SPECIAL,
            hits_semi_invulnerable=UNDERWATER,
            punishes_semi_invulnerable=UNDERWATER,
        ),
        _move(Move.ERUPTION, Type.FIRE, 150, 100, SPECIAL, target=MoveTarget.BOTH),
        _move(Move.HYPER_VOICE, Type.NORMAL, 90, 100, SPECIAL, _P | MoveFlag.SOUND, target=MoveTarget.BOTH),
        _move(Move.WEATHER_BALL, Type.NORMAL, 50, 100, SPECIAL, _P | MoveFlag.BALLISTIC),
        _move(Move.WATER_SPOUT, Type.WATER, 150, 100, SPECIAL, target=MoveTarget.BOTH),
        _move(Move.DOOM_DESIRE, Type.STEEL, 140, 100, SPECIAL, _NONE),
        _move(Move.DARK_PULSE, Type.DARK, 80, 100, SPECIAL, _P | MoveFlag.PULSE | _SEC),
        _move(Move.FOCUS_BLAST, Type.FIGHTING, 120, 70, SPECIAL, _P | MoveFlag.BALLISTIC | _SEC),
        _move(Move.FLASH_CANNON, Type.STEEL, 80, 100, SPECIAL, _P | _SEC),
        _move(Move.GRASS_KNOT, Type.GRASS, None, 100, SPECIAL, _C),
        _move(Move.ECHOED_VOICE, Type.NORMAL, 40, 100, SPECIAL, _P | MoveFlag.SOUND),
        _move(Move.STORED_POWER, Type.PSYCHIC, 20, 100, SPECIAL),
        _move(Move.HEX, Type.GHOST, 65, 100, SPECIAL),
        _move(Move.FROST_BREATH, Type.ICE, 60, 90, SPECIAL, always_crit=True),
        _move(Move.HURRICANE, Type.FLYING, 110, 70, SPECIAL, _P | _SEC, hits_semi_invulnerable=AIRBORNE),
        _move(Move.MOONBLAST, Type.FAIRY, 95, 100, SPECIAL, _P | _SEC),
        _move(Move.HYPERSPACE_HOLE, Type.PSYCHIC, 80, None, SPECIAL, _NONE),
        _move(Move.DAZZLING_GLEAM, Type.FAIRY, 80, 100, SPECIAL, target=MoveTarget.BOTH),
        # Status
        _move(Move.SPORE, Type.GRASS, None, 100, STATUS, _P | MoveFlag.POWDER),
        _move(Move.PROTECT, Type.NORMAL, None, None, STATUS, _NONE, priority=4, target=MoveTarget.USER),
        _move(Move.DETECT, Type.FIGHTING, None, None, STATUS, _NONE, priority=4, target=MoveTarget.USER),
        _move(Move.ENDURE, Type.NORMAL, None, None, STATUS, _NONE, priority=4, target=MoveTarget.USER),
        _move(Move.WIDE_GUARD, Type.ROCK, None, None, STATUS, _NONE, priority=3, target=MoveTarget.USER_SIDE),
        _move(Move.QUICK_GUARD, Type.FIGHTING, None, None, STATUS, _NONE, priority=3, target=MoveTarget.USER_SIDE),
        _move(Move.SPIKY_SHIELD, Type.GRASS, None, None, STATUS, _NONE, priority=4, target=MoveTarget.USER),
        _move(Move.BANEFUL_BUNKER, Type.POISON, None, None, STATUS, _NONE, priority=4, target=MoveTarget.USER),
        _move(Move.CHARGE, Type.ELECTRIC, None, None, STATUS, _NONE, target=MoveTarget.USER),
        _move(Move.HELPING_HAND, Type.NORMAL, None, None, STATUS, _NONE, priority=5),
        _move(Move.ME_FIRST, Type.NORMAL, None, None, STATUS, _NONE),
    ]
}

# Moves sharing the decaying consecutive-use success chance
PROTECT_FAMILY = frozenset(
    {
        Move.PROTECT,
        Move.DETECT,
        Move.ENDURE,
        Move.WIDE_GUARD,
        Move.QUICK_GUARD,
        Move.SPIKY_SHIELD,
        Move.BANEFUL_BUNKER,
    }
)

# Delayed attacks resolved by the orchestrator; never gated by protection
DELAYED_ATTACKS = frozenset({Move.FUTURE_SIGHT, Move.DOOM_DESIRE})

# Always hit in rain, 50% accuracy in sun
RAIN_ACCURATE_MOVES = frozenset({Move.THUNDER, Move.HURRICANE})
# Always hits in hail
HAIL_ACCURATE_MOVES = frozenset({Move.BLIZZARD})

# Halved by Grassy Terrain against grounded targets
GRASSY_WEAKENED_MOVES = frozenset({Move.EARTHQUAKE, Move.BULLDOZE})

# Ground moves that also hit ungrounded targets: Flying typing, Levitate and Air Balloon are ignored
GROUNDING_MOVES = frozenset({Move.THOUSAND_ARROWS})

WEATHER_BALL_TYPES = {
    Weather.RAIN: Type.WATER,
    Weather.HEAVY_RAIN: Type.WATER,
    Weather.SUN: Type.FIRE,
    Weather.HARSH_SUN: Type.FIRE,
    Weather.HAIL: Type.ICE,
    Weather.SAND: Type.ROCK,
}


def get_move_data(move: Move) -> BattleMove:
    """Get the static record for a move. Unknown moves raise DataError."""
    try:
        return BATTLE_MOVES[move]
    except KeyError:
        raise DataError(f"Unknown move: {move!r}") from None


def is_protect_family(move: Move) -> bool:
    return move in PROTECT_FAMILY


# =============================================================================
# POWER STRATEGIES
# =============================================================================
PowerStrategy = Callable[[Combatant, Combatant, BattleMove, Weather], int]


def _weight_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    """Low Kick / Grass Knot: heavier targets take more"""
    for upper_bound, power in WEIGHT_POWER_TABLE:
        if defender.weight_kg < upper_bound:
            return power
    return MAX_WEIGHT_POWER


def _weight_ratio_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    """Heavy Slam / Heat Crash: power grows with how many times heavier the user is"""
    if defender.weight_kg <= 0:
        return WEIGHT_RATIO_POWER_TABLE[0][1]
    ratio = attacker.weight_kg / defender.weight_kg
    for min_ratio, power in WEIGHT_RATIO_POWER_TABLE:
        if ratio >= min_ratio:
            return power
    return MIN_WEIGHT_RATIO_POWER


def _hp_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    """Eruption / Water Spout"""
    return max(1, move.power * attacker.hp // attacker.max_hp)


def _flail_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    """Flail / Reversal: lower HP, higher power"""
    scaled = 48 * attacker.hp // attacker.max_hp
    for upper_bound, power in FLAIL_POWER_TABLE:
        if scaled <= upper_bound:
            return power
    return MIN_FLAIL_POWER


def _return_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    return max(1, attacker.friendship * 10 // 25)


def _frustration_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    return max(1, (255 - attacker.friendship) * 10 // 25)


def _facade_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    status = attacker.status1
    if status.is_burned() or status.is_poisoned() or status.is_paralyzed():
        return move.power * 2
    return move.power


def _hex_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    if defender.status1.has_major_status() or defender.effective_ability() == Ability.COMATOSE:
        return move.power * 2
    return move.power


def _weather_ball_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    if weather in WEATHER_BALL_TYPES:
        return move.power * 2
    return move.power


def _stored_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    """Stored Power / Power Trip: +20 per raised stage"""
    return move.power + 20 * attacker.stages.positive_total()


def _fury_cutter_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    return move.power * 2 ** min(attacker.consecutive_uses, 2)


def _echoed_voice_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    return min(200, move.power * (1 + attacker.consecutive_uses))


def _acrobatics_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    if attacker.held_item() == Item.NONE:
        return move.power * 2
    return move.power


def _knock_off_power(attacker: Combatant, defender: Combatant, move: BattleMove, weather: Weather) -> int:
    if defender.held_item() != Item.NONE:
        return move.power * 3 // 2
    return move.power


POWER_STRATEGIES: dict[Move, PowerStrategy] = {
    Move.LOW_KICK: _weight_power,
    Move.GRASS_KNOT: _weight_power,
    Move.HEAVY_SLAM: _weight_ratio_power,
    Move.HEAT_CRASH: _weight_ratio_power,
    Move.ERUPTION: _hp_power,
    Move.WATER_SPOUT: _hp_power,
    Move.FLAIL: _flail_power,
    Move.REVERSAL: _flail_power,
    Move.RETURN: _return_power,
    Move.FRUSTRATION: _frustration_power,
    Move.FACADE: _facade_power,
    Move.HEX: _hex_power,
    Move.WEATHER_BALL: _weather_ball_power,
    Move.STORED_POWER: _stored_power,
    Move.POWER_TRIP: _stored_power,
    Move.FURY_CUTTER: _fury_cutter_power,
    Move.ECHOED_VOICE: _echoed_voice_power,
    Move.ACROBATICS: _acrobatics_power,
    Move.KNOCK_OFF: _knock_off_power,
}
