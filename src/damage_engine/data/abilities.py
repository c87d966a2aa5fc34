"""
Ability effect tables

Each ability that matters to damage resolution appears in exactly one table below, keyed
by Ability, with the parameters its effect needs. The resolvers look abilities up here
instead of branching on them inline.
"""

from fractions import Fraction

from src.damage_engine.enums import Ability, MoveFlag, Type, Weather

# =============================================================================
# MOLD BREAKER
# =============================================================================
MOLD_BREAKER_ABILITIES = frozenset({Ability.MOLD_BREAKER, Ability.TERAVOLT, Ability.TURBOBLAZE})

# Defensive abilities a Mold-Breaker-class attacker ignores while its move resolves
BREAKABLE_ABILITIES = frozenset(
    {
        Ability.BATTLE_ARMOR,
        Ability.SHELL_ARMOR,
        Ability.STURDY,
        Ability.SAND_VEIL,
        Ability.SNOW_CLOAK,
        Ability.TANGLED_FEET,
        Ability.VOLT_ABSORB,
        Ability.WATER_ABSORB,
        Ability.MOTOR_DRIVE,
        Ability.FLASH_FIRE,
        Ability.SAP_SIPPER,
        Ability.DRY_SKIN,
        Ability.LEVITATE,
        Ability.WONDER_GUARD,
        Ability.SOUNDPROOF,
        Ability.BULLETPROOF,
        Ability.THICK_FAT,
        Ability.HEATPROOF,
        Ability.MARVEL_SCALE,
        Ability.FUR_COAT,
        Ability.FILTER,
        Ability.SOLID_ROCK,
        Ability.FLUFFY,
        Ability.FRIEND_GUARD,
        Ability.UNAWARE,
        Ability.DISGUISE,
    }
)

# Never ignored, even by a Mold-Breaker-class attacker
MOLD_BREAKER_EXEMPT = frozenset(
    {
        Ability.AURA_BREAK,
        Ability.MAGIC_GUARD,
        Ability.COMATOSE,
        Ability.SHIELDS_DOWN,
        Ability.FULL_METAL_BODY,
        Ability.SHADOW_SHIELD,
        Ability.PRISM_ARMOR,
    }
)

# Redirecting abilities stay active under Mold Breaker (the move is still drawn to the
# holder) but their type immunity no longer protects it.
REDIRECT_ABILITIES = frozenset({Ability.LIGHTNING_ROD, Ability.STORM_DRAIN})

# =============================================================================
# TYPE IMMUNITY / ABSORPTION
# =============================================================================
TYPE_IMMUNITY_ABILITIES = {
    Ability.LEVITATE: Type.GROUND,
    Ability.VOLT_ABSORB: Type.ELECTRIC,
    Ability.MOTOR_DRIVE: Type.ELECTRIC,
    Ability.LIGHTNING_ROD: Type.ELECTRIC,
    Ability.WATER_ABSORB: Type.WATER,
    Ability.STORM_DRAIN: Type.WATER,
    Ability.DRY_SKIN: Type.WATER,
    Ability.FLASH_FIRE: Type.FIRE,
    Ability.SAP_SIPPER: Type.GRASS,
}

# Flag-based immunities
FLAG_IMMUNITY_ABILITIES = {
    Ability.SOUNDPROOF: MoveFlag.SOUND,
    Ability.BULLETPROOF: MoveFlag.BALLISTIC,
}

# =============================================================================
# POWER
# =============================================================================
# Normal moves become this type and gain x1.2
ATE_ABILITIES = {
    Ability.REFRIGERATE: Type.ICE,
    Ability.PIXILATE: Type.FAIRY,
    Ability.AERILATE: Type.FLYING,
    Ability.GALVANIZE: Type.ELECTRIC,
}

# x1.5 to moves of this type while at or below 1/3 HP
PINCH_ABILITIES = {
    Ability.OVERGROW: Type.GRASS,
    Ability.BLAZE: Type.FIRE,
    Ability.TORRENT: Type.WATER,
    Ability.SWARM: Type.BUG,
}

# (move flag, power multiplier)
FLAG_POWER_ABILITIES = {
    Ability.IRON_FIST: (MoveFlag.PUNCH, Fraction(6, 5)),
    Ability.STRONG_JAW: (MoveFlag.BITE, Fraction(3, 2)),
    Ability.MEGA_LAUNCHER: (MoveFlag.PULSE, Fraction(3, 2)),
    Ability.TOUGH_CLAWS: (MoveFlag.MAKES_CONTACT, Fraction(4, 3)),
    Ability.RECKLESS: (MoveFlag.RECOIL, Fraction(6, 5)),
    Ability.SHEER_FORCE: (MoveFlag.SECONDARY_EFFECT, Fraction(13, 10)),
}

TECHNICIAN_THRESHOLD = 60
TECHNICIAN_MULTIPLIER = Fraction(3, 2)
PINCH_MULTIPLIER = Fraction(3, 2)
FLASH_FIRE_MULTIPLIER = Fraction(3, 2)

SAND_FORCE_TYPES = frozenset({Type.ROCK, Type.GROUND, Type.STEEL})
SAND_FORCE_MULTIPLIER = Fraction(13, 10)

# Aura abilities boost moves of their type for everyone on the field; Aura Break inverts them
AURA_ABILITIES = {
    Ability.DARK_AURA: Type.DARK,
    Ability.FAIRY_AURA: Type.FAIRY,
}
AURA_MULTIPLIER = Fraction(4, 3)
AURA_BREAK_MULTIPLIER = Fraction(3, 4)

# Defender abilities scaling incoming power by move type
DEFENDER_POWER_ABILITIES = {
    Ability.HEATPROOF: {Type.FIRE: Fraction(1, 2)},
    Ability.THICK_FAT: {Type.FIRE: Fraction(1, 2), Type.ICE: Fraction(1, 2)},
    Ability.DRY_SKIN: {Type.FIRE: Fraction(5, 4)},
}

# =============================================================================
# STATS
# =============================================================================
# (stat name, multiplier, needs a major status)
ATTACKER_STAT_ABILITIES = {
    Ability.HUGE_POWER: ("attack", Fraction(2), False),
    Ability.PURE_POWER: ("attack", Fraction(2), False),
    Ability.HUSTLE: ("attack", Fraction(3, 2), False),
    Ability.GUTS: ("attack", Fraction(3, 2), True),
}
DEFENDER_STAT_ABILITIES = {
    Ability.MARVEL_SCALE: ("defense", Fraction(3, 2), True),
    Ability.FUR_COAT: ("defense", Fraction(2), False),
}

# =============================================================================
# ACCURACY / CRITICAL HITS
# =============================================================================
# Evasion abilities active only in their weather
WEATHER_EVASION_ABILITIES = {
    Ability.SAND_VEIL: Weather.SAND,
    Ability.SNOW_CLOAK: Weather.HAIL,
}
WEATHER_EVASION_MULTIPLIER = Fraction(4, 5)
COMPOUND_EYES_MULTIPLIER = Fraction(13, 10)
VICTORY_STAR_MULTIPLIER = Fraction(11, 10)
HUSTLE_ACCURACY_MULTIPLIER = Fraction(4, 5)
TANGLED_FEET_MULTIPLIER = Fraction(1, 2)

CRIT_BOOST_ABILITIES = frozenset({Ability.SUPER_LUCK})
CRIT_BLOCK_ABILITIES = frozenset({Ability.BATTLE_ARMOR, Ability.SHELL_ARMOR})

WEATHER_NEGATING_ABILITIES = frozenset({Ability.CLOUD_NINE, Ability.AIR_LOCK})
STAB_DOUBLING_ABILITIES = frozenset({Ability.ADAPTABILITY})


def is_ability_suppressed(ability: Ability, mold_breaker_active: bool) -> bool:
    """Check whether a defender's ability is ignored by the attacker's Mold-Breaker-class ability"""
    if not mold_breaker_active:
        return False
    if ability in MOLD_BREAKER_EXEMPT or ability in REDIRECT_ABILITIES:
        return False
    return ability in BREAKABLE_ABILITIES


def grants_type_immunity(ability: Ability, move_type: Type, mold_breaker_active: bool) -> bool:
    """Check whether a defender's ability makes it immune to a move of move_type"""
    if TYPE_IMMUNITY_ABILITIES.get(ability) != move_type:
        return False
    if ability in REDIRECT_ABILITIES:
        return not mold_breaker_active
    return not is_ability_suppressed(ability, mold_breaker_active)
