from fractions import Fraction

# =============================================================================
# STAT STAGES
# =============================================================================
MIN_STAT_STAGE = -6
MAX_STAT_STAGE = 6

NORMAL_STAGE_BASE = 2  # stage >= 0: (2 + s) / 2, stage < 0: 2 / (2 - s)
ACCURACY_STAGE_BASE = 3  # stage >= 0: (3 + s) / 3, stage < 0: 3 / (3 - s)

# =============================================================================
# LEVEL / ROLL LIMITS
# =============================================================================
MIN_LEVEL = 1
MAX_LEVEL = 100
MAX_FRIENDSHIP = 255

MIN_DAMAGE_ROLL = 85
MAX_DAMAGE_ROLL = 100
NUM_DAMAGE_ROLLS = MAX_DAMAGE_ROLL - MIN_DAMAGE_ROLL + 1  # 16 equally likely percentages

# =============================================================================
# CRITICAL HITS
# =============================================================================
CRIT_CHANCE_BY_STAGE = {
    0: Fraction(1, 24),
    1: Fraction(1, 8),
    2: Fraction(1, 2),
}
MAX_CRIT_STAGE = 3  # Stage 3 and above always crit
CRIT_MULTIPLIER = Fraction(3, 2)
SNIPER_MULTIPLIER = Fraction(3, 2)

# =============================================================================
# PROTECTION
# =============================================================================
PROTECT_SUCCESS_BASE = 3  # chance = 1 / 3^count
PROTECT_MAX_EXPONENT = 6  # floor of 1/729
Z_MOVE_PROTECT_MULTIPLIER = Fraction(1, 4)
Z_MOVE_SPIKY_SHIELD_MULTIPLIER = Fraction(1, 2)

# =============================================================================
# ACCURACY
# =============================================================================
MAX_ACCURACY = 100
MIN_ACCURACY = 0

# =============================================================================
# MODIFIER VALUES
# =============================================================================
SPREAD_MULTIPLIER = Fraction(3, 4)
STAB_MULTIPLIER = Fraction(3, 2)
ADAPTABILITY_MULTIPLIER = Fraction(2)
BURN_MULTIPLIER = Fraction(1, 2)
SCREEN_MULTIPLIER = Fraction(1, 2)
LIFE_ORB_MULTIPLIER = Fraction(13, 10)
LIFE_ORB_RECOIL_DIVISOR = 10
EXPERT_BELT_MULTIPLIER = Fraction(6, 5)
METRONOME_STEP = Fraction(1, 5)
METRONOME_CAP = Fraction(2)

TERRAIN_BOOST = Fraction(3, 2)
ATE_BOOST = Fraction(6, 5)
TYPE_ITEM_BOOST = Fraction(6, 5)
GEM_BOOST = Fraction(13, 10)
SPORT_DIVISOR = 3

# =============================================================================
# DYNAMIC POWER
# =============================================================================
# (upper weight bound in kg, power) - Low Kick / Grass Knot
WEIGHT_POWER_TABLE = [
    (10.0, 20),
    (25.0, 40),
    (50.0, 60),
    (100.0, 80),
    (200.0, 100),
]
MAX_WEIGHT_POWER = 120

# (minimum attacker/defender weight ratio, power) - Heavy Slam / Heat Crash
WEIGHT_RATIO_POWER_TABLE = [
    (5, 120),
    (4, 100),
    (3, 80),
    (2, 60),
]
MIN_WEIGHT_RATIO_POWER = 40

# (upper bound of 48 * hp // max_hp, power) - Flail / Reversal
FLAIL_POWER_TABLE = [
    (1, 200),
    (4, 150),
    (9, 100),
    (16, 80),
    (32, 40),
]
MIN_FLAIL_POWER = 20

# =============================================================================
# TYPE EFFECTIVENESS MULTIPLIERS (tenths)
# =============================================================================
TYPE_MUL_NO_EFFECT = 0  # x0.0 (immune)
TYPE_MUL_NOT_EFFECTIVE = 5  # x0.5
TYPE_MUL_NORMAL = 10  # x1.0
TYPE_MUL_SUPER_EFFECTIVE = 20  # x2.0
