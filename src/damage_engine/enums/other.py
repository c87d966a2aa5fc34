from enum import IntEnum


class Weather(IntEnum):
    NONE = 0
    RAIN = 1
    HEAVY_RAIN = 2
    SUN = 3
    HARSH_SUN = 4
    HAIL = 5
    SAND = 6
    STRONG_WINDS = 7

    def is_special(self) -> bool:
        """Primal weathers: do not persist on switch-out and suppress the ordinary ones"""
        return self in (Weather.HEAVY_RAIN, Weather.HARSH_SUN, Weather.STRONG_WINDS)

    def is_rain(self) -> bool:
        return self in (Weather.RAIN, Weather.HEAVY_RAIN)

    def is_sun(self) -> bool:
        return self in (Weather.SUN, Weather.HARSH_SUN)


class Terrain(IntEnum):
    NONE = 0
    ELECTRIC = 1  # Powers up grounded Electric moves, blocks sleep
    GRASSY = 2  # Powers up grounded Grass moves, halves Earthquake/Magnitude/Bulldoze
    MISTY = 3  # Halves Dragon moves against grounded targets, blocks status
    PSYCHIC = 4  # Powers up grounded Psychic moves, blocks priority


class MoveCategory(IntEnum):
    PHYSICAL = 0
    SPECIAL = 1
    STATUS = 2


class SemiInvulnState(IntEnum):
    """Which two-turn move made a combatant semi-invulnerable"""

    NONE = 0
    AIRBORNE = 1  # Fly, Bounce, Sky Drop
    UNDERGROUND = 2  # Dig
    UNDERWATER = 3  # Dive
    VANISHED = 4  # Shadow Force, Phantom Force


class HitReason(IntEnum):
    HIT = 0
    ALWAYS_HIT = 1  # Move never misses, or a weather/minimize rule guarantees the hit
    NO_GUARD = 2
    MISS_ACCURACY = 3
    MISS_EVASIVE = 4  # Target is semi-invulnerable and the move cannot reach it


class BlockedBy(IntEnum):
    NONE = 0
    PROTECT = 1
    WIDE_GUARD = 2
    QUICK_GUARD = 3
    DISGUISE = 4
    WONDER_GUARD = 5
    WEATHER = 6  # Primal weather evaporates / washes out the move


class SideEffect(IntEnum):
    LIFE_ORB_RECOIL = 0
    GEM_CONSUMED = 1
    BERRY_CONSUMED = 2
    CHARGE_CONSUMED = 3
    DISGUISE_BROKEN = 4
    ABILITY_ABSORBED = 5
    SPIKY_SHIELD_RECOIL = 6
    BANEFUL_BUNKER_POISON = 7
    PROTECT_PIERCED = 8


class FloorMode(IntEnum):
    """Where the modifier chain truncates"""

    SINGLE = 0  # floor(raw * M * roll) once
    PER_STAGE = 1  # floor after every stage, roll right after the critical-hit stage


class StageTable(IntEnum):
    NORMAL = 0  # 2/2 base
    ACCURACY = 1  # 3/3 base
