from enum import IntEnum


class Ability(IntEnum):
    """Ability IDs for the abilities that take part in damage resolution"""

    NONE = 0
    BATTLE_ARMOR = 4
    STURDY = 5
    SAND_VEIL = 8
    VOLT_ABSORB = 10
    WATER_ABSORB = 11
    CLOUD_NINE = 13
    COMPOUND_EYES = 14
    FLASH_FIRE = 18
    WONDER_GUARD = 25
    LEVITATE = 26
    LIGHTNING_ROD = 31
    HUGE_POWER = 37
    SOUNDPROOF = 43
    THICK_FAT = 47
    KEEN_EYE = 51
    HUSTLE = 55
    GUTS = 62
    MARVEL_SCALE = 63
    OVERGROW = 65
    BLAZE = 66
    TORRENT = 67
    SWARM = 68
    PURE_POWER = 74
    SHELL_ARMOR = 75
    AIR_LOCK = 76
    TANGLED_FEET = 77
    MOTOR_DRIVE = 78
    SNOW_CLOAK = 81
    HEATPROOF = 85
    DRY_SKIN = 87
    IRON_FIST = 89
    ADAPTABILITY = 91
    NORMALIZE = 96
    SNIPER = 97
    MAGIC_GUARD = 98
    NO_GUARD = 99
    TECHNICIAN = 101
    MOLD_BREAKER = 104
    SUPER_LUCK = 105
    UNAWARE = 109
    TINTED_LENS = 110
    FILTER = 111
    SCRAPPY = 113
    STORM_DRAIN = 114
    SOLID_ROCK = 116
    RECKLESS = 120
    SHEER_FORCE = 125
    FRIEND_GUARD = 132
    MULTISCALE = 136
    INFILTRATOR = 151
    SAP_SIPPER = 157
    SAND_FORCE = 159
    VICTORY_STAR = 162
    TURBOBLAZE = 163
    TERAVOLT = 164
    FUR_COAT = 169
    BULLETPROOF = 171
    STRONG_JAW = 173
    REFRIGERATE = 174
    MEGA_LAUNCHER = 178
    TOUGH_CLAWS = 181
    PIXILATE = 182
    AERILATE = 184
    DARK_AURA = 186
    FAIRY_AURA = 187
    AURA_BREAK = 188
    MERCILESS = 196
    SHIELDS_DOWN = 197
    GALVANIZE = 206
    DISGUISE = 209
    COMATOSE = 213
    FLUFFY = 218
    FULL_METAL_BODY = 230
    SHADOW_SHIELD = 231
    PRISM_ARMOR = 232
