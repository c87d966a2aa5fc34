from enum import IntEnum


class Item(IntEnum):
    """Held item IDs for the items that take part in damage resolution"""

    NONE = 0

    # Accuracy and evasion
    BRIGHT_POWDER = 1
    LAX_INCENSE = 2
    WIDE_LENS = 3
    ZOOM_LENS = 4

    # Critical hits
    SCOPE_LENS = 10
    RAZOR_CLAW = 11

    # Stat and power boosts
    MUSCLE_BAND = 20
    WISE_GLASSES = 21
    CHOICE_BAND = 22
    CHOICE_SPECS = 23
    ASSAULT_VEST = 24

    # Final damage
    EXPERT_BELT = 30
    LIFE_ORB = 31
    METRONOME = 32

    # Defensive / survival
    RING_TARGET = 40
    AIR_BALLOON = 41
    FOCUS_SASH = 42

    # Type-boosting held items (x1.2)
    SILK_SCARF = 50
    BLACK_BELT = 51
    SHARP_BEAK = 52
    POISON_BARB = 53
    SOFT_SAND = 54
    HARD_STONE = 55
    SILVER_POWDER = 56
    SPELL_TAG = 57
    METAL_COAT = 58
    CHARCOAL = 59
    MYSTIC_WATER = 60
    MIRACLE_SEED = 61
    MAGNET = 62
    TWISTED_SPOON = 63
    NEVER_MELT_ICE = 64
    DRAGON_FANG = 65
    BLACK_GLASSES = 66
    PIXIE_PLATE = 67

    # Gems (single use, x1.3)
    NORMAL_GEM = 70
    FIGHTING_GEM = 71
    FLYING_GEM = 72
    POISON_GEM = 73
    GROUND_GEM = 74
    ROCK_GEM = 75
    BUG_GEM = 76
    GHOST_GEM = 77
    STEEL_GEM = 78
    FIRE_GEM = 79
    WATER_GEM = 80
    GRASS_GEM = 81
    ELECTRIC_GEM = 82
    PSYCHIC_GEM = 83
    ICE_GEM = 84
    DRAGON_GEM = 85
    DARK_GEM = 86
    FAIRY_GEM = 87

    # Damage-halving berries (single use)
    CHILAN_BERRY = 90
    CHOPLE_BERRY = 91
    COBA_BERRY = 92
    KEBIA_BERRY = 93
    SHUCA_BERRY = 94
    CHARTI_BERRY = 95
    TANGA_BERRY = 96
    KASIB_BERRY = 97
    BABIRI_BERRY = 98
    OCCA_BERRY = 99
    PASSHO_BERRY = 100
    RINDO_BERRY = 101
    WACAN_BERRY = 102
    PAYAPA_BERRY = 103
    YACHE_BERRY = 104
    HABAN_BERRY = 105
    COLBUR_BERRY = 106
    ROSELI_BERRY = 107
