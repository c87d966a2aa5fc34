from enum import IntEnum


class HoldEffect(IntEnum):
    """Hold effects

    Each item maps to one of these values; items sharing a behaviour (all gems, all
    resistance berries, all type-boosting items) share a hold effect and differ only by
    their parameter type.
    """

    NONE = 0

    # =============================================================================
    # ACCURACY / EVASION
    # =============================================================================
    EVASION_UP = 1  # Bright Powder, Lax Incense
    WIDE_LENS = 2
    ZOOM_LENS = 3

    # =============================================================================
    # CRITICAL HITS
    # =============================================================================
    CRITICAL_UP = 10  # Scope Lens, Razor Claw

    # =============================================================================
    # STAT / POWER
    # =============================================================================
    MUSCLE_BAND = 20
    WISE_GLASSES = 21
    CHOICE_BAND = 22
    CHOICE_SPECS = 23
    ASSAULT_VEST = 24
    TYPE_POWER = 25  # Parameter: boosted type
    GEM = 26  # Parameter: boosted type, single use

    # =============================================================================
    # FINAL DAMAGE
    # =============================================================================
    EXPERT_BELT = 30
    LIFE_ORB = 31
    METRONOME = 32
    RESIST_BERRY = 33  # Parameter: resisted type, single use

    # =============================================================================
    # DEFENSIVE / SURVIVAL
    # =============================================================================
    RING_TARGET = 40
    AIR_BALLOON = 41
    FOCUS_SASH = 42
