from enum import IntEnum


class Type(IntEnum):
    """Elemental types, in the order the type chart is laid out (Gen VII, 18 types)"""

    NORMAL = 0
    FIGHTING = 1
    FLYING = 2
    POISON = 3
    GROUND = 4
    ROCK = 5
    BUG = 6
    GHOST = 7
    STEEL = 8
    FIRE = 9
    WATER = 10
    GRASS = 11
    ELECTRIC = 12
    PSYCHIC = 13
    ICE = 14
    DRAGON = 15
    DARK = 16
    FAIRY = 17


class Effectiveness(IntEnum):
    """Classification of a combined type-effectiveness multiplier"""

    IMMUNE = 0
    RESISTED = 1
    NEUTRAL = 2
    SUPER_EFFECTIVE = 3

    @classmethod
    def classify(cls, multiplier: float) -> "Effectiveness":
        if multiplier == 0:
            return cls.IMMUNE
        if multiplier < 1:
            return cls.RESISTED
        if multiplier > 1:
            return cls.SUPER_EFFECTIVE
        return cls.NEUTRAL
