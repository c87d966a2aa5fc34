from fractions import Fraction
from typing import Iterable

from src.damage_engine.enums.type import Type, Effectiveness
from src.damage_engine.constants import TYPE_MUL_NO_EFFECT, TYPE_MUL_NOT_EFFECTIVE, TYPE_MUL_NORMAL, TYPE_MUL_SUPER_EFFECTIVE

_0 = TYPE_MUL_NO_EFFECT
_H = TYPE_MUL_NOT_EFFECTIVE
_1 = TYPE_MUL_NORMAL
_2 = TYPE_MUL_SUPER_EFFECTIVE

# Gen VII chart, row = attacking type, column = defending type, both in Type order.
# Flattened to NUM_TYPES * NUM_TYPES entries.
NUM_TYPES = len(Type)

# fmt: off
TYPE_EFFECTIVENESS_CHART = [
    # NOR FIG FLY POI GRO ROC BUG GHO STE FIR WAT GRA ELE PSY ICE DRA DAR FAI
    _1, _1, _1, _1, _1, _H, _1, _0, _H, _1, _1, _1, _1, _1, _1, _1, _1, _1,  # Normal
    _2, _1, _H, _H, _1, _2, _H, _0, _2, _1, _1, _1, _1, _H, _2, _1, _2, _H,  # Fighting
    _1, _2, _1, _1, _1, _H, _2, _1, _H, _1, _1, _2, _H, _1, _1, _1, _1, _1,  # Flying
    _1, _1, _1, _H, _H, _H, _1, _H, _0, _1, _1, _2, _1, _1, _1, _1, _1, _2,  # Poison
    _1, _1, _0, _2, _1, _2, _H, _1, _2, _2, _1, _H, _2, _1, _1, _1, _1, _1,  # Ground
    _1, _H, _2, _1, _H, _1, _2, _1, _H, _2, _1, _1, _1, _1, _2, _1, _1, _1,  # Rock
    _1, _H, _H, _H, _1, _1, _1, _H, _H, _H, _1, _2, _1, _2, _1, _1, _2, _H,  # Bug
    _0, _1, _1, _1, _1, _1, _1, _2, _1, _1, _1, _1, _1, _2, _1, _1, _H, _1,  # Ghost
    _1, _1, _1, _1, _1, _2, _1, _1, _H, _H, _H, _1, _H, _1, _2, _1, _1, _2,  # Steel
    _1, _1, _1, _1, _1, _H, _2, _1, _2, _H, _H, _2, _1, _1, _2, _H, _1, _1,  # Fire
    _1, _1, _1, _1, _2, _2, _1, _1, _1, _2, _H, _H, _1, _1, _1, _H, _1, _1,  # Water
    _1, _1, _H, _H, _2, _2, _H, _1, _H, _H, _2, _H, _1, _1, _1, _H, _1, _1,  # Grass
    _1, _1, _2, _1, _0, _1, _1, _1, _1, _1, _2, _H, _H, _1, _1, _H, _1, _1,  # Electric
    _1, _2, _1, _2, _1, _1, _1, _1, _H, _1, _1, _1, _1, _H, _1, _1, _0, _1,  # Psychic
    _1, _1, _2, _1, _2, _1, _1, _1, _H, _H, _H, _2, _1, _1, _H, _2, _1, _1,  # Ice
    _1, _1, _1, _1, _1, _1, _1, _1, _H, _1, _1, _1, _1, _1, _1, _2, _1, _0,  # Dragon
    _1, _H, _1, _1, _1, _1, _1, _2, _1, _1, _1, _1, _1, _2, _1, _1, _H, _H,  # Dark
    _1, _2, _1, _H, _1, _1, _1, _1, _H, _H, _1, _1, _1, _1, _1, _2, _2, _1,  # Fairy
]
# fmt: on


class TypeEffectiveness:
    """Type chart lookups, returning exact multipliers"""

    @staticmethod
    def get_effectiveness(attacking_type: Type, defending_type: Type, scrappy: bool = False) -> Fraction:
        """
        Get the multiplier of one attacking type against one defending type.

        Args:
            attacking_type: Type of the move after type-changing effects
            defending_type: One of the defender's types
            scrappy: Normal and Fighting moves hit Ghost types (Scrappy)
        """
        if scrappy and defending_type == Type.GHOST and attacking_type in (Type.NORMAL, Type.FIGHTING):
            return Fraction(1)
        value = TYPE_EFFECTIVENESS_CHART[int(attacking_type) * NUM_TYPES + int(defending_type)]
        return Fraction(value, TYPE_MUL_NORMAL)

    @staticmethod
    def get_combined_effectiveness(
        attacking_type: Type,
        defending_types: Iterable[Type],
        scrappy: bool = False,
        ring_target: bool = False,
    ) -> Fraction:
        """
        Product of the per-type multipliers against a one- or two-typed defender.

        Ring Target turns each per-type immunity into a neutral 1 before multiplying.
        """
        multiplier = Fraction(1)
        for defending_type in dict.fromkeys(defending_types):
            single = TypeEffectiveness.get_effectiveness(attacking_type, defending_type, scrappy)
            if single == 0 and ring_target:
                single = Fraction(1)
            multiplier *= single
        return multiplier

    @staticmethod
    def classify(multiplier: Fraction) -> Effectiveness:
        return Effectiveness.classify(multiplier)

    @staticmethod
    def is_immune(attacking_type: Type, defending_type: Type) -> bool:
        return TypeEffectiveness.get_effectiveness(attacking_type, defending_type) == 0

    @staticmethod
    def is_super_effective(attacking_type: Type, defending_type: Type) -> bool:
        return TypeEffectiveness.get_effectiveness(attacking_type, defending_type) > 1
