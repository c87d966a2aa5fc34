from fractions import Fraction

from pydantic import BaseModel, ConfigDict, Field

from src.damage_engine.constants import PROTECT_MAX_EXPONENT, PROTECT_SUCCESS_BASE
from src.damage_engine.enums import Move


class ProtectionState(BaseModel):
    """Per-combatant protect-family counter

    consecutive_uses counts successful protect-family moves in a row; active is True for
    the turn a protect-family move succeeded and kind records which one.
    """

    model_config = ConfigDict(frozen=True)

    consecutive_uses: int = Field(default=0, ge=0)
    active: bool = False
    kind: Move = Move.NONE

    def success_chance(self) -> Fraction:
        """Chance that the next protect-family move succeeds: 1/3^count, floored at 1/729"""
        return Fraction(1, PROTECT_SUCCESS_BASE ** min(self.consecutive_uses, PROTECT_MAX_EXPONENT))
