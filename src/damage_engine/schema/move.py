from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.damage_engine.enums import Move, MoveCategory, MoveFlag, MoveTarget, SemiInvulnState, Type


class BattleMove(BaseModel):
    """Static move record served by the move data repository"""

    model_config = ConfigDict(frozen=True)

    id: Move
    type: Type
    power: Optional[int] = Field(default=None, ge=1, le=250)  # None: fixed-damage or computed power
    accuracy: Optional[int] = Field(default=100, ge=1, le=100)  # None: never misses
    category: MoveCategory
    priority: int = Field(default=0, ge=-7, le=5)
    target: MoveTarget = MoveTarget.SELECTED
    flags: MoveFlag = MoveFlag.PROTECT_AFFECTED
    crit_stage: int = Field(default=0, ge=0, le=3)
    always_crit: bool = False
    fixed_damage: bool = False
    hits_semi_invulnerable: frozenset[SemiInvulnState] = frozenset()
    punishes_semi_invulnerable: frozenset[SemiInvulnState] = frozenset()  # Double damage against these
    punishes_minimize: bool = False

    def is_status(self) -> bool:
        return self.category == MoveCategory.STATUS

    def is_physical(self) -> bool:
        return self.category == MoveCategory.PHYSICAL

    def is_special(self) -> bool:
        return self.category == MoveCategory.SPECIAL

    def is_spread(self) -> bool:
        return self.target.is_spread()

    def makes_contact(self) -> bool:
        return self.flags.makes_contact()

    def can_hit(self, state: SemiInvulnState) -> bool:
        """Check whether this move reaches a target in the given semi-invulnerable state"""
        return state == SemiInvulnState.NONE or state in self.hits_semi_invulnerable
