from fractions import Fraction
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.damage_engine.enums import Ability, BlockedBy, Effectiveness, HitReason, SideEffect, Type, Weather
from src.damage_engine.schema.combatant import Combatant
from src.damage_engine.schema.field import BattleField
from src.damage_engine.schema.move import BattleMove
from src.damage_engine.schema.protection import ProtectionState


class HitResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    hits: bool
    reason: HitReason
    accuracy: Optional[int] = None  # Final clamped percentage, when a draw was needed


class CritResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_critical: bool
    stage: int = 0
    ignore_defensive_stage_reductions: bool = False  # Attacker drops and defender boosts are skipped


class PowerResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    power: int
    move_type: Type
    side_effects: list[SideEffect] = Field(default_factory=list)


class ModifierContext(BaseModel):
    """Everything the modifier stages read, built once per resolution and then discarded"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    attacker: Combatant
    defender: Combatant
    move: BattleMove
    field: BattleField
    protection: ProtectionState
    defender_side: int = 1

    move_type: Type
    weather: Weather  # Weather in force after Cloud Nine / Air Lock
    is_critical: bool = False
    is_stab: bool = False
    type_multiplier: Fraction = Fraction(1)
    effectiveness: Effectiveness = Effectiveness.NEUTRAL
    is_contact: bool = False
    screens_apply: bool = False
    mold_breaker_active: bool = False
    one_shot_item_consumed: bool = False  # A gem was spent while computing power


class DamageResult(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    amount: int = Field(ge=0)
    is_critical: bool = False
    effectiveness: Effectiveness = Effectiveness.NEUTRAL
    blocked_by: BlockedBy = BlockedBy.NONE
    would_survive_at_1: bool = False
    side_effects: list[SideEffect] = Field(default_factory=list)

    move_type: Optional[Type] = None
    base_power: int = 0
    modifier: Fraction = Fraction(0)
    roll: Optional[int] = None
    would_ko: bool = False
    from_full_hp: bool = False  # The hit would KO even from full HP
    recoil: int = 0
    absorbed_by: Ability = Ability.NONE


class MoveOutcome(BaseModel):
    """Hit check followed by damage, when the move connected"""

    model_config = ConfigDict(frozen=True)

    hit: HitResult
    damage: Optional[DamageResult] = None
