"""State checks run at every public entry point. Violations raise InvalidStateError."""

from src.damage_engine.constants import MAX_STAT_STAGE, MIN_STAT_STAGE
from src.damage_engine.exceptions import InvalidStateError
from src.damage_engine.schema.combatant import Combatant
from src.damage_engine.schema.move import BattleMove


def validate_stage(stage: int, name: str = "stage") -> None:
    if not MIN_STAT_STAGE <= stage <= MAX_STAT_STAGE:
        raise InvalidStateError(f"{name} stage {stage} outside [{MIN_STAT_STAGE}, {MAX_STAT_STAGE}]")


def validate_combatant(combatant: Combatant) -> None:
    """Reject snapshots that break the engine's contract instead of clamping them"""
    for name, stage in combatant.stages.as_dict().items():
        validate_stage(stage, name)
    if combatant.hp < 0:
        raise InvalidStateError(f"negative HP: {combatant.hp}")
    if combatant.hp > combatant.max_hp:
        raise InvalidStateError(f"HP {combatant.hp} exceeds max HP {combatant.max_hp}")


def validate_damaging_move(move: BattleMove) -> None:
    """Only moves with a power (constant or computed) may enter the damage formula"""
    if move.is_status():
        raise InvalidStateError(f"status move {move.id.name} routed into the damage formula")
    if move.fixed_damage:
        raise InvalidStateError(f"fixed-damage move {move.id.name} routed into the damage formula")
