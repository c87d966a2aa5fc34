from src.damage_engine.enums.move import MoveTarget, MoveFlag, Move
from src.damage_engine.enums.type import Type, Effectiveness
from src.damage_engine.enums.ability import Ability
from src.damage_engine.enums.item import Item
from src.damage_engine.enums.hold_effect import HoldEffect
from src.damage_engine.enums.status import Status1, Status2
from src.damage_engine.enums.other import (
    Weather,
    Terrain,
    MoveCategory,
    SemiInvulnState,
    HitReason,
    BlockedBy,
    SideEffect,
    FloorMode,
    StageTable,
)
