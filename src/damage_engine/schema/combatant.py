from pydantic import BaseModel, ConfigDict, Field

from src.damage_engine.constants import MAX_FRIENDSHIP, MAX_LEVEL, MIN_LEVEL
from src.damage_engine.enums import Ability, Item, Status1, Status2, Type, SemiInvulnState


class StatStages(BaseModel):
    """Stat stages, 0 is neutral. The engine rejects values outside [-6, 6]."""

    model_config = ConfigDict(frozen=True)

    attack: int = 0
    defense: int = 0
    sp_attack: int = 0
    sp_defense: int = 0
    speed: int = 0
    accuracy: int = 0
    evasion: int = 0

    def as_dict(self) -> dict[str, int]:
        return self.model_dump()

    def positive_total(self) -> int:
        """Sum of all raised stages (Stored Power / Power Trip)"""
        return sum(stage for stage in self.as_dict().values() if stage > 0)


class Combatant(BaseModel):
    """Immutable snapshot of one battler, as the turn orchestrator hands it to the engine"""

    model_config = ConfigDict(frozen=True)

    # Core stats (already computed from base stats, IVs, EVs and nature)
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL)
    attack: int = Field(ge=0, le=65535)
    defense: int = Field(ge=0, le=65535)
    sp_attack: int = Field(ge=0, le=65535)
    sp_defense: int = Field(ge=0, le=65535)
    speed: int = Field(ge=0, le=65535)
    stages: StatStages = Field(default_factory=StatStages)

    # HP is validated by the engine rather than here, see InvalidStateError
    hp: int
    max_hp: int = Field(ge=1, le=65535)

    weight_kg: float = Field(default=50.0, ge=0)
    friendship: int = Field(default=MAX_FRIENDSHIP, ge=0, le=MAX_FRIENDSHIP)

    types: list[Type] = Field(default_factory=lambda: [Type.NORMAL], min_length=1, max_length=2)
    status1: Status1 = Status1.NONE
    status2: Status2 = Status2.NONE

    ability: Ability = Ability.NONE
    abilities_ignored: bool = False  # Gastro Acid, Neutralizing effects
    item: Item = Item.NONE
    item_active: bool = True  # False once a consumable is used or the item is suppressed

    # Volatile battle flags
    minimized: bool = False
    semi_invulnerable: SemiInvulnState = SemiInvulnState.NONE
    consecutive_uses: int = Field(default=0, ge=0)  # Same move used N times in a row before this one
    flash_fire_active: bool = False
    helping_hand: bool = False
    me_first: bool = False
    friend_guard_ally: bool = False  # An ally with Friend Guard is on the field
    crit_stage_bonus: int = Field(default=0, ge=0)  # Focus Energy style sources supplied by the caller
    moved_this_turn: bool = False
    disguise_broken: bool = False

    def has_type(self, type_: Type) -> bool:
        return type_ in self.types

    def effective_ability(self) -> Ability:
        """The ability in force, NONE when abilities are suppressed"""
        if self.abilities_ignored:
            return Ability.NONE
        return self.ability

    def held_item(self) -> Item:
        """The held item in force, NONE when it is consumed or inactive"""
        if not self.item_active:
            return Item.NONE
        return self.item

    def is_full_hp(self) -> bool:
        return self.hp == self.max_hp

    def stat(self, name: str) -> int:
        return getattr(self, name)

    def stage(self, name: str) -> int:
        return getattr(self.stages, name)
