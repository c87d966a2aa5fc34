from pydantic import BaseModel, ConfigDict, Field

from src.damage_engine.enums import MoveCategory, Terrain, Weather


class SideConditions(BaseModel):
    """Screens on one side of the field, as remaining turns"""

    model_config = ConfigDict(frozen=True)

    reflect_turns: int = Field(default=0, ge=0)
    light_screen_turns: int = Field(default=0, ge=0)
    aurora_veil_turns: int = Field(default=0, ge=0)

    def has_screen_for(self, category: MoveCategory) -> bool:
        """Check whether a screen on this side weakens moves of the given category"""
        if self.aurora_veil_turns > 0:
            return category != MoveCategory.STATUS
        if category == MoveCategory.PHYSICAL:
            return self.reflect_turns > 0
        if category == MoveCategory.SPECIAL:
            return self.light_screen_turns > 0
        return False


class BattleField(BaseModel):
    """Field-wide state shared by both combatants"""

    model_config = ConfigDict(frozen=True)

    weather: Weather = Weather.NONE
    weather_turns: int = Field(default=0, ge=0)
    terrain: Terrain = Terrain.NONE
    terrain_turns: int = Field(default=0, ge=0)
    mud_sport: bool = False
    water_sport: bool = False
    sides: list[SideConditions] = Field(
        default_factory=lambda: [SideConditions(), SideConditions()], min_length=2, max_length=2
    )
    is_multi_battle: bool = False

    def side(self, index: int) -> SideConditions:
        return self.sides[index]
