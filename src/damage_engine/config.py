from pydantic import BaseModel, ConfigDict

from src.damage_engine.enums import FloorMode, StageTable


class EngineConfig(BaseModel):
    """Knobs for behaviour where reference engines disagree"""

    model_config = ConfigDict(frozen=True)

    floor_mode: FloorMode = FloorMode.SINGLE
    accuracy_stages: StageTable = StageTable.NORMAL


DEFAULT_CONFIG = EngineConfig()
