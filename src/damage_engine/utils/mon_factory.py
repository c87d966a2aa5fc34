from typing import Iterable, Optional

from src.damage_engine.enums import Ability, Item, Type
from src.damage_engine.schema.combatant import Combatant, StatStages


def create_combatant(
    types: Iterable[Type] = (Type.NORMAL,),
    level: int = 50,
    attack: int = 100,
    defense: int = 100,
    sp_attack: int = 100,
    sp_defense: int = 100,
    speed: int = 100,
    max_hp: int = 200,
    hp: Optional[int] = None,
    ability: Ability = Ability.NONE,
    item: Item = Item.NONE,
    stages: Optional[StatStages] = None,
    **overrides,
) -> Combatant:
    """Build a combatant with stats given directly, at full HP unless hp is passed"""
    return Combatant(
        types=list(types),
        level=level,
        attack=attack,
        defense=defense,
        sp_attack=sp_attack,
        sp_defense=sp_defense,
        speed=speed,
        max_hp=max_hp,
        hp=max_hp if hp is None else hp,
        ability=ability,
        item=item,
        stages=stages or StatStages(),
        **overrides,
    )
