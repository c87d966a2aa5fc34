"""Field and ability conditions shared by the resolvers"""

from src.damage_engine.data.abilities import MOLD_BREAKER_ABILITIES, WEATHER_NEGATING_ABILITIES, is_ability_suppressed
from src.damage_engine.enums import Ability, Item, Type, Weather
from src.damage_engine.schema.combatant import Combatant
from src.damage_engine.schema.field import BattleField


def effective_weather(field: BattleField, attacker: Combatant, defender: Combatant) -> Weather:
    """Weather in force for this resolution. Cloud Nine / Air Lock on either side nullify it."""
    for combatant in (attacker, defender):
        if combatant.effective_ability() in WEATHER_NEGATING_ABILITIES:
            return Weather.NONE
    return field.weather


def has_mold_breaker(attacker: Combatant) -> bool:
    return attacker.effective_ability() in MOLD_BREAKER_ABILITIES


def defender_ability(defender: Combatant, mold_breaker_active: bool) -> Ability:
    """The defender's ability as the attacker experiences it"""
    ability = defender.effective_ability()
    if is_ability_suppressed(ability, mold_breaker_active):
        return Ability.NONE
    return ability


def is_grounded(combatant: Combatant, mold_breaker_active: bool = False) -> bool:
    """Grounded combatants are affected by terrain and Ground moves"""
    if combatant.has_type(Type.FLYING):
        return False
    if combatant.held_item() == Item.AIR_BALLOON:
        return False
    if combatant.effective_ability() == Ability.LEVITATE:
        return is_ability_suppressed(Ability.LEVITATE, mold_breaker_active)
    return True
