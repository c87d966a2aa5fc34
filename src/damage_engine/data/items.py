from typing import Optional

from src.damage_engine.enums import Item, HoldEffect, Type

# Item to hold effect mapping, restricted to items that take part in damage resolution
ITEM_HOLD_EFFECTS = {
    # =============================================================================
    # ACCURACY / EVASION
    # =============================================================================
    Item.BRIGHT_POWDER: HoldEffect.EVASION_UP,  # x0.9 opposing accuracy
    Item.LAX_INCENSE: HoldEffect.EVASION_UP,
    Item.WIDE_LENS: HoldEffect.WIDE_LENS,  # x1.1 accuracy
    Item.ZOOM_LENS: HoldEffect.ZOOM_LENS,  # x1.2 accuracy when moving after the target
    # =============================================================================
    # CRITICAL HITS
    # =============================================================================
    Item.SCOPE_LENS: HoldEffect.CRITICAL_UP,  # +1 crit stage
    Item.RAZOR_CLAW: HoldEffect.CRITICAL_UP,
    # =============================================================================
    # STAT / POWER
    # =============================================================================
    Item.MUSCLE_BAND: HoldEffect.MUSCLE_BAND,  # x1.1 physical power
    Item.WISE_GLASSES: HoldEffect.WISE_GLASSES,  # x1.1 special power
    Item.CHOICE_BAND: HoldEffect.CHOICE_BAND,  # x1.5 Attack
    Item.CHOICE_SPECS: HoldEffect.CHOICE_SPECS,  # x1.5 Sp. Atk
    Item.ASSAULT_VEST: HoldEffect.ASSAULT_VEST,  # x1.5 Sp. Def
    # Type power boosting items
    Item.SILK_SCARF: HoldEffect.TYPE_POWER,
    Item.BLACK_BELT: HoldEffect.TYPE_POWER,
    Item.SHARP_BEAK: HoldEffect.TYPE_POWER,
    Item.POISON_BARB: HoldEffect.TYPE_POWER,
    Item.SOFT_SAND: HoldEffect.TYPE_POWER,
    Item.HARD_STONE: HoldEffect.TYPE_POWER,
    Item.SILVER_POWDER: HoldEffect.TYPE_POWER,
    Item.SPELL_TAG: HoldEffect.TYPE_POWER,
    Item.METAL_COAT: HoldEffect.TYPE_POWER,
    Item.CHARCOAL: HoldEffect.TYPE_POWER,
    Item.MYSTIC_WATER: HoldEffect.TYPE_POWER,
    Item.MIRACLE_SEED: HoldEffect.TYPE_POWER,
    Item.MAGNET: HoldEffect.TYPE_POWER,
    Item.TWISTED_SPOON: HoldEffect.TYPE_POWER,
    Item.NEVER_MELT_ICE: HoldEffect.TYPE_POWER,
    Item.DRAGON_FANG: HoldEffect.TYPE_POWER,
    Item.BLACK_GLASSES: HoldEffect.TYPE_POWER,
    Item.PIXIE_PLATE: HoldEffect.TYPE_POWER,
    # Gems
    Item.NORMAL_GEM: HoldEffect.GEM,
    Item.FIGHTING_GEM: HoldEffect.GEM,
    Item.FLYING_GEM: HoldEffect.GEM,
    Item.POISON_GEM: HoldEffect.GEM,
    Item.GROUND_GEM: HoldEffect.GEM,
    Item.ROCK_GEM: HoldEffect.GEM,
    Item.BUG_GEM: HoldEffect.GEM,
    Item.GHOST_GEM: HoldEffect.GEM,
    Item.STEEL_GEM: HoldEffect.GEM,
    Item.FIRE_GEM: HoldEffect.GEM,
    Item.WATER_GEM: HoldEffect.GEM,
    Item.GRASS_GEM: HoldEffect.GEM,
    Item.ELECTRIC_GEM: HoldEffect.GEM,
    Item.PSYCHIC_GEM: HoldEffect.GEM,
    Item.ICE_GEM: HoldEffect.GEM,
    Item.DRAGON_GEM: HoldEffect.GEM,
    Item.DARK_GEM: HoldEffect.GEM,
    Item.FAIRY_GEM: HoldEffect.GEM,
    # =============================================================================
    # FINAL DAMAGE
    # =============================================================================
    Item.EXPERT_BELT: HoldEffect.EXPERT_BELT,
    Item.LIFE_ORB: HoldEffect.LIFE_ORB,
    Item.METRONOME: HoldEffect.METRONOME,
    # Damage-halving berries
    Item.CHILAN_BERRY: HoldEffect.RESIST_BERRY,
    Item.CHOPLE_BERRY: HoldEffect.RESIST_BERRY,
    Item.COBA_BERRY: HoldEffect.RESIST_BERRY,
    Item.KEBIA_BERRY: HoldEffect.RESIST_BERRY,
    Item.SHUCA_BERRY: HoldEffect.RESIST_BERRY,
    Item.CHARTI_BERRY: HoldEffect.RESIST_BERRY,
    Item.TANGA_BERRY: HoldEffect.RESIST_BERRY,
    Item.KASIB_BERRY: HoldEffect.RESIST_BERRY,
    Item.BABIRI_BERRY: HoldEffect.RESIST_BERRY,
    Item.OCCA_BERRY: HoldEffect.RESIST_BERRY,
    Item.PASSHO_BERRY: HoldEffect.RESIST_BERRY,
    Item.RINDO_BERRY: HoldEffect.RESIST_BERRY,
    Item.WACAN_BERRY: HoldEffect.RESIST_BERRY,
    Item.PAYAPA_BERRY: HoldEffect.RESIST_BERRY,
    Item.YACHE_BERRY: HoldEffect.RESIST_BERRY,
    Item.HABAN_BERRY: HoldEffect.RESIST_BERRY,
    Item.COLBUR_BERRY: HoldEffect.RESIST_BERRY,
    Item.ROSELI_BERRY: HoldEffect.RESIST_BERRY,
    # =============================================================================
    # DEFENSIVE / SURVIVAL
    # =============================================================================
    Item.RING_TARGET: HoldEffect.RING_TARGET,  # Type immunities stop applying
    Item.AIR_BALLOON: HoldEffect.AIR_BALLOON,  # Ground immunity until popped
    Item.FOCUS_SASH: HoldEffect.FOCUS_SASH,  # Survive a KO from full HP (applied by the orchestrator)
}

# Type parameter for hold effects that act on one type (boosted type or resisted type)
ITEM_HOLD_EFFECT_PARAMS = {
    Item.SILK_SCARF: Type.NORMAL,
    Item.BLACK_BELT: Type.FIGHTING,
    Item.SHARP_BEAK: Type.FLYING,
    Item.POISON_BARB: Type.POISON,
    Item.SOFT_SAND: Type.GROUND,
    Item.HARD_STONE: Type.ROCK,
    Item.SILVER_POWDER: Type.BUG,
    Item.SPELL_TAG: Type.GHOST,
    Item.METAL_COAT: Type.STEEL,
    Item.CHARCOAL: Type.FIRE,
    Item.MYSTIC_WATER: Type.WATER,
    Item.MIRACLE_SEED: Type.GRASS,
    Item.MAGNET: Type.ELECTRIC,
    Item.TWISTED_SPOON: Type.PSYCHIC,
    Item.NEVER_MELT_ICE: Type.ICE,
    Item.DRAGON_FANG: Type.DRAGON,
    Item.BLACK_GLASSES: Type.DARK,
    Item.PIXIE_PLATE: Type.FAIRY,
    Item.NORMAL_GEM: Type.NORMAL,
    Item.FIGHTING_GEM: Type.FIGHTING,
    Item.FLYING_GEM: Type.FLYING,
    Item.POISON_GEM: Type.POISON,
    Item.GROUND_GEM: Type.GROUND,
    Item.ROCK_GEM: Type.ROCK,
    Item.BUG_GEM: Type.BUG,
    Item.GHOST_GEM: Type.GHOST,
    Item.STEEL_GEM: Type.STEEL,
    Item.FIRE_GEM: Type.FIRE,
    Item.WATER_GEM: Type.WATER,
    Item.GRASS_GEM: Type.GRASS,
    Item.ELECTRIC_GEM: Type.ELECTRIC,
    Item.PSYCHIC_GEM: Type.PSYCHIC,
    Item.ICE_GEM: Type.ICE,
    Item.DRAGON_GEM: Type.DRAGON,
    Item.DARK_GEM: Type.DARK,
    Item.FAIRY_GEM: Type.FAIRY,
    Item.CHILAN_BERRY: Type.NORMAL,  # Halves any Normal hit, not only super-effective ones
    Item.CHOPLE_BERRY: Type.FIGHTING,
    Item.COBA_BERRY: Type.FLYING,
    Item.KEBIA_BERRY: Type.POISON,
    Item.SHUCA_BERRY: Type.GROUND,
    Item.CHARTI_BERRY: Type.ROCK,
    Item.TANGA_BERRY: Type.BUG,
    Item.KASIB_BERRY: Type.GHOST,
    Item.BABIRI_BERRY: Type.STEEL,
    Item.OCCA_BERRY: Type.FIRE,
    Item.PASSHO_BERRY: Type.WATER,
    Item.RINDO_BERRY: Type.GRASS,
    Item.WACAN_BERRY: Type.ELECTRIC,
    Item.PAYAPA_BERRY: Type.PSYCHIC,
    Item.YACHE_BERRY: Type.ICE,
    Item.HABAN_BERRY: Type.DRAGON,
    Item.COLBUR_BERRY: Type.DARK,
    Item.ROSELI_BERRY: Type.FAIRY,
}


def get_hold_effect(item: Item) -> HoldEffect:
    """Get hold effect for an item"""
    return ITEM_HOLD_EFFECTS.get(item, HoldEffect.NONE)


def get_hold_effect_param(item: Item) -> Optional[Type]:
    """Get the type an item's hold effect is tied to, if any"""
    return ITEM_HOLD_EFFECT_PARAMS.get(item)
