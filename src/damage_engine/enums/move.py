from enum import IntEnum, IntFlag


class Move(IntEnum):
    """Move IDs (national move numbering) for the moves the repository knows about"""

    NONE = 0
    FIRE_PUNCH = 7
    GUST = 16
    STOMP = 23
    TACKLE = 33
    BODY_SLAM = 34
    DOUBLE_EDGE = 38
    EMBER = 52
    FLAMETHROWER = 53
    WATER_GUN = 55
    SURF = 57
    ICE_BEAM = 58
    BLIZZARD = 59
    LOW_KICK = 67
    SEISMIC_TOSS = 69
    DRAGON_RAGE = 82
    THUNDER_SHOCK = 84
    THUNDERBOLT = 85
    THUNDER = 87
    EARTHQUAKE = 89
    PSYCHIC = 94
    NIGHT_SHADE = 101
    SWIFT = 129
    SPORE = 147
    ROCK_SLIDE = 157
    SLASH = 163
    FLAIL = 175
    REVERSAL = 179
    PROTECT = 182
    MACH_PUNCH = 183
    SLUDGE_BOMB = 188
    DETECT = 197
    ENDURE = 203
    FURY_CUTTER = 210
    RETURN = 216
    FRUSTRATION = 218
    TWISTER = 239
    CRUNCH = 242
    SHADOW_BALL = 247
    FUTURE_SIGHT = 248
    WHIRLPOOL = 250
    FACADE = 263
    CHARGE = 268
    HELPING_HAND = 270
    BRICK_BREAK = 280
    KNOCK_OFF = 282
    ERUPTION = 284
    HYPER_VOICE = 304
    WEATHER_BALL = 311
    WATER_SPOUT = 323
    SKY_UPPERCUT = 327
    AERIAL_ACE = 332
    DRAGON_CLAW = 337
    DOOM_DESIRE = 353
    FEINT = 364
    CLOSE_COMBAT = 370
    ME_FIRST = 382
    FLARE_BLITZ = 394
    DARK_PULSE = 399
    DRAGON_RUSH = 407
    FOCUS_BLAST = 411
    FLASH_CANNON = 430
    STONE_EDGE = 444
    GRASS_KNOT = 447
    SHADOW_FORCE = 467
    WIDE_GUARD = 469
    SMACK_DOWN = 479
    STORM_THROW = 480
    HEAVY_SLAM = 484
    ECHOED_VOICE = 497
    STORED_POWER = 500
    QUICK_GUARD = 501
    HEX = 506
    ACROBATICS = 512
    BULLDOZE = 523
    FROST_BREATH = 524
    HEAT_CRASH = 535
    STEAMROLLER = 537
    HURRICANE = 542
    FLYING_PRESS = 560
    PHANTOM_FORCE = 566
    MOONBLAST = 585
    HYPERSPACE_HOLE = 593
    SPIKY_SHIELD = 596
    DAZZLING_GLEAM = 605
    THOUSAND_ARROWS = 614
    BREAKNECK_BLITZ = 621
    BANEFUL_BUNKER = 661
    POWER_TRIP = 681
    MALICIOUS_MOONSAULT = 696
    PSYCHIC_FANGS = 706
    DOUBLE_IRON_BASH = 742


class MoveTarget(IntFlag):
    """Move targeting"""

    SELECTED = 0  # Choose target manually
    RANDOM = 1 << 0  # Random opponent
    BOTH = 1 << 1  # Both opponents
    USER = 1 << 2  # Self only
    FOES_AND_ALLY = 1 << 3  # All except user
    USER_SIDE = 1 << 4  # User's side of the field

    def is_spread(self) -> bool:
        """Check if the move hits more than one target in a multi battle"""
        return bool(self & (MoveTarget.BOTH | MoveTarget.FOES_AND_ALLY))


class MoveFlag(IntFlag):
    """Move flags"""

    NONE = 0
    MAKES_CONTACT = 1 << 0  # Physical contact move
    PROTECT_AFFECTED = 1 << 1  # Blocked by Protect/Detect
    SOUND = 1 << 2  # Blocked by Soundproof
    BALLISTIC = 1 << 3  # Ball/bomb move, blocked by Bulletproof
    POWDER = 1 << 4
    PUNCH = 1 << 5  # Boosted by Iron Fist
    BITE = 1 << 6  # Boosted by Strong Jaw
    PULSE = 1 << 7  # Boosted by Mega Launcher
    RECOIL = 1 << 8  # Boosted by Reckless
    SECONDARY_EFFECT = 1 << 9  # Boosted by Sheer Force
    Z_MOVE = 1 << 10
    BREAKS_SCREENS = 1 << 11  # Brick Break, Psychic Fangs

    # =========================================================================
    # MOVE FLAG CHECK METHODS
    # =========================================================================

    def makes_contact(self) -> bool:
        """Check if move makes physical contact (triggers contact abilities/items)"""
        return bool(self & self.MAKES_CONTACT)

    def affected_by_protect(self) -> bool:
        """Check if move is blocked by Protect/Detect"""
        return bool(self & self.PROTECT_AFFECTED)

    def bypasses_protect(self) -> bool:
        """Check if move bypasses Protect/Detect"""
        return not self.affected_by_protect()

    def is_z_move(self) -> bool:
        return bool(self & self.Z_MOVE)

    def breaks_screens(self) -> bool:
        return bool(self & self.BREAKS_SCREENS)
