from enum import IntFlag


class Status1(IntFlag):
    """Non-volatile status conditions (at most one is set on a healthy snapshot)"""

    NONE = 0
    SLEEP = 1 << 0
    POISON = 1 << 1
    BURN = 1 << 2
    FREEZE = 1 << 3
    PARALYSIS = 1 << 4
    TOXIC_POISON = 1 << 5
    PSN_ANY = POISON | TOXIC_POISON
    ANY = SLEEP | POISON | BURN | FREEZE | PARALYSIS | TOXIC_POISON

    # =========================================================================
    # STATUS CHECK METHODS
    # =========================================================================

    def is_poisoned(self) -> bool:
        """Check if the combatant has any poison status"""
        return bool(self & self.PSN_ANY)

    def is_burned(self) -> bool:
        return bool(self & self.BURN)

    def is_paralyzed(self) -> bool:
        return bool(self & self.PARALYSIS)

    def has_major_status(self) -> bool:
        """Check if the combatant has any major status condition"""
        return bool(self & self.ANY)


class Status2(IntFlag):
    """Volatile conditions that matter to damage resolution"""

    NONE = 0
    CONFUSION = 1 << 0
    FLINCHED = 1 << 1
    ESCAPE_PREVENTION = 1 << 2  # Trapped (Mean Look, Block, binding moves)
    FOCUS_ENERGY = 1 << 3
    CHARGED = 1 << 4  # Charge: next Electric move doubles in power
    SUBSTITUTE = 1 << 5

    def is_confused(self) -> bool:
        return bool(self & self.CONFUSION)

    def has_focus_energy(self) -> bool:
        return bool(self & self.FOCUS_ENERGY)

    def is_charged(self) -> bool:
        """Check if Charge is pending for the next Electric-type move"""
        return bool(self & self.CHARGED)

