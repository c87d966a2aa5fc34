class DamageEngineError(Exception):
    """Base class for every error raised by the damage engine"""


class DataError(DamageEngineError):
    """An identifier is unknown to the move/ability/item data repository"""


class InvalidStateError(DamageEngineError):
    """The caller handed the engine a snapshot that breaks its contract

    Raised for stat stages outside [-6, 6], negative or over-max HP and moves that
    cannot enter the damage formula. The engine never clamps these silently.
    """
