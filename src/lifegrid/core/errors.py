"""Exception types raised by the Game of Life engine and its collaborators."""


class LifeGridError(Exception):
    """Base class for all lifegrid errors."""


class ValidationError(LifeGridError, ValueError):
    """Invalid dimensions, cell values or run parameters."""


class SeedReadError(LifeGridError, OSError):
    """Seed source unreadable, truncated or not made of integer tokens."""


class ConcurrencyFailure(LifeGridError, RuntimeError):
    """A worker failed or timed out during an advance.

    The engine that raised it is left in the FAILED state and must not be
    reused.
    """


class EngineStateError(LifeGridError, RuntimeError):
    """Engine used while an advance is in progress or after it was closed."""
