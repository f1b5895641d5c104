# src/levelgen/errors.py


class LevelGenError(ValueError):
    """Base class for generation failures surfaced to the caller."""


class ConfigurationError(LevelGenError):
    pass


class EmptyWaypointError(LevelGenError):
    pass
