"""Exceptions raised for malformed engine inputs."""


class TileMergeError(ValueError):
    """Base class for every error raised by the engine."""


class InvalidBoardError(TileMergeError):
    """The grid has the wrong shape or holds a value that is not a power of two."""


class InvalidModeError(TileMergeError):
    """The win target is not a power of two greater than or equal to 4."""


class InvalidDirectionError(TileMergeError):
    """The value cannot be interpreted as a move direction."""
