"""
Configuration of a game session.
"""

from dataclasses import dataclass, field
from math import isclose
from numbers import Integral

from tilemerge.core.errors import InvalidModeError, TileMergeError
from tilemerge.core.gameboard import TILE_SPAWN_PROBS
from tilemerge.core.gamemove import is_tile_value

# ##>: Win targets offered by the reference interface; any power of two >= 4 is accepted.
MODES: tuple[int, ...] = (2048, 4096, 8192)
DEFAULT_MODE = 2048

# ##>: Values a spawn may place.
SPAWN_VALUES = (2, 4)


def validate_mode(mode: int) -> int:
    """
    Check that ``mode`` is a usable win target.

    Parameters
    ----------
    mode : int
        The tile value that wins the game.

    Returns
    -------
    int
        The mode, as a plain integer.

    Raises
    ------
    InvalidModeError
        If the mode is not an integer power of two greater than or equal to 4.
    """
    if isinstance(mode, bool) or not isinstance(mode, Integral) or mode < 4 or not is_tile_value(mode):
        raise InvalidModeError(f'Mode must be a power of two >= 4, got {mode!r}')
    return int(mode)


def validate_spawn_probabilities(probabilities: dict[int, float]) -> dict[int, float]:
    """
    Check the values a spawn can place and their probabilities.

    Parameters
    ----------
    probabilities : dict[int, float]
        Spawned tile values mapped to their probabilities.

    Returns
    -------
    dict[int, float]
        A copy with plain integer keys and float probabilities.

    Raises
    ------
    TileMergeError
        If a value is not 2 or 4, a probability is negative or not a number,
        or the probabilities do not sum to 1.
    """
    if not probabilities:
        raise TileMergeError('At least one spawn value is required')

    checked = {}
    for value, probability in probabilities.items():
        if isinstance(value, bool) or value not in SPAWN_VALUES:
            raise TileMergeError(f'Spawn values must be 2 or 4, got {value!r}')
        try:
            probability = float(probability)
        except (TypeError, ValueError) as error:
            raise TileMergeError(f'Spawn probability for {value} is not a number: {probability!r}') from error
        if not probability >= 0:
            raise TileMergeError(f'Spawn probability for {value} must be non-negative, got {probability}')
        checked[int(value)] = probability

    if not isclose(sum(checked.values()), 1.0):
        raise TileMergeError('Spawn probabilities must sum to 1')
    return checked


@dataclass
class SessionConfig:
    """
    Session configuration.
    """

    mode: int = DEFAULT_MODE
    seed: int | None = None
    spawn_probabilities: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))

    def __post_init__(self):
        self.mode = validate_mode(self.mode)
        self.spawn_probabilities = validate_spawn_probabilities(self.spawn_probabilities)
