"""
Custom exceptions.

Everything the domain raises derives from GameError, so the service (and whatever sits on top of it)
can catch a single top-level type. MoveError subclasses are the user-recoverable ones: their message
is meant to be shown to the player as is.
"""


class GameError(Exception):
    """Top-level exception for anything going wrong in a game of checkers."""


# --- BOARD / GEOMETRY ---
class OutOfBoundsError(GameError):
    """Coordinate lies outside of the board."""


class OccupiedSquareError(GameError):
    """Tried to place a piece on a square that already holds one."""


class CaptureContractError(GameError):
    """A capture was executed on a target square that does not capture anything."""


class InvalidPositionError(GameError):
    """Text encoding of a board layout could not be parsed."""


# --- MOVES (reported to the player) ---
class MoveError(GameError):
    """A move attempt got rejected. Board and turn are left untouched."""


class DestinationOccupiedError(MoveError):
    pass


class IllegalMoveError(MoveError):
    pass


class NotYourTurnError(MoveError):
    pass


# --- GAME / SERVICE ---
class GameStateError(GameError):
    """Action is not allowed in the current state of the game."""


class RepositoryError(GameError):
    pass


class InvalidRequestError(GameError):
    """Raised by request model validators. Not a ValueError, so pydantic lets it through unwrapped."""
