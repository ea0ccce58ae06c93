"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Classic draughts board is 8x8. Configurable through CheckersConfig.board_size
DEFAULT_BOARD_SIZE = 8
MIN_BOARD_SIZE = 4
MAX_BOARD_SIZE = 20

# Pieces are referenced by id: squares record who stands on them, but do not own the piece
PieceId = int


@dataclass(frozen=True)
class Coordinate:
    """(0, 0) is the top-left corner, (size - 1, size - 1) the bottom-right corner"""

    x: int
    y: int

    @classmethod
    def from_notation(cls, text: str) -> Coordinate:
        """'3,5' --> Coordinate(3, 5)"""
        x, y = text.split(",")
        return cls(int(x), int(y))

    def to_notation(self) -> str:
        return f"{self.x},{self.y}"

    def is_within_bounds(self, size: int = DEFAULT_BOARD_SIZE) -> bool:
        return (0 <= self.x < size) and (0 <= self.y < size)

    def midpoint(self, other: Coordinate) -> Coordinate:
        return Coordinate((self.x + other.x) // 2, (self.y + other.y) // 2)

    def offset(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy)


@dataclass(eq=False)
class Square:
    """Fixed coordinate + whichever piece currently stands on it."""

    coordinate: Coordinate
    occupant: Optional[PieceId] = None

    @property
    def x(self) -> int:
        return self.coordinate.x

    @property
    def y(self) -> int:
        return self.coordinate.y

    def is_occupied(self) -> bool:
        return self.occupant is not None

    def __repr__(self) -> str:
        return f"Square({self.x}, {self.y}, occupant={self.occupant})"
