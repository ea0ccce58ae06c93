"""
Record of a move that has been made.

Legality lives with the pieces (see pieces.py). A Move is only created once a piece actually moved.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.square import Coordinate

ORDINARY_SEPARATOR = "-"
CAPTURE_SEPARATOR = "x"


@dataclass
class Move:
    """basic definition of a move that was made"""

    from_coordinate: Coordinate
    to_coordinate: Coordinate
    captured: Optional[Coordinate] = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """
        Notation used in the move history
        ---

        examples:
        * "3,5-2,4": the piece on (3, 5) moved to (2, 4)
        * "2,2x4,4": the piece on (2, 2) jumped to (4, 4), capturing the piece on (3, 3)
        """
        if CAPTURE_SEPARATOR in notation:
            from_text, to_text = notation.split(CAPTURE_SEPARATOR)
            from_coordinate = Coordinate.from_notation(from_text)
            to_coordinate = Coordinate.from_notation(to_text)
            return cls(
                from_coordinate,
                to_coordinate,
                captured=from_coordinate.midpoint(to_coordinate),
            )

        from_text, to_text = notation.split(ORDINARY_SEPARATOR)
        return cls(Coordinate.from_notation(from_text), Coordinate.from_notation(to_text))

    def to_notation(self) -> str:
        separator = CAPTURE_SEPARATOR if self.is_capture else ORDINARY_SEPARATOR
        return f"{self.from_coordinate.to_notation()}{separator}{self.to_coordinate.to_notation()}"
