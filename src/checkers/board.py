"""The board is a spatial index: it owns the squares and the pieces in play, but knows nothing about the rules."""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.checkers.pieces import Piece
from src.checkers.position import (
    ROW_SEPARATOR,
    decode_row,
    encode_row,
    is_valid_layout,
    standard_layout,
)
from src.checkers.square import DEFAULT_BOARD_SIZE, Coordinate, PieceId, Square
from src.core.exceptions import (
    GameStateError,
    InvalidPositionError,
    OccupiedSquareError,
    OutOfBoundsError,
)
from src.core.shared_types import Color

logger = logging.getLogger(__name__)


@dataclass
class Board:
    size: int
    squares: dict[Coordinate, Square]
    pieces: dict[PieceId, Piece] = field(default_factory=dict)
    _next_id: int = field(default=0, repr=False)

    @classmethod
    def empty(cls, size: int = DEFAULT_BOARD_SIZE) -> Self:
        """All squares get created once, here. Only their occupancy changes afterwards."""
        squares = {
            Coordinate(x, y): Square(Coordinate(x, y))
            for y in range(size)
            for x in range(size)
        }
        return cls(size, squares)

    @classmethod
    def standard(cls, size: int = DEFAULT_BOARD_SIZE) -> Self:
        return cls.from_layout(standard_layout(size))

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from its text encoding (see position.py). The number of rows sets the board size."""
        if not is_valid_layout(layout):
            raise InvalidPositionError(f"Cannot read board layout: {layout!r}")

        rows = layout.split(ROW_SEPARATOR)
        board = cls.empty(len(rows))
        for y, row in enumerate(rows):
            for x, color in enumerate(decode_row(row)):
                if color is not None:
                    board.add_piece(color, x, y)
        return board

    def to_layout(self) -> str:
        """Rows are separated by slashes, top row first."""
        rows: list[str] = []
        for y in range(self.size):
            cells: list[str | None] = []
            for x in range(self.size):
                piece = self.piece_at(x, y)
                cells.append(piece.to_layout() if piece else None)
            rows.append(encode_row(cells))
        return ROW_SEPARATOR.join(rows)

    # --- LOOKUP ---
    def square_at(self, x: int, y: int) -> Square:
        coordinate = Coordinate(x, y)
        if not coordinate.is_within_bounds(self.size):
            raise OutOfBoundsError(
                f"Square ({x}, {y}) lies outside of the {self.size}x{self.size} board."
            )
        return self.squares[coordinate]

    def occupant(self, square: Square) -> Optional[Piece]:
        if square.occupant is None:
            return None
        return self.pieces[square.occupant]

    def piece_at(self, x: int, y: int) -> Optional[Piece]:
        return self.occupant(self.square_at(x, y))

    def square_of(self, piece: Piece) -> Square:
        return self.square_at(piece.x, piece.y)

    def is_in_play(self, piece: Piece) -> bool:
        return self.pieces.get(piece.id) is piece

    def owns(self, square: Square) -> bool:
        """True only for this board's own squares, not for equal looking ones of another board"""
        return self.squares.get(square.coordinate) is square

    def locate_color(self, color: Color) -> list[Piece]:
        return [piece for piece in self.pieces.values() if piece.color == color]

    def count_pieces(self) -> dict[Color, int]:
        """Tally the pieces each player still has on the board"""
        return {color: len(self.locate_color(color)) for color in Color}

    # --- OCCUPANCY ---
    def place(self, piece: Piece, square: Square) -> None:
        """Put a piece on an empty square. Callers make sure the square is free."""
        if square.is_occupied():
            raise OccupiedSquareError(
                f"Cannot place {piece} on ({square.x}, {square.y}): square is taken by {self.occupant(square)}."
            )
        square.occupant = piece.id

    def clear(self, square: Square) -> None:
        square.occupant = None

    def add_piece(self, color: Color, x: int, y: int) -> Piece:
        """Create a new piece and put it on the board (game setup)."""
        square = self.square_at(x, y)
        piece = Piece(self._next_id, color, x, y)
        self.place(piece, square)
        self.pieces[piece.id] = piece
        self._next_id += 1
        return piece

    def remove_piece(self, piece: Piece) -> None:
        """Captured: off the board and out of play for good."""
        self.clear(self.square_of(piece))
        del self.pieces[piece.id]
        logger.debug("Removed %s from play", piece)

    def relocate(self, piece: Piece, target: Square) -> None:
        """
        Update the position on the board
        ---

        Old square cleared, new square set and the piece's own coordinates updated, in one go.
        Checks happen before anything changes, so a failure leaves the board as it was.
        """
        origin = self.square_of(piece)
        if not self.owns(target):
            raise GameStateError(f"({target.x}, {target.y}) is not a square of this board.")
        if target.is_occupied():
            raise OccupiedSquareError(
                f"Cannot move {piece} to ({target.x}, {target.y}): square is taken."
            )
        self.clear(origin)
        self.place(piece, target)
        piece.x, piece.y = target.x, target.y
