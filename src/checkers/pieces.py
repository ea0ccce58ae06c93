"""
Checkers pieces and the movement/capturing rules they obey.

A piece only knows its color and where it stands. Everything else (who stands where) it asks the board.
Turn order is not the piece's business: the GameController checks it before asking a piece to move.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from src.checkers.moves import Move
from src.checkers.square import Coordinate, PieceId, Square
from src.core.exceptions import (
    CaptureContractError,
    DestinationOccupiedError,
    IllegalMoveError,
)
from src.core.shared_types import Color

# Black moves UP the board (towards y = 0), Red moves DOWN the board
FORWARD: dict[Color, int] = {
    Color.BLACK: -1,
    Color.RED: 1,
}

LAYOUT_CHAR: dict[Color, str] = {
    Color.RED: "r",
    Color.BLACK: "b",
}

CHAR_TO_COLOR: dict[str, Color] = {value: key for key, value in LAYOUT_CHAR.items()}

OCCUPIED_MESSAGE = (
    "That location is already occupied!\nPlease select a different location or piece."
)
ILLEGAL_MESSAGE = (
    "The piece can neither move nor capture to that position.\n"
    "Please try a different square."
)
KINGS_NOT_IMPLEMENTED_MESSAGE = "Kings are not yet implemented. Sorry!"


class Board(Protocol):
    """Just the parts the movement rules need"""

    size: int

    def square_at(self, x: int, y: int) -> Square: ...
    def occupant(self, square: Square) -> Optional["Piece"]: ...
    def relocate(self, piece: "Piece", target: Square) -> None: ...
    def remove_piece(self, piece: "Piece") -> None: ...


@dataclass(eq=False)
class Piece:
    id: PieceId
    color: Color
    x: int
    y: int

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y)

    @property
    def forward(self) -> int:
        return FORWARD[self.color]

    def to_layout(self) -> str:
        return LAYOUT_CHAR[self.color]

    def __repr__(self) -> str:
        return f"Piece({self.color.value} at {self.x}, {self.y})"

    # --- LEGALITY CHECKS (never mutate anything) ---
    def is_valid_ordinary_move(self, target: Square | Coordinate) -> bool:
        """One square diagonally forward. Backward or sideways is never allowed."""
        return target.y == self.y + self.forward and abs(target.x - self.x) == 1

    def find_captured_piece(self, target: Square, board: Board) -> Optional["Piece"]:
        """
        The piece that would be captured by jumping to the target square.
        ---

        The jump covers exactly two rows forward and two columns sideways,
        and the square in between must hold a piece (of either color: whatever stands there gets jumped).
        Returns None if no capture is possible (a plain answer, not an error).
        """
        is_jump = (
            target.y == self.y + 2 * self.forward and abs(target.x - self.x) == 2
        )
        if not is_jump:
            return None

        middle = self.coordinate.midpoint(Coordinate(target.x, target.y))
        return board.occupant(board.square_at(middle.x, middle.y))

    def legal_targets(self, board: Board) -> list[Coordinate]:
        """All empty squares this piece can reach by an ordinary move or a capture."""
        targets: list[Coordinate] = []
        for dx in (-1, 1):
            for step in (1, 2):
                candidate = self.coordinate.offset(dx * step, self.forward * step)
                if not candidate.is_within_bounds(board.size):
                    continue
                square = board.square_at(candidate.x, candidate.y)
                if square.is_occupied():
                    continue
                if step == 1 or self.find_captured_piece(square, board) is not None:
                    targets.append(candidate)
        return targets

    def has_reached_back_row(self) -> bool:
        """Would be the trigger for promotion to a king."""
        # TODO: Red reaching the bottom row should count too once kings get implemented
        return self.color == Color.BLACK and self.y == 0

    # --- MAKING THE MOVE ---
    def attempt_move(self, target: Square, board: Board) -> Move:
        """
        Try to move to the target square, capturing a piece if appropriate.
        ---

        1. Target occupied --> DestinationOccupiedError (landing on a piece never captures it)
        2. Ordinary move --> move
        3. Capture --> remove the captured piece, then move
        4. Anything else --> IllegalMoveError

        The board is only touched once the move is known to be legal.
        """
        if target.is_occupied():
            raise DestinationOccupiedError(OCCUPIED_MESSAGE)

        if self.is_valid_ordinary_move(target):
            return self._move(target, board)

        if self.find_captured_piece(target, board) is not None:
            return self._capture_move_to(target, board)

        raise IllegalMoveError(ILLEGAL_MESSAGE)

    def _move(self, target: Square, board: Board) -> Move:
        """Precondition: the move is legal and the target square is empty."""
        from_coordinate = self.coordinate
        board.relocate(self, target)
        return Move(from_coordinate, target.coordinate)

    def _capture_move_to(self, target: Square, board: Board) -> Move:
        """Precondition: moving to the target square captures a piece. Breaking this is a bug, so fail loudly."""
        captured = self.find_captured_piece(target, board)
        if captured is None:
            raise CaptureContractError(f"Cannot capture by moving to {target}")

        captured_at = captured.coordinate
        move = self._move(target, board)
        board.remove_piece(captured)
        move.captured = captured_at
        return move
