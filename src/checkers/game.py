"""
The GameController is the entrypoint into the domain layer, both for a presentation layer (a GUI calling in on clicks)
and for the service layer.
It orchestrates everything needed to play a turn: turn order, selecting a piece, asking the piece to move,
flipping the turn and telling the presentation layer what happened.

The presentation layer listens through two plain callables:
* message_sink: human-readable status / error messages
* board_sink: a MoveOutcome after every successful move (so pieces can be redrawn)
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Self

from src.checkers.board import Board
from src.checkers.moves import Move
from src.checkers.pieces import KINGS_NOT_IMPLEMENTED_MESSAGE, Piece
from src.checkers.square import DEFAULT_BOARD_SIZE, Coordinate, PieceId, Square
from src.checkers.turn import TurnState
from src.core.exceptions import GameStateError, MoveError, NotYourTurnError
from src.core.models import GameModel
from src.core.shared_types import Color, Status

logger = logging.getLogger(__name__)


@dataclass
class MoveOutcome:
    """What the presentation layer needs to refresh after a successful move."""

    move: Move
    piece: Piece
    current_turn: Color
    status: Status
    winner: Optional[Color] = None


MessageSink = Callable[[str], None]
BoardSink = Callable[[MoveOutcome], None]


def _ignore(_: object) -> None:
    """Default sink: nobody is listening."""


@dataclass
class GameController:
    # --- DOMAIN LAYER API CALLED BY PRESENTATION / SERVICE ---

    board: Board
    turn: TurnState
    moves: list[Move] = field(default_factory=list)
    history: list[str] = field(default_factory=list)  # list of layouts, before every move
    status: Status = Status.IN_PROGRESS
    winner: Optional[Color] = None
    selected: Optional[PieceId] = None
    message_sink: MessageSink = field(default=_ignore, repr=False)
    board_sink: BoardSink = field(default=_ignore, repr=False)

    @classmethod
    def new_game(
        cls,
        size: int = DEFAULT_BOARD_SIZE,
        starting_layout: Optional[str] = None,
        first_turn: Color = Color.BLACK,
        message_sink: MessageSink = _ignore,
        board_sink: BoardSink = _ignore,
    ) -> Self:
        """Standard starting position, unless a layout is given (which then also sets the size)."""
        board = (
            Board.from_layout(starting_layout)
            if starting_layout
            else Board.standard(size)
        )
        return cls(
            board=board,
            turn=TurnState(first_turn),
            message_sink=message_sink,
            board_sink=board_sink,
        )

    @classmethod
    def from_model(
        cls,
        model: GameModel,
        message_sink: MessageSink = _ignore,
        board_sink: BoardSink = _ignore,
    ) -> Self:
        """Define how to construct a game from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.value for status in Status])}"
            )
        color_names = [color.value for color in Color]
        if model.current_turn not in color_names:
            raise GameStateError(
                f"Invalid color to move: {model.current_turn!r}. \nPick one from {','.join(color_names)}"
            )
        if model.winner is not None and model.winner not in color_names:
            raise GameStateError(
                f"Invalid winner: {model.winner!r}. \nPick one from {','.join(color_names)}"
            )

        board = Board.from_layout(model.current_position)
        moves = [Move.from_notation(notation) for notation in model.moves]
        turn = TurnState(Color(model.current_turn), num_moves=len(moves))
        winner = Color(model.winner) if model.winner is not None else None

        return cls(
            board=board,
            turn=turn,
            moves=moves,
            history=list(model.history),
            status=Status[status_name],
            winner=winner,
            message_sink=message_sink,
            board_sink=board_sink,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            current_position=self.board.to_layout(),
            current_turn=self.turn.current_turn.value,
            history=list(self.history),
            moves=[move.to_notation() for move in self.moves],
            status=self.status.value,
            winner=self.winner.value if self.winner else None,
        )

    # --- QUERIES ---
    def get_square(self, x: int, y: int) -> Square:
        return self.board.square_at(x, y)

    def get_current_turn(self) -> Color:
        return self.turn.current_turn

    def piece_at(self, x: int, y: int) -> Optional[Piece]:
        return self.board.piece_at(x, y)

    @property
    def selected_piece(self) -> Optional[Piece]:
        if self.selected is None:
            return None
        return self.board.pieces.get(self.selected)

    def legal_moves(self, piece: Piece) -> list[Coordinate]:
        """Squares the piece can go to right now. Empty if it is not this piece's turn."""
        if self.status != Status.IN_PROGRESS or not self.turn.is_turn_of(piece.color):
            return []
        self._assert_in_play(piece)
        return piece.legal_targets(self.board)

    def has_legal_move(self, color: Color) -> bool:
        return any(
            piece.legal_targets(self.board) for piece in self.board.locate_color(color)
        )

    # --- ACTIONS ---
    def select_piece(self, piece: Piece) -> None:
        """
        Make the piece the active one. There is at most one active piece: selecting replaces the previous selection.
        Only pieces of the player whose turn it is can be selected.
        """
        self._assert_in_progress()
        self._assert_in_play(piece)
        self._assert_your_turn(piece)
        self.selected = piece.id

    def deselect(self) -> None:
        self.selected = None

    def move_selected(self, target: Square) -> MoveOutcome:
        """What a click on a square does: move the active piece there."""
        piece = self.selected_piece
        if piece is None:
            message = "No piece selected. Please select one of your pieces first."
            self.message_sink(message)
            raise GameStateError(message)
        return self.attempt_move(piece, target)

    def attempt_move(self, piece: Piece, target: Square) -> MoveOutcome:
        """
        Attempt to make a move
        -----

        1. make sure it is the turn of the piece's color (before looking at the move itself)
           and that the target square belongs to this game's board
        2. let the piece validate and make the move (board is only updated if the move is legal)
        3. update the history of moves / layouts
        4. flip the turn and drop the selection
        5. update game status (if needed)
        6. notify the presentation layer

        Rejected moves get reported through the message sink and re-raised. Nothing changes in that case.
        """
        self._assert_in_progress()
        self._assert_in_play(piece)
        self._assert_your_turn(piece)
        self._assert_on_board(target)

        layout_before = self.board.to_layout()
        try:
            move = piece.attempt_move(target, self.board)
        except MoveError as error:
            logger.debug("Rejected move of %s to %s: %s", piece, target, error)
            self.message_sink(str(error))
            raise

        logger.debug("%s moved %s", piece.color.value, move.to_notation())

        self.history.append(layout_before)
        self.moves.append(move)
        self.turn.flip()
        self.deselect()

        if piece.has_reached_back_row():
            # NOTE promotion to king is not part of the rules engine (yet). Only let the player know.
            self.message_sink(KINGS_NOT_IMPLEMENTED_MESSAGE)

        self._update_game_status(mover=piece.color)

        outcome = MoveOutcome(
            move=move,
            piece=piece,
            current_turn=self.turn.current_turn,
            status=self.status,
            winner=self.winner,
        )
        self.board_sink(outcome)
        return outcome

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _assert_in_play(self, piece: Piece) -> None:
        if not self.board.is_in_play(piece):
            raise GameStateError(f"{piece} is not in play on this board.")

    def _assert_on_board(self, square: Square) -> None:
        if not self.board.owns(square):
            raise GameStateError(f"({square.x}, {square.y}) is not a square of this game's board.")

    def _assert_your_turn(self, piece: Piece) -> None:
        """Only the pieces of the player to move are eligible. Checked before any move legality."""
        if self.turn.is_turn_of(piece.color):
            return
        error = NotYourTurnError(
            f"It is not your turn. Waiting for {self.turn.current_turn.value} to make a move first."
        )
        self.message_sink(str(error))
        raise error

    def _update_game_status(self, mover: Color) -> None:
        """
        Performs checks to see if game has ended and changes status accordingly.

        NOTE the turn has already been flipped. The opponent of the mover is now the one who should be able to move.
        """
        opponent = mover.opponent
        if self.board.count_pieces()[opponent] > 0 and self.has_legal_move(opponent):
            self.message_sink(f"It is {opponent.value}'s turn.")
            return

        self.status = Status.FINISHED
        self.winner = mover
        logger.info("Game finished after %d moves, %s wins", self.turn.num_moves, mover.value)
        self.message_sink(f"Game over: {mover.value} wins!")
