"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    SquareRequest,
)
from src.checkers.game import GameController
from src.checkers.pieces import Piece
from src.core.config import CheckersConfig, get_config, setup_logging
from src.core.exceptions import GameStateError, RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class CheckersService:
    """Orchestration of layers for a game of checkers."""

    def __init__(
        self, repository: GameRepository, config: Optional[CheckersConfig] = None
    ) -> None:
        self.repo = repository
        self.config = config or get_config()
        setup_logging(self.config)

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Set up a new game in the starting position (or the requested layout)."""

        new_game = GameController.new_game(
            size=request.board_size or self.config.board_size,
            starting_layout=request.starting_layout,
            first_turn=request.first_turn or self.config.first_turn,
        )
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)

        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by a frontend to check whose turn it is for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Squares the piece on the requested square can move to (to highlight them)."""

        stored_model = self._fetch_game(request.game_id)
        game = GameController.from_model(stored_model)
        piece = self._find_piece(game, request.piece)

        targets = game.legal_moves(piece)
        return LegalMovesResponse(
            game_id=request.game_id,
            color=piece.color,
            piece=request.piece,
            legal_moves=[SquareRequest(x=target.x, y=target.y) for target in targets],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Make a move attempt.
        ----

        Same as a player would do on screen: select the piece, then pick the target square.
        Rejected moves raise (and nothing gets stored).
        """
        stored_model = self._fetch_game(request.game_id)

        # collect whatever the game has to say about the move
        messages: list[str] = []
        game = GameController.from_model(stored_model, message_sink=messages.append)

        piece = self._find_piece(game, request.from_square)
        game.select_piece(piece)
        target = game.get_square(request.to_square.x, request.to_square.y)
        game.move_selected(target)

        after_move = game.to_model()
        self.repo.update_game(request.game_id, after_move)

        return self._create_game_response(request.game_id, after_move, messages)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _create_game_response(
        self, game_id: UUID, model: GameModel, messages: Optional[list[str]] = None
    ) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""

        # Before the first move gets played, the starting layout equals the current layout. Otherwise it is the first recorded layout.
        starting_layout = (
            model.history[0] if len(model.history) > 0 else model.current_position
        )
        return GameResponse(
            game_id=game_id,
            layout=model.current_position,
            current_turn=model.current_turn,
            starting_layout=starting_layout,
            move_history=model.moves,
            status=model.status,
            winner=model.winner,
            messages=messages or [],
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model

    def _find_piece(self, game: GameController, square: SquareRequest) -> Piece:
        piece = game.piece_at(square.x, square.y)
        if piece is None:
            raise GameStateError(f"There is no piece on ({square.x}, {square.y}).")
        return piece
