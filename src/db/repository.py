"""
Storage port of the service layer. The service only ever talks to this Protocol:
SQLGameRepository implements it on SQLAlchemy, the service tests use a dictionary.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from src.core.models import GameModel


@runtime_checkable
class GameRepository(Protocol):
    """Checkers games stored as GameModel records (layout text, turn, move notations), keyed by UUID"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """The stored game, or None for an unknown id."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a new game. Returns the stored record together with its new id."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the record after a move. None if there is nothing to overwrite."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Drop the record. Returns what was stored, None for an unknown id."""
        ...
