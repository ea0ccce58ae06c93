"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.checkers.position import is_valid_board_size, is_valid_layout
from src.checkers.square import MAX_BOARD_SIZE, MIN_BOARD_SIZE
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status

PieceColor = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    board_size: Optional[int] = None
    starting_layout: Optional[str] = None
    first_turn: Optional[Color] = None

    @field_validator("starting_layout")
    @classmethod
    def validate_starting_layout(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        layout = value.strip()
        if not is_valid_layout(layout):
            raise InvalidRequestError(
                f"Cannot interpret starting_layout: {value!r} as a square board layout."
            )
        return layout

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        if not is_valid_board_size(value):
            raise InvalidRequestError(
                f"board_size must be an even number from {MIN_BOARD_SIZE} to {MAX_BOARD_SIZE}, got {value}."
            )
        return value


class SquareRequest(BaseModel):
    """A square on the board, as picked by the player."""

    x: int = Field(ge=0)
    y: int = Field(ge=0)


class LegalMovesRequest(BaseModel):
    game_id: UUID
    piece: SquareRequest


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareRequest
    to_square: SquareRequest


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    layout: str
    current_turn: Color
    starting_layout: str
    move_history: list[str]
    status: Status
    winner: Optional[Color] = None
    messages: list[str] = Field(default_factory=list)


class LegalMovesResponse(BaseModel):
    game_id: UUID
    color: Color
    piece: SquareRequest
    legal_moves: list[SquareRequest]
