"""Unit tests for /src/checkers/moves.py"""

import pytest

from src.checkers.moves import Move
from src.checkers.square import Coordinate


def test_ordinary_move_notation() -> None:
    move = Move(Coordinate(3, 5), Coordinate(2, 4))
    assert not move.is_capture
    assert move.to_notation() == "3,5-2,4"


def test_capture_notation() -> None:
    move = Move(Coordinate(2, 2), Coordinate(4, 4), captured=Coordinate(3, 3))
    assert move.is_capture
    assert move.to_notation() == "2,2x4,4"


@pytest.mark.parametrize("notation", ["3,5-2,4", "0,0-1,1", "2,2x4,4", "5,5x3,3"])
def test_parsing_notation(notation: str) -> None:
    assert Move.from_notation(notation).to_notation() == notation


def test_parsed_capture_knows_captured_square() -> None:
    """The captured piece stood halfway the jump"""
    move = Move.from_notation("5,5x3,3")
    assert move.captured == Coordinate(4, 4)
    assert move.from_coordinate == Coordinate(5, 5)
    assert move.to_coordinate == Coordinate(3, 3)
