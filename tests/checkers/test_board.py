"""Unit tests for /src/checkers/board.py"""

from typing import Callable

import pytest

from src.checkers.board import Board, Coordinate
from src.checkers.pieces import Piece
from src.core.exceptions import (
    GameStateError,
    InvalidPositionError,
    OccupiedSquareError,
    OutOfBoundsError,
)
from src.core.shared_types import Color

STARTING_LAYOUT = "r1r1r1r1/1r1r1r1r/r1r1r1r1/8/8/1b1b1b1b/b1b1b1b1/1b1b1b1b"
EMPTY_LAYOUT = "/".join(["8"] * 8)

BoardFactory = Callable[..., Board]


# -- CREATION LOGIC ---
def test_empty_board_has_all_squares() -> None:
    board = Board.empty(8)
    assert len(board.squares) == 64
    assert board.pieces == {}
    for coordinate, square in board.squares.items():
        assert square.coordinate == coordinate
        assert not square.is_occupied()


def test_creating_board_in_starting_position() -> None:
    """12 pieces each, on the playable squares of their three rows"""
    board = Board.standard()
    assert board.size == 8
    assert board.count_pieces() == {Color.RED: 12, Color.BLACK: 12}

    for y in range(3):
        for x in range(8):
            piece = board.piece_at(x, y)
            if (x + y) % 2 == 0:
                assert piece is not None and piece.color == Color.RED
            else:
                assert piece is None

    for y in range(3, 5):
        assert all(board.piece_at(x, y) is None for x in range(8))

    for y in range(5, 8):
        for x in range(8):
            piece = board.piece_at(x, y)
            if (x + y) % 2 == 0:
                assert piece is not None and piece.color == Color.BLACK
            else:
                assert piece is None


def test_layout_roundtrip() -> None:
    assert Board.from_layout(STARTING_LAYOUT).to_layout() == STARTING_LAYOUT
    assert Board.from_layout(EMPTY_LAYOUT).to_layout() == EMPTY_LAYOUT


def test_layout_sets_board_size() -> None:
    board = Board.from_layout("r3/4/4/3b")
    assert board.size == 4
    assert board.piece_at(0, 0).color == Color.RED  # type: ignore[union-attr]
    assert board.piece_at(3, 3).color == Color.BLACK  # type: ignore[union-attr]


def test_invalid_layout() -> None:
    with pytest.raises(InvalidPositionError):
        Board.from_layout("r1r1r1r1/8/8")


def test_square_and_piece_point_at_each_other() -> None:
    """Every piece in play stands on the square that records its id"""
    board = Board.standard()
    for piece in board.pieces.values():
        assert board.square_of(piece).occupant == piece.id
        assert board.piece_at(piece.x, piece.y) is piece


# -- LOOKUP --
@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (8, 3), (3, 8), (100, 100)])
def test_square_out_of_bounds(x: int, y: int) -> None:
    board = Board.empty(8)
    with pytest.raises(OutOfBoundsError):
        board.square_at(x, y)


def test_square_at_returns_the_same_square() -> None:
    """Squares are created once, lookups never create new ones"""
    board = Board.empty(8)
    assert board.square_at(3, 5) is board.square_at(3, 5)
    assert board.square_at(3, 5).coordinate == Coordinate(3, 5)


def test_locate_color(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces((Color.RED, 0, 0), (Color.BLACK, 1, 7), (Color.RED, 2, 2))
    assert sorted((p.x, p.y) for p in board.locate_color(Color.RED)) == [(0, 0), (2, 2)]
    assert [(p.x, p.y) for p in board.locate_color(Color.BLACK)] == [(1, 7)]


# -- OCCUPANCY --
def test_place_on_occupied_square(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces((Color.RED, 2, 2))
    intruder = Piece(99, Color.BLACK, 2, 2)
    with pytest.raises(OccupiedSquareError):
        board.place(intruder, board.square_at(2, 2))
    assert board.square_at(2, 2).occupant != 99


def test_add_piece_on_occupied_square(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces((Color.RED, 2, 2))
    with pytest.raises(OccupiedSquareError):
        board.add_piece(Color.BLACK, 2, 2)
    assert board.count_pieces() == {Color.RED: 1, Color.BLACK: 0}


def test_clear_square(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces((Color.RED, 2, 2))
    board.clear(board.square_at(2, 2))
    assert board.piece_at(2, 2) is None


def test_piece_ids_are_unique() -> None:
    board = Board.standard()
    assert len({piece.id for piece in board.pieces.values()}) == 24


def test_relocate(board_with_pieces: BoardFactory) -> None:
    """Old square cleared, new square set, coordinates of the piece updated"""
    board = board_with_pieces((Color.BLACK, 3, 5))
    piece = board.piece_at(3, 5)
    assert piece is not None

    board.relocate(piece, board.square_at(2, 4))

    assert board.square_at(3, 5).occupant is None
    assert board.square_at(2, 4).occupant == piece.id
    assert (piece.x, piece.y) == (2, 4)


def test_relocate_onto_occupied_square_changes_nothing(
    board_with_pieces: BoardFactory,
) -> None:
    board = board_with_pieces((Color.BLACK, 3, 5), (Color.RED, 2, 4))
    piece = board.piece_at(3, 5)
    assert piece is not None
    layout_before = board.to_layout()

    with pytest.raises(OccupiedSquareError):
        board.relocate(piece, board.square_at(2, 4))

    assert board.to_layout() == layout_before
    assert (piece.x, piece.y) == (3, 5)


def test_relocate_to_square_of_another_board(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces((Color.BLACK, 3, 5))
    other = Board.empty()
    piece = board.piece_at(3, 5)
    assert piece is not None
    assert not board.owns(other.square_at(2, 4))

    with pytest.raises(GameStateError):
        board.relocate(piece, other.square_at(2, 4))

    assert board.piece_at(3, 5) is piece
    assert (piece.x, piece.y) == (3, 5)
    assert not other.square_at(2, 4).is_occupied()


def test_remove_piece(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces((Color.RED, 3, 3), (Color.BLACK, 5, 5))
    red = board.piece_at(3, 3)
    assert red is not None

    board.remove_piece(red)

    assert board.piece_at(3, 3) is None
    assert not board.is_in_play(red)
    assert board.count_pieces() == {Color.RED: 0, Color.BLACK: 1}
