"""
Text encoding of the pieces on a board. Used for storing games and for setting up a board quickly.
----

Works like the position part of a FEN string in chess:

<row y=0>/<row y=1>/.../<row y=size-1>

* 'r' is a red piece, 'b' a black piece
* a number denotes that many empty squares in a row (may have more than one digit on large boards)

ex) The standard starting position on an 8x8 board:
r1r1r1r1/1r1r1r1r/r1r1r1r1/8/8/1b1b1b1b/b1b1b1b1/1b1b1b1b
"""

import re

from src.checkers.pieces import CHAR_TO_COLOR, LAYOUT_CHAR
from src.checkers.square import DEFAULT_BOARD_SIZE, MAX_BOARD_SIZE, MIN_BOARD_SIZE
from src.core.shared_types import Color

ROW_SEPARATOR = "/"
ROW_TOKEN = re.compile(r"\d+|[rb]")


def is_playable(x: int, y: int) -> bool:
    """Pieces only ever stand on one color of squares"""
    return (x + y) % 2 == 0


def starting_rows(size: int) -> int:
    """Number of rows each player fills at the start. Leaves two empty rows in the middle."""
    return (size - 2) // 2


def tokenize_row(row: str) -> list[str]:
    return ROW_TOKEN.findall(row)


def row_width(row: str) -> int:
    return sum(int(token) if token.isdigit() else 1 for token in tokenize_row(row))


def is_valid_board_size(size: int) -> bool:
    """Even, and between MIN_BOARD_SIZE and MAX_BOARD_SIZE"""
    return MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE and size % 2 == 0


def is_valid_layout(layout: str) -> bool:
    """
    Check if given string follows the layout notation.
    ---

    * square board: as many rows as there are squares in every row
    * a supported board size (see is_valid_board_size)
    * rows only contain the piece characters and numbers
    """
    rows = layout.split(ROW_SEPARATOR)
    size = len(rows)
    if not is_valid_board_size(size):
        return False

    for row in rows:
        if "".join(tokenize_row(row)) != row:
            return False
        if row_width(row) != size:
            return False
    return True


def standard_layout(size: int = DEFAULT_BOARD_SIZE) -> str:
    """Starting position: Red on the top rows, Black on the bottom rows, on the playable squares only."""
    filled = starting_rows(size)
    rows: list[str] = []
    for y in range(size):
        if y < filled:
            color = Color.RED
        elif y >= size - filled:
            color = Color.BLACK
        else:
            rows.append(str(size))
            continue
        cells = [LAYOUT_CHAR[color] if is_playable(x, y) else None for x in range(size)]
        rows.append(encode_row(cells))
    return ROW_SEPARATOR.join(rows)


def encode_row(cells: list[str | None]) -> str:
    """None marks an empty square. Runs of empty squares get counted."""
    characters: list[str] = []
    empty_count = 0
    for cell in cells:
        if cell is None:
            empty_count += 1
            continue
        if empty_count > 0:
            characters.append(str(empty_count))
            empty_count = 0
        characters.append(cell)

    # if the entire row is empty, then we still place this number in the string
    if empty_count > 0:
        characters.append(str(empty_count))
    return "".join(characters)


def decode_row(row: str) -> list[Color | None]:
    cells: list[Color | None] = []
    for token in tokenize_row(row):
        if token.isdigit():
            cells.extend([None] * int(token))
        else:
            cells.append(CHAR_TO_COLOR[token])
    return cells
