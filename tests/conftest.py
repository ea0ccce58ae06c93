"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import os
from typing import Callable, Generator

# The session factory in src/db/database.py connects on import: keep test runs off the default file database
os.environ.setdefault("CHECKERS_DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
from sqlalchemy import StaticPool, create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from src.checkers.board import Board  # noqa: E402
from src.core.shared_types import Color  # noqa: E402
from src.db.schema import Base  # noqa: E402

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

PiecePlacement = tuple[Color, int, int]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def board_with_pieces() -> Callable[..., Board]:
    """Call the inner function with (color, x, y) tuples to get an otherwise empty 8x8 board"""

    def _create_board(*placements: PiecePlacement, size: int = 8) -> Board:
        board = Board.empty(size)
        for color, x, y in placements:
            board.add_piece(color, x, y)
        return board

    return _create_board
